"""
Marshalling code generation.

Emits the four conversion routines of a class between a native value and a
QScriptValue handle:

    ToExistingScriptValue_<C>   copy public fields onto an existing handle
    ToScriptValue_<C>           new mutable handle (usable as a call receiver)
    ToScriptValue_const_<C>     new read-only deep snapshot
    FromScriptValue_<C>         read public fields back into a native value

All four are driven by one MarshallingPlan, so the set of fields written to a
handle and the set read back from it cannot drift apart.
"""

from typing import List

from ..parsers.symbols import ClassSymbol, VariableSymbol
from .code_writer import CodeWriter
from .scriptability import is_scriptable
from .type_utils import TypeClassifier, marshal_type_name

UNDELETABLE = 'QScriptValue::Undeletable'
READ_ONLY_UNDELETABLE = 'QScriptValue::Undeletable | QScriptValue::ReadOnly'

# The variant contents are not read back; field data lives in the properties and,
# for opaque types, in data(). The variant lets overload resolution of QObject
# slots see the right type.
NEW_HANDLE = 'QScriptValue obj = engine->newVariant(QVariant::fromValue(value));'


def to_existing_script_value_name(class_name: str) -> str:
    return f'ToExistingScriptValue_{class_name}'


def to_script_value_name(class_name: str) -> str:
    return f'ToScriptValue_{class_name}'


def to_script_value_const_name(class_name: str) -> str:
    return f'ToScriptValue_const_{class_name}'


def from_script_value_name(class_name: str) -> str:
    return f'FromScriptValue_{class_name}'


class MarshalledField:
    """A public instance field as the marshalling routines see it"""

    def __init__(self, variable: VariableSymbol, classifier: TypeClassifier):
        self.name = variable.name
        self.type = variable.type
        self.basic_type = variable.basic_type()
        self.is_const = variable.is_const
        self.is_pod = classifier.is_pod_type(variable.type)

    @property
    def const_converter(self) -> str:
        """Routine producing this field's read-only snapshot"""
        if self.is_pod:
            return 'qScriptValueFromValue'
        return to_script_value_const_name(marshal_type_name(self.basic_type))

    @property
    def mutable_converter(self) -> str:
        """Routine used when writing onto a mutable handle"""
        # Const sub-objects are handed out as snapshots even on a mutable handle.
        if self.is_const and not self.is_pod:
            return self.const_converter
        return 'qScriptValueFromValue'

    @property
    def mutable_flags(self) -> str:
        return READ_ONLY_UNDELETABLE if self.is_const else UNDELETABLE

    def __repr__(self) -> str:
        return f"MarshalledField({self.type} {self.name})"


class MarshallingPlan:
    """
    Which fields of a class cross the boundary, and how.

    Attributes:
        fields: Public, non-static, scriptable fields in declaration order
        opaque: True if the whole value also travels as an opaque QVariant payload
    """

    def __init__(self, class_symbol: ClassSymbol, classifier: TypeClassifier):
        self.class_symbol = class_symbol
        self.class_name = class_symbol.name
        self.opaque = class_symbol.has_opaque_marshalling()
        self.fields: List[MarshalledField] = [
            MarshalledField(v, classifier)
            for v in class_symbol.variables()
            if is_scriptable(v) and v.is_public and not v.is_static
        ]

    def written_fields(self) -> List[MarshalledField]:
        """Fields set as properties by ToExistingScriptValue and ToScriptValue_const"""
        return list(self.fields)

    def read_fields(self) -> List[MarshalledField]:
        """Fields FromScriptValue assigns back; const fields cannot be assigned"""
        return [f for f in self.fields if not f.is_const]

    def const_converter_dependencies(self) -> List[MarshalledField]:
        """One non-POD field per distinct snapshot routine the unit calls, sorted by routine name"""
        by_converter = {}
        for field in self.fields:
            if not field.is_pod and field.const_converter not in by_converter:
                by_converter[field.const_converter] = field
        return [by_converter[name] for name in sorted(by_converter)]


class MarshallingGenerator:
    """Generates the conversion routines of a class from its MarshallingPlan"""

    def generate_forward_declarations(self, plan: MarshallingPlan, writer: CodeWriter):
        """Declare the snapshot routines of non-POD field types used below"""
        dependencies = plan.const_converter_dependencies()
        for field in dependencies:
            writer.line(f'QScriptValue {field.const_converter}(QScriptEngine *engine, const {field.basic_type} &value);')
        if dependencies:
            writer.line()

    def generate_to_existing_script_value(self, plan: MarshallingPlan, writer: CodeWriter):
        c = plan.class_name
        with writer.block(f'void {to_existing_script_value_name(c)}(QScriptEngine *engine, const {c} &value, QScriptValue obj)'):
            if plan.opaque:
                writer.line('obj.setData(engine->newVariant(QVariant::fromValue(value)));')
            for field in plan.written_fields():
                writer.line(f'obj.setProperty("{field.name}", {field.mutable_converter}(engine, value.{field.name}), '
                            f'{field.mutable_flags});')

    def generate_to_script_value(self, plan: MarshallingPlan, writer: CodeWriter):
        c = plan.class_name
        with writer.block(f'QScriptValue {to_script_value_name(c)}(QScriptEngine *engine, const {c} &value)'):
            writer.line(NEW_HANDLE)
            writer.line(f'{to_existing_script_value_name(c)}(engine, value, obj);')
            writer.line('return obj;')

    def generate_to_script_value_const(self, plan: MarshallingPlan, writer: CodeWriter):
        c = plan.class_name
        with writer.block(f'QScriptValue {to_script_value_const_name(c)}(QScriptEngine *engine, const {c} &value)'):
            writer.line(NEW_HANDLE)
            writer.line(f'obj.setPrototype(engine->defaultPrototype(qMetaTypeId<{c}>()));')
            if plan.opaque:
                writer.line('obj.setData(engine->newVariant(QVariant::fromValue(value)));')
            for field in plan.written_fields():
                writer.line(f'obj.setProperty("{field.name}", {field.const_converter}(engine, value.{field.name}), '
                            f'{READ_ONLY_UNDELETABLE});')
            writer.line('return obj;')

    def generate_from_script_value(self, plan: MarshallingPlan, writer: CodeWriter):
        c = plan.class_name
        with writer.block(f'void {from_script_value_name(c)}(const QScriptValue &obj, {c} &value)'):
            if plan.opaque:
                writer.line(f'value = obj.data().toVariant().value<{c}>();')
            for field in plan.read_fields():
                writer.line(f'value.{field.name} = qScriptValueToValue<{field.basic_type}>(obj.property("{field.name}"));')
