"""
Prototype assembly.

Collects the per-class wrappers and selectors into the objects scripts see:
an instance prototype holding the member functions, and a constructor object
holding static functions and static fields, published globally under the
class name.
"""

from collections import OrderedDict
from typing import List, Set, Tuple

from ..parsers.symbols import ClassSymbol
from .code_writer import CodeWriter
from .marshalling import (
    READ_ONLY_UNDELETABLE, UNDELETABLE, from_script_value_name, to_script_value_name,
)
from .overloads import OverloadSet, scriptable_functions, selector_name
from .scriptability import is_scriptable


class FunctionBinding:
    """A function property: script-visible name -> C++ entry point with a declared length"""

    def __init__(self, name: str, target: str, length: int):
        self.name = name
        self.target = target
        self.length = length

    def __eq__(self, other) -> bool:
        if not isinstance(other, FunctionBinding):
            return NotImplemented
        return (self.name, self.target, self.length) == (other.name, other.target, other.length)

    def __repr__(self) -> str:
        return f"FunctionBinding({self.name} -> {self.target}/{self.length})"


class StaticProperty:
    """A static field exposed on the constructor object"""

    def __init__(self, name: str, read_only: bool):
        self.name = name
        self.read_only = read_only

    @property
    def flags(self) -> str:
        return READ_ONLY_UNDELETABLE if self.read_only else UNDELETABLE


def registration_function_name(class_name: str) -> str:
    return f'register_{class_name}_prototype'


class PrototypeLayout:
    """
    What the registration routine of a class binds.

    Attributes:
        instance_bindings: Member functions set on the prototype
        static_bindings: Static functions set on the constructor object
        static_properties: Static fields set on the constructor object
        ctor_target: Constructor selector the constructor object calls
        ctor_length: Largest parameter count among the constructors scripts can call
    """

    def __init__(self, class_symbol: ClassSymbol, overload_sets: 'OrderedDict[str, OverloadSet]'):
        self.class_name = class_symbol.name
        self.instance_bindings = self._bindings(class_symbol, overload_sets, static=False)
        self.static_bindings = self._bindings(class_symbol, overload_sets, static=True)
        self.static_properties = [
            StaticProperty(v.name, v.is_const)
            for v in class_symbol.variables()
            if v.is_static and v.is_public and is_scriptable(v)
        ]
        self.ctor_target = selector_name(class_symbol, class_symbol.name)
        ctor_candidates = overload_sets[class_symbol.name].candidates
        self.ctor_length = max((len(c.parameters) for c in ctor_candidates), default=0)

    @staticmethod
    def _bindings(class_symbol: ClassSymbol, overload_sets: 'OrderedDict[str, OverloadSet]',
                  static: bool) -> List[FunctionBinding]:
        bindings: List[FunctionBinding] = []
        registered: Set[Tuple[str, int]] = set()
        for function in scriptable_functions(class_symbol):
            if function.is_static != static or function.is_constructor:
                continue
            key = (function.name, len(function.parameters))
            if key in registered:
                continue
            registered.add(key)
            target = overload_sets[function.name].bound_name()
            bindings.append(FunctionBinding(function.name, target, len(function.parameters)))
        return bindings


class PrototypeAssembler:
    """Emits register_<C>_prototype from a PrototypeLayout"""

    def generate(self, layout: PrototypeLayout, writer: CodeWriter):
        c = layout.class_name
        with writer.block(f'QScriptValue {registration_function_name(c)}(QScriptEngine *engine)'):
            writer.line('QScriptValue proto = engine->newObject();')
            for binding in layout.instance_bindings:
                writer.line(self._function_property('proto', binding))

            writer.line(f'proto.setProperty("metaTypeId", engine->toScriptValue<qint32>((qint32)qMetaTypeId<{c}>()));')
            writer.line(f'engine->setDefaultPrototype(qMetaTypeId<{c}>(), proto);')
            writer.line(f'engine->setDefaultPrototype(qMetaTypeId<{c}*>(), proto);')
            writer.line(f'qScriptRegisterMetaType(engine, {to_script_value_name(c)}, {from_script_value_name(c)}, proto);')
            writer.line()

            writer.line(f'QScriptValue ctor = engine->newFunction({layout.ctor_target}, proto, {layout.ctor_length});')
            for binding in layout.static_bindings:
                writer.line(self._function_property('ctor', binding))
            for prop in layout.static_properties:
                writer.line(f'ctor.setProperty("{prop.name}", qScriptValueFromValue(engine, {c}::{prop.name}), {prop.flags});')

            writer.line(f'engine->globalObject().setProperty("{c}", ctor, {READ_ONLY_UNDELETABLE});')
            writer.line()
            writer.line('return ctor;')

    @staticmethod
    def _function_property(owner: str, binding: FunctionBinding) -> str:
        return (f'{owner}.setProperty("{binding.name}", engine->newFunction({binding.target}, {binding.length}), '
                f'{READ_ONLY_UNDELETABLE});')
