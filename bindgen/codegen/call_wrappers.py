"""
Call wrapper generation module

Generates one QtScript-callable wrapper per scriptable function, static
function and constructor.
"""

from typing import List

from ..parsers.symbols import FunctionSymbol, Parameter
from .code_writer import CodeWriter
from .diagnostics import argument_count_error
from .marshalling import to_existing_script_value_name
from .overloads import wrapper_name

# Locals every wrapper may declare; parameters with these names get renamed.
_RESERVED_LOCALS = frozenset(['This', 'ret', 'context', 'engine'])

# Scripts sometimes get the built-in toString() called with the receiver as
# argument 0 instead of as thisObject.
TO_STRING = 'toString'


def local_name(param: Parameter, index: int) -> str:
    """C++ local variable holding the unmarshalled argument"""
    name = param.name or f'arg{index}'
    if name in _RESERVED_LOCALS:
        name += '_'
    return name


class CallWrapperGenerator:
    """Generates wrapper functions bridging QScriptContext calls to native calls"""

    def generate(self, function: FunctionSymbol, writer: CodeWriter):
        """Generate the wrapper for a function of a class"""
        class_name = function.parent.name
        name = wrapper_name(function)
        is_ctor = function.is_constructor
        is_to_string = function.name == TO_STRING
        param_count = len(function.parameters)

        with writer.block(f'static QScriptValue {name}(QScriptContext *context, QScriptEngine *engine)'):
            if not is_to_string:
                writer.line(f'if (context->argumentCount() != {param_count}) '
                            f'{argument_count_error(name, param_count)}')

            if not function.is_static and not is_ctor:
                self._gen_receiver(class_name, is_to_string, writer)

            # Unmarshal all parameters to the function.
            args: List[str] = []
            for i, param in enumerate(function.parameters):
                basic = param.basic_type()
                arg = local_name(param, i)
                writer.line(f'{basic} {arg} = qscriptvalue_cast<{basic}>(context->argument({i}));')
                args.append(arg)
            args_str = ', '.join(args)

            if is_ctor:
                if args:
                    writer.line(f'{class_name} ret({args_str});')
                else:
                    writer.line(f'{class_name} ret;')
            else:
                target = f'{class_name}::' if function.is_static else 'This.'
                call = f'{target}{function.name}({args_str});'
                if function.returns_void:
                    writer.line(call)
                else:
                    writer.line(f'{function.type} ret = {call}')

            # A non-const call may have changed the receiver; refresh the handle the script holds.
            if not function.is_const and not function.is_static and not is_ctor:
                writer.line(f'{to_existing_script_value_name(class_name)}(engine, This, context->thisObject());')

            if is_ctor or not function.returns_void:
                writer.line('return qScriptValueFromValue(engine, ret);')
            else:
                writer.line('return QScriptValue();')

    def _gen_receiver(self, class_name: str, is_to_string: bool, writer: CodeWriter):
        if is_to_string:
            writer.line(f'{class_name} This;')
            writer.line(f'if (context->argumentCount() > 0) '
                        f'This = qscriptvalue_cast<{class_name}>(context->argument(0));')
            writer.line(f'else This = qscriptvalue_cast<{class_name}>(context->thisObject());')
        else:
            writer.line(f'{class_name} This = qscriptvalue_cast<{class_name}>(context->thisObject());')
