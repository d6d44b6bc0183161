"""
Emitted runtime diagnostics.

Generated wrappers never print directly. A failure is packaged as an
InvocationError (message plus the script call stack) and handed to
ReportInvocationError, which the host implements and which returns the
absent value QScriptValue().
"""

from typing import Optional


def cpp_string(text: str) -> str:
    """Quote text as a C++ string literal"""
    escaped = text.replace('\\', '\\\\').replace('"', '\\"').replace('\n', '\\n')
    return f'"{escaped}"'


def report_invocation_error(message_expr: str) -> str:
    """Statement returning a reported InvocationError built from a QString expression"""
    return f'return ReportInvocationError(context, InvocationError({message_expr}, context->backtrace()));'


def argument_count_error(wrapper_name: str, expected: int) -> str:
    """Statement reporting a wrong argument count for wrapper_name"""
    message = f'Invalid number of arguments passed to function {wrapper_name}! Expected {expected}, but got %1!'
    return report_invocation_error(f'QString({cpp_string(message)}).arg(context->argumentCount())')


def dispatch_error(selector_name: str, class_name: Optional[str] = None) -> str:
    """Statement reporting that no overload matched; class_name adds the missing 'new' hint"""
    if class_name is not None:
        message = (f"{selector_name} failed to choose the right function to call! "
                   f"Did you use 'var x = {class_name}();' instead of 'var x = new {class_name}();'?")
    else:
        message = f'{selector_name} failed to choose the right function to call!'
    return report_invocation_error(f'QString({cpp_string(message)})')
