"""
Scriptability filter: decides which symbols can cross the script value boundary.

Script values carry primitives and whole-object handles only, so raw pointers
to primitives, arrays, C strings and standard library types are rejected. The
[noscript] annotation lets a header author opt a symbol out explicitly.
"""

from ..parsers.symbols import BaseSymbol, FunctionSymbol


def is_bad_type(type_str: str) -> bool:
    """Check a type spelling against the patterns that have no script representation"""
    return ('bool *' in type_str
            or type_str.endswith('float *')
            or type_str.endswith('float3 *')
            or 'std::' in type_str
            or 'char*' in type_str
            or 'char *' in type_str
            or '[' in type_str)


def is_scriptable(symbol: BaseSymbol) -> bool:
    """
    Decide whether a symbol can be exposed to scripts.

    Pure: looks only at the symbol's declared types, its declarator text
    (parameter list or array extents) and precomputed annotation flag.
    """
    if is_bad_type(symbol.type) or '[' in symbol.args_string:
        return False

    if isinstance(symbol, FunctionSymbol):
        for p in symbol.parameters:
            if is_bad_type(p.type) or is_bad_type(p.basic_type()):
                return False

    return not symbol.no_script
