"""
Member variable (field) symbol representation.
"""

from typing import Optional

from .base_symbol import BaseSymbol
from .parameter import has_top_level_const, strip_type_qualifiers
from .symbol_kind import SymbolKind, Visibility


class VariableSymbol(BaseSymbol):
    """
    Represents a C++ data member, static or not.

    A field is const when the member itself cannot be assigned: 'const int' and
    'Foo *const' are const, 'const Foo *' is not. Array extents such as '[3][3]'
    are reported by Doxygen apart from the type and kept in args_string.
    """

    def __init__(self, name: str = '', type: str = '', is_static: bool = False,
                 is_const: Optional[bool] = None, visibility: Visibility = Visibility.PUBLIC,
                 args_string: str = ''):
        if is_const is None:
            is_const = has_top_level_const(type)
        super().__init__(SymbolKind.VARIABLE, name, type, is_static, is_const, visibility)
        self.args_string = args_string

    def basic_type(self) -> str:
        """Declared type without cv/reference/pointer qualifiers."""
        return strip_type_qualifiers(self.type)
