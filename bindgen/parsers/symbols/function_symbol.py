"""
Function symbol representation.
"""

from typing import List, Optional

from .base_symbol import BaseSymbol
from .parameter import Parameter
from .symbol_kind import SymbolKind, Visibility


class FunctionSymbol(BaseSymbol):
    """
    Represents a C++ member function, static function or constructor.

    Attributes:
        type: Return type as declared ('' for constructors)
        parameters: Ordered list of Parameter objects
        args_string: Parameter list text exactly as declared, e.g. '(float v[3]) const'.
                     Built from the parameters when not given.
    """

    def __init__(self, name: str = '', type: str = '',
                 parameters: Optional[List[Parameter]] = None, args_string: Optional[str] = None,
                 is_static: bool = False, is_const: bool = False,
                 visibility: Visibility = Visibility.PUBLIC):
        super().__init__(SymbolKind.FUNCTION, name, type, is_static, is_const, visibility)
        self.parameters: List[Parameter] = list(parameters or [])
        if args_string is None:
            args_string = '(' + ', '.join(f'{p.type} {p.name}'.strip() for p in self.parameters) + ')'
            if is_const:
                args_string += ' const'
        self.args_string = args_string

    @property
    def is_constructor(self) -> bool:
        return self.parent is not None and self.name == self.parent.name

    @property
    def is_destructor(self) -> bool:
        return self.name.startswith('~')

    @property
    def is_operator(self) -> bool:
        return self.name.startswith('operator')

    @property
    def returns_void(self) -> bool:
        return self.type.strip() in ('', 'void')
