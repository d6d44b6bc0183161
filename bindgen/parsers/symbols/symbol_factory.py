"""
Maps Doxygen kinds onto the symbol classes the generator works with.
"""

from typing import Callable, Dict

from .base_symbol import BaseSymbol
from .class_symbol import ClassSymbol
from .function_symbol import FunctionSymbol
from .symbol_kind import SymbolKind
from .variable_symbol import VariableSymbol


class SymbolFactory:
    """
    Creates empty symbols for the parser to fill in.

    Only the kinds a binding can be generated from are known; typedefs, enums,
    namespaces and the like are rejected so the parser can skip them.
    """

    _BUILDERS: Dict[SymbolKind, Callable[[], BaseSymbol]] = {
        SymbolKind.CLASS: lambda: ClassSymbol(kind=SymbolKind.CLASS),
        SymbolKind.STRUCT: lambda: ClassSymbol(kind=SymbolKind.STRUCT),
        SymbolKind.FUNCTION: FunctionSymbol,
        SymbolKind.VARIABLE: VariableSymbol,
    }

    @staticmethod
    def create(kind: SymbolKind) -> BaseSymbol:
        """
        Raises:
            ValueError: If no symbol class handles kind
        """
        builder = SymbolFactory._BUILDERS.get(kind)
        if builder is None:
            raise ValueError(f"Unsupported symbol kind: {kind}")
        return builder()

    @staticmethod
    def create_from_string(kind_str: str) -> BaseSymbol:
        """Create from a Doxygen 'kind' attribute such as 'struct' or 'variable'."""
        return SymbolFactory.create(SymbolKind(kind_str))
