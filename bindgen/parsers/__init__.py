"""
Symbol loading: the Doxygen XML reader and the symbol registry it fills.
"""

from .doxygen_parser import DoxygenParser
from .symbol_table import SymbolTable
from .symbols import (
    SymbolKind, Visibility, Parameter, BaseSymbol, FunctionSymbol, VariableSymbol,
    ClassSymbol, SymbolFactory,
)

__all__ = ['DoxygenParser', 'SymbolTable', 'SymbolKind', 'Visibility', 'Parameter',
           'BaseSymbol', 'FunctionSymbol', 'VariableSymbol', 'ClassSymbol', 'SymbolFactory']
