"""
Symbol hierarchy for the C++ entities a binding is generated from.

Symbols are built once (by DoxygenParser or directly in code) and treated as
read-only by everything downstream.
"""

from .symbol_kind import SymbolKind, Visibility
from .parameter import Parameter, strip_type_qualifiers, has_top_level_const, canonical_type_id
from .base_symbol import BaseSymbol
from .function_symbol import FunctionSymbol
from .variable_symbol import VariableSymbol
from .class_symbol import ClassSymbol
from .symbol_factory import SymbolFactory

__all__ = [
    'SymbolKind',
    'Visibility',
    'Parameter',
    'strip_type_qualifiers',
    'has_top_level_const',
    'canonical_type_id',
    'BaseSymbol',
    'FunctionSymbol',
    'VariableSymbol',
    'ClassSymbol',
    'SymbolFactory',
]
