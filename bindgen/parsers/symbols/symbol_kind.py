"""
Symbol kind and visibility enumerations for type-safe symbol classification.
"""

from enum import Enum


class SymbolKind(Enum):
    """Type-safe enumeration of the C++ symbol kinds the generator consumes."""
    CLASS = "class"
    STRUCT = "struct"
    FUNCTION = "function"
    VARIABLE = "variable"


class Visibility(Enum):
    """Access level of a class member, as Doxygen reports it in 'prot'."""
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
