"""
Class and struct symbol representation.
"""

from typing import List

from .base_symbol import BaseSymbol
from .function_symbol import FunctionSymbol
from .symbol_kind import SymbolKind
from .variable_symbol import VariableSymbol


class ClassSymbol(BaseSymbol):
    """
    Represents a C++ class or struct symbol.

    Attributes:
        children: Member functions and variables in source declaration order.
                  The order matters: it is the tie-break for overload dispatch
                  and fixes the layout of the generated code.
    """

    def __init__(self, name: str = '', kind: SymbolKind = SymbolKind.CLASS):
        if kind not in (SymbolKind.CLASS, SymbolKind.STRUCT):
            raise ValueError(f"ClassSymbol requires CLASS or STRUCT kind, got {kind}")
        super().__init__(kind, name)
        self.children: List[BaseSymbol] = []

    def add_child(self, child: BaseSymbol) -> BaseSymbol:
        """Append a member, making this class its parent."""
        if isinstance(child, ClassSymbol):
            raise TypeError(f"Nested class {child.name} cannot be a member of {self.name}")
        if child.parent is not None:
            raise ValueError(f"{child.name} already belongs to {child.parent.name}")
        child.parent = self
        if not child.qualified_name or child.qualified_name == child.name:
            prefix = self.qualified_name or self.name
            child.qualified_name = f"{prefix}::{child.name}"
        self.children.append(child)
        return child

    def functions(self) -> List[FunctionSymbol]:
        return [c for c in self.children if isinstance(c, FunctionSymbol)]

    def variables(self) -> List[VariableSymbol]:
        return [c for c in self.children if isinstance(c, VariableSymbol)]

    def functions_named(self, name: str) -> List[FunctionSymbol]:
        return [f for f in self.functions() if f.name == name]

    def constructors(self) -> List[FunctionSymbol]:
        return self.functions_named(self.name)

    def has_opaque_marshalling(self) -> bool:
        """True if the first declared constructor carries the [opaque-qtscript] marker."""
        ctors = self.constructors()
        return bool(ctors) and ctors[0].opaque_marshalling
