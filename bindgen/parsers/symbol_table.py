"""
SymbolTable - the read-only symbol registry a generation run works from.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from .symbols import BaseSymbol, ClassSymbol
from .. import logger


class SymbolTable:
    """
    Maps fully qualified names to symbols.

    The table is populated once, from Doxygen XML or from already-built class
    symbols, and has no mutators afterwards. It is passed explicitly to every
    codegen call instead of living in a global.
    """

    def __init__(self, classes: Iterable[ClassSymbol] = ()):
        symbols: Dict[str, BaseSymbol] = {}
        for class_symbol in classes:
            self._register(symbols, class_symbol)
            for child in class_symbol.children:
                self._register(symbols, child)
        self._symbols: Mapping[str, BaseSymbol] = MappingProxyType(symbols)

    @staticmethod
    def _register(symbols: Dict[str, BaseSymbol], symbol: BaseSymbol):
        key = symbol.qualified_name or symbol.name
        # Overloads share a qualified name; the first declaration keeps the slot.
        if key not in symbols:
            symbols[key] = symbol

    @classmethod
    def load_from_doxygen(cls, xml_dir: Path) -> 'SymbolTable':
        """
        Build the table from a Doxygen XML output directory.

        Args:
            xml_dir: Directory containing index.xml and the compound files

        Raises:
            FileNotFoundError: If index.xml is missing
        """
        from .doxygen_parser import DoxygenParser

        logger.info(f"Loading symbols from Doxygen XML in {xml_dir}")
        parser = DoxygenParser(xml_dir)
        table = cls(parser.parse_classes())
        logger.info(f"Loaded {len(table)} symbols")
        return table

    def get_symbol(self, qualified_name: str) -> Optional[BaseSymbol]:
        """
        Get symbol by qualified name.

        Args:
            qualified_name: Fully qualified symbol name, e.g. 'Transform' or 'ns::Foo'
        """
        return self._symbols.get(qualified_name)

    def __contains__(self, qualified_name: str) -> bool:
        return qualified_name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)
