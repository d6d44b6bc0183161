"""
Base symbol class for representing C++ code entities.
"""

from abc import ABC
from typing import List, Optional, TYPE_CHECKING

from .annotations import NOSCRIPT_MARKER, OPAQUE_MARKER, has_marker
from .symbol_kind import SymbolKind, Visibility

if TYPE_CHECKING:
    from .class_symbol import ClassSymbol


class BaseSymbol(ABC):
    """
    Abstract base class for C++ symbols extracted from Doxygen XML.

    Contains the attributes shared by classes, functions and variables. The
    annotation flags (no_script, opaque_marshalling) are computed once when
    comments are attached via set_comments(); nothing downstream re-scans the
    comment text.

    args_string holds the declarator text Doxygen reports after the name: the
    parameter list of a function, the array extents of a field.
    """

    def __init__(self, kind: SymbolKind, name: str = '', type: str = '',
                 is_static: bool = False, is_const: bool = False,
                 visibility: Visibility = Visibility.PUBLIC):
        self.kind: SymbolKind = kind
        self.name: str = name
        self.qualified_name: str = name
        self.type: str = type
        self.args_string: str = ''
        self.is_static: bool = is_static
        self.is_const: bool = is_const
        self.visibility: Visibility = visibility
        self.parent: Optional['ClassSymbol'] = None
        self.file_path: str = ''
        self.line_start: int = 0
        self.comments: List[str] = []
        self.return_comment: Optional[str] = None
        self.no_script: bool = False
        self.opaque_marshalling: bool = False

    def set_comments(self, comments: List[str], return_comment: Optional[str] = None):
        """Attach annotation text and precompute the marker flags."""
        self.comments = list(comments)
        self.return_comment = return_comment
        self.no_script = has_marker(NOSCRIPT_MARKER, self.comments, self.return_comment)
        self.opaque_marshalling = has_marker(OPAQUE_MARKER, self.comments)

    @property
    def is_public(self) -> bool:
        return self.visibility == Visibility.PUBLIC

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.kind.value}: {self.qualified_name} at {self.file_path}:{self.line_start})"
