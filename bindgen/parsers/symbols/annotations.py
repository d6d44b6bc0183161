"""
Free-text annotation markers recognized in symbol comments.
"""

from typing import Iterable, Optional

NOSCRIPT_MARKER = "[noscript]"
OPAQUE_MARKER = "[opaque-qtscript]"


def has_marker(marker: str, comments: Iterable[str], return_comment: Optional[str] = None) -> bool:
    """Check whether marker occurs in any comment or in the return comment."""
    if any(marker in comment for comment in comments):
        return True
    return return_comment is not None and marker in return_comment
