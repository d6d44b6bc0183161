"""
Function parameter representation.
"""

import re

_LEADING_QUALIFIER = re.compile(r'^(?:const|volatile)\s+')
_TRAILING_QUALIFIER = re.compile(r'\s*(?:[*&]|\bconst\b|\bvolatile\b)$')
_INNERMOST_TEMPLATE_ARGS = re.compile(r'<[^<>]*>')

# Characters other than [A-Za-z0-9_] that show up in C++ type spellings.
# Escapes use only the letters s, n, l, g, m, p, r and x after the '_'.
_ESCAPES = {
    ' ': '_s',
    ':': '_n',
    '<': '_l',
    '>': '_g',
    ',': '_m',
    '*': '_p',
    '&': '_r',
}


def strip_type_qualifiers(type_str: str) -> str:
    """
    Strip top-level cv, reference and pointer qualifiers from a type.

    Examples:
        'const float3 &' -> 'float3'
        'Entity *' -> 'Entity'
        'const char *const' -> 'char'
        'QList<const Foo *>' -> 'QList<const Foo *>'
    """
    result = ' '.join(type_str.split())
    while True:
        stripped = _TRAILING_QUALIFIER.sub('', _LEADING_QUALIFIER.sub('', result)).strip()
        if stripped == result:
            return result
        result = stripped


def has_top_level_const(type_str: str) -> bool:
    """
    True if an object declared with this type is itself const.

    A const that applies to a pointee does not count; a reference is judged
    by the type it refers to, since it cannot be reseated anyway.

    Examples:
        'const int' -> True
        'const Foo *' -> False
        'Foo *const' -> True
        'const Foo &' -> True
        'QList<const Foo *>' -> False
    """
    text = ' '.join(type_str.split())
    while True:
        reduced = _INNERMOST_TEMPLATE_ARGS.sub('', text)
        if reduced == text:
            break
        text = reduced
    declarator = text.rstrip('& ').split('*')[-1]
    return 'const' in re.findall(r'\w+', declarator)


def canonical_type_id(type_str: str) -> str:
    """
    Encode a type spelling as a token usable inside a C identifier.

    Alphanumerics pass through, '_' is doubled and every other character is
    escaped, so distinct types always map to distinct tokens.

    Examples:
        'float3' -> 'float3'
        'unsigned int' -> 'unsigned_sint'
        'Foo::Bar' -> 'Foo_n_nBar'
        'entity_id_t' -> 'entity__id__t'
    """
    parts = []
    for ch in ' '.join(type_str.split()):
        if ch.isascii() and ch.isalnum():
            parts.append(ch)
        elif ch == '_':
            parts.append('__')
        elif ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        else:
            parts.append(f'_x{ord(ch):02X}')
    return ''.join(parts)


class Parameter:
    """
    A single function parameter as declared.

    Attributes:
        name: Declared parameter name (may be empty for unnamed parameters)
        type: Declared type, qualifiers included
    """

    def __init__(self, name: str, type: str):
        self.name = name
        self.type = type

    def basic_type(self) -> str:
        """Declared type without cv/reference/pointer qualifiers, used for matching."""
        return strip_type_qualifiers(self.type)

    def basic_type_id(self) -> str:
        """Canonical identifier token of the basic type."""
        return canonical_type_id(self.basic_type())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Parameter):
            return NotImplemented
        return self.name == other.name and self.type == other.type

    def __hash__(self) -> int:
        return hash((self.name, self.type))

    def __repr__(self) -> str:
        return f"Parameter({self.type} {self.name})"
