"""
Type classification helpers for marshalling decisions.
"""

from typing import Iterable

from ..parsers.symbols import strip_type_qualifiers

# Types qScriptValueFromValue converts directly, without a generated
# ToScriptValue_const_<T> routine.
POD_TYPES = frozenset([
    'bool', 'char', 'signed char', 'unsigned char', 'wchar_t',
    'short', 'unsigned short', 'int', 'unsigned', 'unsigned int',
    'long', 'unsigned long', 'long long', 'unsigned long long',
    'float', 'double', 'long double', 'size_t',
    'int8_t', 'uint8_t', 'int16_t', 'uint16_t',
    'int32_t', 'uint32_t', 'int64_t', 'uint64_t',
    'u8', 'u16', 'u32', 'u64', 's8', 's16', 's32', 's64', 'f32', 'f64',
    'qint8', 'quint8', 'qint16', 'quint16', 'qint32', 'quint32', 'qint64', 'quint64',
    'qreal', 'uint', 'QString',
])


class TypeClassifier:
    """Answers POD questions, optionally with project-specific extra types"""

    def __init__(self, extra_pod_types: Iterable[str] = ()):
        self._pod_types = POD_TYPES | frozenset(' '.join(t.split()) for t in extra_pod_types)

    def is_pod_type(self, type_str: str) -> bool:
        """Check if a type, with qualifiers stripped, is copied by value without recursion"""
        return strip_type_qualifiers(type_str) in self._pod_types


def marshal_type_name(type_str: str) -> str:
    """Name a type's generated marshalling routines use: the unqualified class name

    Examples:
        'const float3' -> 'float3'
        'math::Quat &' -> 'Quat'
    """
    return strip_type_qualifiers(type_str).split('::')[-1]
