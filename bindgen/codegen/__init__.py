"""
QtScript binding code generation.
"""

from .binding_generator import BindingGenerator, HELPERS_HEADER_FILENAME
from .call_wrappers import CallWrapperGenerator
from .code_writer import CodeWriter
from .marshalling import MarshallingGenerator, MarshallingPlan
from .overloads import DispatchEntry, OverloadSet, SelectorGenerator, collect_overload_sets
from .prototype import PrototypeAssembler, PrototypeLayout
from .scriptability import is_scriptable
from .support_units import SupportUnitGenerator
from .type_utils import TypeClassifier

__all__ = [
    'BindingGenerator',
    'HELPERS_HEADER_FILENAME',
    'CallWrapperGenerator',
    'CodeWriter',
    'MarshallingGenerator',
    'MarshallingPlan',
    'DispatchEntry',
    'OverloadSet',
    'SelectorGenerator',
    'collect_overload_sets',
    'PrototypeAssembler',
    'PrototypeLayout',
    'is_scriptable',
    'SupportUnitGenerator',
    'TypeClassifier',
]
