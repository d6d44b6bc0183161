"""
Overload disambiguation.

Same-named scriptable functions of a class form an OverloadSet. When a set
needs runtime dispatch, its selector is an ordered table of
(arity, basic parameter types) -> wrapper entries, scanned first-match-wins in
declaration order.
"""

from collections import OrderedDict
from typing import List, Optional, Sequence, Tuple

from ..parsers.symbols import ClassSymbol, FunctionSymbol, canonical_type_id
from .code_writer import CodeWriter
from .diagnostics import dispatch_error
from .scriptability import is_scriptable


def wrapper_name(function: FunctionSymbol) -> str:
    """
    Unique name of a function's concrete wrapper within its class.

    '<Class>_<name>' followed by '_a<type id>' per parameter and '_const' for
    const methods, with the function name escaped like a type id. An escaped
    identifier holds no single '_' and an escaped type never puts one before
    'a' or 'c', so no two wrappers of a class share a name and none matches
    a selector name.
    """
    name = f'{function.parent.name}_{canonical_type_id(function.name)}'
    name += ''.join(f'_a{p.basic_type_id()}' for p in function.parameters)
    if function.is_const:
        name += '_const'
    return name


def selector_name(class_symbol: ClassSymbol, function_name: str) -> str:
    """Name of the dispatching selector; the constructor's is '<Class>_<Class>_selector'."""
    return f'{class_symbol.name}_{canonical_type_id(function_name)}_selector'


def implicit_default_constructor(class_symbol: ClassSymbol) -> FunctionSymbol:
    """
    Constructor the compiler provides for a class that declares none.

    The returned symbol points at its class but is not one of its children.
    """
    ctor = FunctionSymbol(name=class_symbol.name)
    ctor.parent = class_symbol
    ctor.qualified_name = f'{class_symbol.qualified_name}::{class_symbol.name}'
    return ctor


class DispatchEntry:
    """One row of a selector's dispatch table"""

    def __init__(self, function: FunctionSymbol):
        self.function = function
        self.arity = len(function.parameters)
        self.basic_types: Tuple[str, ...] = tuple(p.basic_type() for p in function.parameters)
        self.wrapper_name = wrapper_name(function)

    def matches(self, argument_types: Sequence[str]) -> bool:
        return len(argument_types) == self.arity and tuple(argument_types) == self.basic_types

    def __repr__(self) -> str:
        return f"DispatchEntry({self.arity}, {self.basic_types} -> {self.wrapper_name})"


class OverloadSet:
    """
    All scriptable functions of one class sharing one name.

    Attributes:
        class_symbol: Owning class
        name: Function name shared by the candidates
        candidates: Scriptable candidates in declaration order
    """

    def __init__(self, class_symbol: ClassSymbol, name: str, candidates: List[FunctionSymbol]):
        self.class_symbol = class_symbol
        self.name = name
        self.candidates = candidates

    @property
    def is_constructor(self) -> bool:
        return self.name == self.class_symbol.name

    @property
    def needs_selector(self) -> bool:
        # The constructor always gets one so scripts see a stable entry point.
        return self.is_constructor or len(self.candidates) >= 2

    @property
    def selector_name(self) -> Optional[str]:
        return selector_name(self.class_symbol, self.name) if self.needs_selector else None

    def dispatch_table(self) -> List[DispatchEntry]:
        return [DispatchEntry(f) for f in self.candidates]

    def bound_name(self) -> str:
        """Name bound under the public function name: the selector if any, else the sole wrapper."""
        if self.needs_selector:
            return self.selector_name
        return wrapper_name(self.candidates[0])

    def resolve(self, argument_types: Sequence[str]) -> Optional[DispatchEntry]:
        """
        Pick the wrapper a call with the given argument types dispatches to.

        Mirrors the generated selector: first entry in declaration order whose
        arity and basic types all match, or None if nothing matches.
        """
        for entry in self.dispatch_table():
            if entry.matches(argument_types):
                return entry
        return None

    def __repr__(self) -> str:
        return f"OverloadSet({self.class_symbol.name}::{self.name}, {len(self.candidates)} candidates)"


def scriptable_functions(class_symbol: ClassSymbol) -> List[FunctionSymbol]:
    """Public functions of a class that get a wrapper, in declaration order."""
    return [f for f in class_symbol.functions()
            if f.is_public and not f.is_operator and not f.is_destructor and is_scriptable(f)]


def collect_overload_sets(class_symbol: ClassSymbol) -> 'OrderedDict[str, OverloadSet]':
    """
    Group the scriptable functions of a class by name.

    Sets are ordered by first declaration. The constructor set is always
    present: a class declaring no constructor gets the implicit default one,
    and a class whose constructors are all unscriptable or non-public gets an
    empty set.
    """
    sets: 'OrderedDict[str, OverloadSet]' = OrderedDict()
    for function in scriptable_functions(class_symbol):
        if function.name not in sets:
            sets[function.name] = OverloadSet(class_symbol, function.name, [])
        sets[function.name].candidates.append(function)

    if class_symbol.name not in sets:
        candidates = []
        if not class_symbol.constructors():
            candidates.append(implicit_default_constructor(class_symbol))
        sets[class_symbol.name] = OverloadSet(class_symbol, class_symbol.name, candidates)

    return sets


class SelectorGenerator:
    """Emits the dispatching selector function of an OverloadSet"""

    def generate(self, overload_set: OverloadSet, writer: CodeWriter):
        if not overload_set.needs_selector:
            return

        name = overload_set.selector_name
        with writer.block(f'static QScriptValue {name}(QScriptContext *context, QScriptEngine *engine)'):
            for entry in overload_set.dispatch_table():
                conditions = [f'context->argumentCount() == {entry.arity}']
                conditions.extend(f'QSVIsOfType<{basic}>(context->argument({i}))'
                                  for i, basic in enumerate(entry.basic_types))
                writer.line(f'if ({" && ".join(conditions)})')
                writer.indent()
                writer.line(f'return {entry.wrapper_name}(context, engine);')
                writer.dedent()

            class_name = overload_set.class_symbol.name if overload_set.is_constructor else None
            writer.line(dispatch_error(name, class_name))


def wrapped_functions(class_symbol: ClassSymbol, overload_sets: 'OrderedDict[str, OverloadSet]') -> List[FunctionSymbol]:
    """
    Every function that gets a concrete wrapper, in emission order.

    An implicit default constructor comes first, followed by the scriptable
    declared functions in declaration order.
    """
    ctor_set = overload_sets[class_symbol.name]
    implicit = [f for f in ctor_set.candidates if f not in class_symbol.children]
    return implicit + scriptable_functions(class_symbol)
