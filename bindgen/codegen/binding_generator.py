"""
Binding Generator - drives generation of one QtScript binding unit per class
"""

from pathlib import Path
from typing import Iterable, List, Optional

from .. import logger
from ..generator_config import GeneratorConfig
from ..parsers.symbol_table import SymbolTable
from ..parsers.symbols import ClassSymbol
from ..result import GenerationResult, ResultStatus
from .call_wrappers import CallWrapperGenerator
from .code_writer import CodeWriter
from .marshalling import MarshallingGenerator, MarshallingPlan
from .overloads import SelectorGenerator, collect_overload_sets, wrapped_functions
from .prototype import PrototypeAssembler, PrototypeLayout
from .support_units import SupportUnitGenerator
from .type_utils import TypeClassifier

HELPERS_HEADER_FILENAME = 'QtScriptBindingsHelpers.h'


class BindingGenerator:
    """
    Generates QtScript binding units from a SymbolTable.

    A unit for class C contains, in order: the helpers include, declarations of
    the snapshot routines it calls, ToExistingScriptValue_C, the call wrappers,
    the overload selectors, FromScriptValue_C, ToScriptValue_C,
    ToScriptValue_const_C and register_C_prototype.
    """

    def __init__(self, symbols: SymbolTable, config: Optional[GeneratorConfig] = None):
        """
        Args:
            symbols: Read-only registry to look classes up in
            config: Generation settings; defaults if None
        """
        self.symbols = symbols
        self.config = config or GeneratorConfig()
        self.classifier = TypeClassifier(self.config.extra_pod_types)
        self.marshalling = MarshallingGenerator()
        self.call_wrappers = CallWrapperGenerator()
        self.selectors = SelectorGenerator()
        self.assembler = PrototypeAssembler()
        self.support = SupportUnitGenerator()

    def _new_writer(self) -> CodeWriter:
        return CodeWriter(self.config.indent_size)

    def generate_class_source(self, class_symbol: ClassSymbol) -> str:
        """Build the complete binding unit text for a class. Deterministic for a given registry."""
        writer = self._new_writer()
        plan = MarshallingPlan(class_symbol, self.classifier)
        overload_sets = collect_overload_sets(class_symbol)

        writer.line(f'#include "{self.config.helpers_include}"')
        writer.line()

        self.marshalling.generate_forward_declarations(plan, writer)
        self.marshalling.generate_to_existing_script_value(plan, writer)

        for function in wrapped_functions(class_symbol, overload_sets):
            self.call_wrappers.generate(function, writer)

        for overload_set in overload_sets.values():
            self.selectors.generate(overload_set, writer)

        self.marshalling.generate_from_script_value(plan, writer)
        self.marshalling.generate_to_script_value(plan, writer)
        self.marshalling.generate_to_script_value_const(plan, writer)

        self.assembler.generate(PrototypeLayout(class_symbol, overload_sets), writer)
        return writer.output()

    def resolve_class(self, class_name: str) -> GenerationResult:
        """
        Look a class up without generating anything.

        Returns:
            A NOT_FOUND or NOT_A_CLASS result if the name cannot be generated,
            otherwise a GENERATED result with no output path.
        """
        if class_name not in self.symbols:
            return GenerationResult(class_name, ResultStatus.NOT_FOUND,
                                    f"Symbol '{class_name}' not found in the symbol table")
        symbol = self.symbols.get_symbol(class_name)
        if not isinstance(symbol, ClassSymbol):
            return GenerationResult(class_name, ResultStatus.NOT_A_CLASS,
                                    f"Symbol '{class_name}' is a {symbol.kind.value}, not a class or struct")
        return GenerationResult(class_name, ResultStatus.GENERATED, 'Found')

    def generate_class(self, class_name: str, output_dir: Path) -> GenerationResult:
        """
        Generate the binding unit of one class into output_dir.

        A name that is missing from the registry, or that names something other
        than a class or struct, is reported on stderr and skipped; no file is
        written for it.

        Args:
            class_name: Qualified name of the class in the registry
            output_dir: Directory to write the unit to (created if missing)
        """
        lookup = self.resolve_class(class_name)
        if not lookup.generated:
            logger.warning(f"Skipping {class_name}: {lookup.message}")
            return lookup

        class_symbol = self.symbols.get_symbol(class_name)
        source = self.generate_class_source(class_symbol)

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / self.config.output_filename(class_symbol.name)
        with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(source)

        logger.info(f"Generated {output_path}")
        return GenerationResult(class_name, ResultStatus.GENERATED,
                                f"Wrote {output_path.name}", output_path=str(output_path))

    def generate_all(self, class_names: Iterable[str], output_dir: Path) -> List[GenerationResult]:
        """Generate every named class; one result per name, in the given order."""
        results = [self.generate_class(name, output_dir) for name in class_names]
        generated = sum(1 for r in results if r.generated)
        logger.info(f"Generated {generated} of {len(results)} classes")
        return results

    def write_helpers_header(self, output_dir: Path) -> Path:
        """Write the helpers header every unit includes"""
        writer = self._new_writer()
        self.support.generate_helpers_header(writer)
        return self._write(Path(output_dir) / HELPERS_HEADER_FILENAME, writer.output())

    def write_registration_unit(self, unit_name: str, results: Iterable[GenerationResult], output_dir: Path) -> Path:
        """
        Write <unit_name>.cpp exposing every successfully generated class at once.

        Args:
            unit_name: File stem of the unit
            results: Results of a generate_all run; skipped classes are left out
            output_dir: Directory to write the unit to
        """
        names = []
        for result in results:
            if result.generated:
                names.append(self.symbols.get_symbol(result.class_name).name)
        writer = self._new_writer()
        self.support.generate_registration_unit(names, self.config.helpers_include, writer)
        return self._write(Path(output_dir) / f'{unit_name}.cpp', writer.output())

    @staticmethod
    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(text)
        logger.info(f"Generated {path}")
        return path
