"""
Command line entry point.

Usage:
    python -m bindgen XML_DIR OUTPUT_DIR CLASS [CLASS ...] [options]

Examples:
    # Generate bindings for two classes from Doxygen output
    python -m bindgen build/doxygen/xml src/bindings float3 Quat

    # Also write the helpers header and a unit exposing both classes
    python -m bindgen build/doxygen/xml src/bindings float3 Quat \
        --helpers --registration-unit RegisterMathBindings
"""

import argparse
import json
from pathlib import Path
from typing import List, Optional

from . import __version__, logger
from .codegen import BindingGenerator
from .generator_config import GeneratorConfig
from .parsers import SymbolTable

EXIT_OK = 0
EXIT_SKIPPED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='qscript-bindgen',
        description='Generate QtScript bindings for C++ classes from Doxygen XML')
    parser.add_argument('xml_dir', type=Path,
                        help='Doxygen XML output directory (containing index.xml)')
    parser.add_argument('output_dir', type=Path,
                        help='Directory to write the generated units to')
    parser.add_argument('classes', nargs='+', metavar='CLASS',
                        help='Qualified names of the classes to generate')
    parser.add_argument('--config', type=Path, default=None,
                        help='Settings file (default: ./bindgen.json when present)')
    parser.add_argument('--helpers', action='store_true',
                        help='Also write the helpers header into OUTPUT_DIR')
    parser.add_argument('--registration-unit', metavar='NAME', default=None,
                        help='Also write NAME.cpp exposing every generated class')
    parser.add_argument('--log-file', type=Path, default=None,
                        help='Write a full debug log to this file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print debug output on stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger.init_logging(args.log_file, args.verbose)

    try:
        config = GeneratorConfig.load(args.config)
        symbols = SymbolTable.load_from_doxygen(args.xml_dir)
    except (FileNotFoundError, KeyError, json.JSONDecodeError) as e:
        logger.error(f"Cannot start generation: {e}")
        return EXIT_USAGE

    generator = BindingGenerator(symbols, config)
    results = generator.generate_all(args.classes, args.output_dir)

    if args.helpers:
        generator.write_helpers_header(args.output_dir)
    if args.registration_unit:
        generator.write_registration_unit(args.registration_unit, results, args.output_dir)

    if all(r.generated for r in results):
        return EXIT_OK
    return EXIT_SKIPPED
