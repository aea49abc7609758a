#!/usr/bin/env python3
"""
wirechecker
-----------
Reports Wire provider functions that call methods on their own dependencies
instead of only wiring them together. Provider functions are the functions
called from the `Initialize*` injectors of a generated wire_gen.go.

USAGE EXAMPLES
--------------
# 1) Check the providers of one package:
wirechecker --wire-gen pkg/server/wire_gen.go pkg/services/store

# 2) Also follow calls from providers into the rest of the package:
wirechecker --wire-gen pkg/server/wire_gen.go --recursive pkg/services/store

# 3) Read settings from golangci-style JSON ({"wire-gen": ..., "recursive": ...}):
wirechecker --config wirecheck.json pkg/services/store

EXIT STATUS
-----------
0 when nothing was reported, 3 when diagnostics were printed, 1 on errors.
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional

from wire_check.checker import DOC, NAME, WireChecker
from wire_check.config import Settings
from wire_check.exceptions import PackageLoadError, SettingsError
from wire_check.inputs.directory_scanning import load_package
from wire_check.models.ast_models import Diagnostic
from wire_check.outputs.output import print_diagnostics, to_json
from wire_check.parser import GoParser

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_DIAGNOSTICS = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=NAME, description=DOC)
    parser.add_argument(
        "packages",
        nargs="+",
        metavar="DIR",
        help="Directories of the Go packages to analyze",
    )
    parser.add_argument(
        "--wire-gen",
        default=None,
        help="path to wire_gen.go file to analyze provider functions from",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        default=None,
        help="enable recursive analysis of function calls",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file with analyzer settings; flags take precedence",
    )
    parser.add_argument(
        "--tests",
        action="store_true",
        default=False,
        help="Also load _test.go files",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print diagnostics as JSON",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=False,
        help="Enable verbose logging",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_json_file(args.config) if args.config else Settings()
    if args.wire_gen is not None:
        settings = replace(settings, wire_gen=args.wire_gen or None)
    if args.recursive is not None:
        settings = replace(settings, recursive=args.recursive)
    return settings


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        settings = resolve_settings(args)
    except SettingsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    go_parser = GoParser()
    checker = WireChecker(settings, parser=go_parser)

    diagnostics: list[Diagnostic] = []
    for directory in args.packages:
        try:
            package = load_package(directory, go_parser, include_tests=args.tests)
        except PackageLoadError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_ERROR
        diagnostics.extend(checker.run(package))

    if args.json:
        print(to_json(diagnostics))
    else:
        print_diagnostics(diagnostics)
    return EXIT_DIAGNOSTICS if diagnostics else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
