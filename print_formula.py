#!/usr/bin/env python3
# print_formula.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Command-line interface for printing formulas with minimal parentheses

import sys
import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from formula import Formula, to_string
from parser import parse, ParseError
from utils.formula_reader import read_formula_file, FormulaFileError
from utils.logger import LogLevel, get_logger

EXIT_OK = 0
EXIT_PARSE_ERROR = 2
EXIT_FILE_ERROR = 3
EXIT_INTERRUPTED = 4
EXIT_UNEXPECTED = 5
EXIT_ROUND_TRIP_FAILED = 6


def configure_logging_for_printer(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging levels for the printer front end.

    Args:
        verbose: Enable INFO level logging
        debug: Enable DEBUG level logging (overrides verbose)
    """
    logger = get_logger()

    if debug:
        logger.set_level(LogLevel.DEBUG)
    elif verbose:
        logger.set_level(LogLevel.INFO)
    else:
        logger.set_level(LogLevel.WARNING)


def check_round_trip(formula: Formula) -> bool:
    """Check that re-parsing the rendering reproduces the same tree.

    Args:
        formula: Formula to check

    Returns:
        True if the re-parsed tree equals the original
    """
    text = to_string(formula)
    preserved = parse(text) == formula
    get_logger().round_trip_result(text, preserved)
    return preserved


def load_formulas(args: argparse.Namespace) -> List[Formula]:
    """Collect the formulas named on the command line.

    Args:
        args: Parsed command line arguments

    Returns:
        Formulas from ``--expr`` or ``--file``
    """
    if args.expr is not None:
        return [parse(args.expr)]
    return read_formula_file(args.file)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Print propositional formulas with minimal parentheses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python print_formula.py -e "((p & q) | r)"
  python print_formula.py -f formulas.txt --check
  python print_formula.py -f formulas.txt --debug

Formula file format:
  One formula per line; blank lines and lines starting with # are ignored.

  formulas.txt:
    # De Morgan
    ~(p & q) <=> (~p | ~q)
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-e", "--expr", help="Formula text to print")
    source.add_argument(
        "-f", "--file", type=Path, help="Path to a file with one formula per line"
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Verify that each rendering re-parses to the same formula",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the formula printer.

    Args:
        argv: Command line arguments, ``sys.argv[1:]`` when omitted

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_printer(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        formulas = load_formulas(args)
        logger.info(f"Loaded {len(formulas)} formula(s)")

        failures = 0
        for index, formula in enumerate(formulas, start=1):
            text = to_string(formula)
            logger.formula_rendered(index, text)
            print(text)

            if args.check and not check_round_trip(formula):
                failures += 1

        if failures:
            logger.error(f"{failures} formula(s) failed the round-trip check")
            return EXIT_ROUND_TRIP_FAILED

        return EXIT_OK

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return EXIT_PARSE_ERROR

    except FormulaFileError as e:
        logger.error(f"Formula file error: {e}")
        return EXIT_FILE_ERROR

    except KeyboardInterrupt:
        logger.error("Printing interrupted by user")
        return EXIT_INTERRUPTED

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())
