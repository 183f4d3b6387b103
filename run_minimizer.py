#!/usr/bin/env python3
# run_minimizer.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Command-line interface for formula minimization with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import Optional

from logic.minimizer import MinimizationResult, VariableLimitError, minimize
from utils.config import DEFAULT_MAX_VARIABLES, EngineConfig
from utils.table_writer import format_consensus_table, write_consensus_csv
from utils.logger import configure_logging, get_logger
from parser.symbols import SYMBOL_TABLES
from parser.exceptions import ParseError


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula as string

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def configure_logging_for_minimizer(debug: bool = False) -> None:
    """Configure logging levels for the minimizer.

    Results are reported at INFO level, so the command line always runs
    with INFO enabled.

    Args:
        debug: Enable DEBUG level logging
    """
    configure_logging(verbose=True, debug=debug)


def print_result(result: MinimizationResult, show_table: bool) -> None:
    """Report the pipeline products.

    Args:
        result: Completed minimization
        show_table: Also print the full consensus table
    """
    logger = get_logger()

    logger.pipeline_start(result.formula_text, ", ".join(result.variables) or "(none)")

    if result.is_unsatisfiable:
        logger.info("❌ Formula is unsatisfiable, the cover is empty")
    elif result.dnf_differs:
        logger.info(f"🧮 DNF: {result.dnf_text}")

    if show_table and result.table is not None:
        logger.info("\n📊 Consensus table:")
        logger.info(format_consensus_table(result.table))

    logger.cover_found(result.minimized_text, len(result.cover))


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Quincy Boolean Consensus Minimizer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_minimizer.py "x and y or not y and z"
  python run_minimizer.py -f formula.txt --table
  python run_minimizer.py "x or y" --exhaustive --symbols unicode
  python run_minimizer.py "a and (b or c)" --csv table.csv --debug

Formula syntax:
  Keywords not, and, or; parentheses; constants true and false.
  Any other word is a variable, e.g.:
    not (p and q) or r
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("formula", nargs="?", help="Formula to minimize")
    source.add_argument("-f", "--file", type=Path, help="Path to a formula file")

    parser.add_argument(
        "--symbols",
        choices=sorted(SYMBOL_TABLES),
        default="ascii",
        help="Notation used for output (default: ascii)",
    )

    parser.add_argument(
        "--max-variables",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        help=f"Reject formulas with more variables (default: {DEFAULT_MAX_VARIABLES})",
    )

    parser.add_argument(
        "--exhaustive",
        action="store_true",
        help="Let the last table row take part in consensus as well",
    )

    parser.add_argument(
        "--table", action="store_true", help="Print the full consensus table"
    )

    parser.add_argument("--csv", type=Path, help="Write the consensus table to a CSV file")

    parser.add_argument(
        "--validate-only", action="store_true", help="Only check the formula syntax"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose report (includes the consensus table)"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the minimizer application.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_minimizer(debug=args.debug)
    logger = get_logger()

    try:
        text = read_formula_file(args.file) if args.file else args.formula
        config = EngineConfig.from_args(args)

        if args.validate_only:
            from parser import parse

            parse(text)
            logger.info("✅ Formula syntax is well-formed")
            return 0

        result = minimize(text, config)
        print_result(result, show_table=args.table or args.verbose)

        if args.csv:
            if result.table is None:
                logger.warning("⚠️  Formula is unsatisfiable, writing an empty table")
            count = write_consensus_csv(result.table or [], args.csv)
            logger.info(f"💾 Wrote {count} rows to {args.csv}")

        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except VariableLimitError as e:
        logger.error(f"Formula too large: {e}")
        return 4

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Input error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Minimization interrupted by user")
        return 5

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
