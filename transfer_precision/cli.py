#!/usr/bin/env python3
"""
transfer-precision - compare composite and decomposed transfer functions.

Enumerates every interval of a bit width, runs both lifts of an operation
on each one and prints how often each was more precise.
"""
from __future__ import annotations

import argparse
import sys

from loguru import logger

from transfer_precision.driver import run_comparison
from transfer_precision.transfer import OPERATIONS, make_transfer_pair

DEFAULT_BITWIDTH = 5
DEFAULT_OPERATION = "abs"


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = "DEBUG" if verbose else "WARNING" if quiet else "INFO"
    logger.remove()
    logger.add(sys.stderr, format="[{level}] {message}", level=level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transfer-precision",
        description="Exhaustively compare composite and decomposed interval transfer functions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Absolute value over 5-bit signed integers
  python -m transfer_precision

  # Negation over 4-bit integers, tracing every range
  python -m transfer_precision --bitwidth 4 --operation neg -v
        """
    )
    parser.add_argument("--bitwidth", "-w", type=int, default=DEFAULT_BITWIDTH,
                        help=f"Width of the signed integers (default: {DEFAULT_BITWIDTH})")
    parser.add_argument("--operation", choices=sorted(OPERATIONS), default=DEFAULT_OPERATION,
                        help=f"Operation under test (default: {DEFAULT_OPERATION})")
    parser.add_argument("--int-min-is-poison", action="store_true",
                        help="Leave signed_min out of the composite abs result")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log the outcome for every abstract value")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only log warnings and errors")
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        composite, decomposed = make_transfer_pair(
            args.operation, int_min_is_poison=args.int_min_is_poison
        )
        result = run_comparison(args.bitwidth, composite, decomposed)
    except ValueError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    print(f"Analysis for signed integers with bitwidth {args.bitwidth}:")
    result.print()


if __name__ == "__main__":
    main()
