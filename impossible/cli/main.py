"""
Impossible Programs CLI.

Commands:
    impossible demo                   — Evaluate the example equalities and moduli
    impossible equal <f> <g>          — Decide whether two example functions agree
    impossible modulus <f>            — Smallest prefix length determining <f>
    impossible evaluate <f> <bits>    — Run <f> on a finite bit string

Example functions are looked up by name (see impossible.examples).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Union

from .. import config
from ..combinators import equal, modulus
from ..errors import InvariantViolation
from ..examples import EXAMPLE_FUNCTIONS, get_example
from ..search import Enumeration
from ..sequences import StrictBitSequence
from .harness import ExpressionResult, run_demo
from .timing import Timer


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_bit(value: bool) -> str:
    """Format a bit as ``true``/``false``."""
    return "true" if value else "false"


def format_value(value: Union[bool, int]) -> str:
    """Bits print as true/false, naturals as digits."""
    if isinstance(value, bool):
        return format_bit(value)
    return str(value)


def format_expr(expression: str, value: Union[bool, int]) -> str:
    """Format ``<expression> = <value>``."""
    return f"{expression} = {format_value(value)}"


def print_result(result: ExpressionResult) -> None:
    print(format_expr(result.expression, result.value))


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_demo(args: argparse.Namespace) -> int:
    """Evaluate and print every demo expression."""
    with Timer("demo"):
        run_demo(args.enumeration, on_result=print_result)
    return 0


def cmd_equal(args: argparse.Namespace) -> int:
    """Decide whether two example functions agree everywhere."""
    f_a = get_example(args.f)
    f_b = get_example(args.g)

    with Timer("equal"):
        value = equal(f_a, f_b, args.enumeration)
        print(format_expr(f"Equal({args.f}, {args.g})", value))
    return 0


def cmd_modulus(args: argparse.Namespace) -> int:
    """Compute the modulus of continuity of an example function."""
    fn = get_example(args.f)

    with Timer("modulus"):
        value = modulus(fn, args.enumeration)
        print(format_expr(f"Modulus({args.f})", value))
    return 0


def cmd_evaluate(args: argparse.Namespace) -> int:
    """Evaluate an example function on a finite bit string."""
    fn = get_example(args.f)
    seq = StrictBitSequence.from_string(args.bits)

    value = fn(seq)
    print(format_expr(f"{args.f}({args.bits})", value))
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="impossible",
        description="Exhaustive search over infinite bit sequences",
    )
    parser.add_argument(
        "--enumeration",
        choices=[e.value for e in Enumeration],
        default=config.ENUMERATION,
        help="Order in which candidate assignments are visited",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log search progress (-vv for engine debug output)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    names = sorted(EXAMPLE_FUNCTIONS)

    # Demo command
    demo_parser = subparsers.add_parser(
        "demo",
        help="Evaluate the example equalities and moduli",
    )
    demo_parser.set_defaults(func=cmd_demo)

    # Equal command
    equal_parser = subparsers.add_parser(
        "equal",
        help="Decide whether two example functions agree on every sequence",
    )
    equal_parser.add_argument("f", choices=names, help="First function")
    equal_parser.add_argument("g", choices=names, help="Second function")
    equal_parser.set_defaults(func=cmd_equal)

    # Modulus command
    modulus_parser = subparsers.add_parser(
        "modulus",
        help="Smallest prefix length that determines a function",
    )
    modulus_parser.add_argument("f", choices=names, help="Function")
    modulus_parser.set_defaults(func=cmd_modulus)

    # Evaluate command
    evaluate_parser = subparsers.add_parser(
        "evaluate",
        help="Evaluate a function on a finite bit string",
    )
    evaluate_parser.add_argument("f", choices=names, help="Function")
    evaluate_parser.add_argument("bits", help="Bit string, e.g. 0000100110001")
    evaluate_parser.set_defaults(func=cmd_evaluate)

    return parser


def configure_logging(verbosity: int) -> None:
    """Map -v counts onto log levels; the default comes from config."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    try:
        return args.func(args)
    except (InvariantViolation, ValueError) as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
