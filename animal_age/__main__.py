#!/usr/bin/env python3
"""
Animal Age - Main Entry Point

Run:
  python -m animal_age -t cat -a 3
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .report import build, print_species_list
from .resolver import ResolutionError, UnknownSpecies
from .utils import color_disabled_by_env

EXAMPLES = """Examples:
  animal-age -t cat -a 3
  animal-age --type small_dog --age 5
  animal-age --list
  animal-age -t horse -a 10 --json
  animal-age -t cat,small_dog -a 3 --no-color
"""


def split_species(value: str) -> list[str]:
    """Split a comma-separated --type value, dropping blanks."""
    return [part.strip() for part in value.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="animal-age",
        description="Convert animal age to human years & show colorful lifespan comparisons",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="species",
        metavar="ANIMAL",
        type=split_species,
        action="extend",
        help="animal type (use --list to show valid options, supports comma-separated list)",
    )
    parser.add_argument("-a", "--age", type=float, metavar="YEARS", help="age of the animal in real years")
    parser.add_argument("--list", action="store_true", help="show supported animal types")
    parser.add_argument("--json", action="store_true", help="output in JSON format")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="print debug diagnostics to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(verbose: bool) -> None:
    """Send diagnostics to stderr, keeping stdout for the report."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger = logging.getLogger("animal_age")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point with argument parsing.

    Args:
        argv: Command-line arguments (sys.argv[1:] when None)

    Returns:
        Exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.list:
        print_species_list()
        return 0

    color = not (args.no_color or color_disabled_by_env())
    try:
        build(args.species, args.age, json_mode=args.json, color=color)
    except UnknownSpecies as exc:
        sys.stdout.flush()
        parser.exit(1, exc.hint() + "\n")
    except ResolutionError as exc:
        sys.stdout.flush()
        parser.exit(1, f"Error: {exc}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
