#!/usr/bin/env python3
"""
Domino Token Set Generator

Builds the full token set for a maximum face value under one of the
scoring variants:
- standard:        value is the sum of both faces
- six-unvaluable:  faces showing six score nothing
- doubled:         twice the standard value

Usage:
    python main.py                          # Double-six, standard scoring
    python main.py -n 9 -v six-unvaluable   # Double-nine, six-unvaluable
    python main.py --info                   # Compare conventional sets
"""

import argparse
import logging

from domino_sets import TokenSet
from domino_tokens import Variant

logger = logging.getLogger(__name__)


def show_token_set(max_value: int, variant: Variant):
    """Print every token of a set with its value."""
    token_set = TokenSet.generate(max_value, variant)
    if not len(token_set):
        logger.warning("Max face value %d produces an empty set", max_value)
        return

    print(f"Double-{max_value} set, {variant.value} scoring ({len(token_set)} tokens):\n")
    token_set.display()

    print(f"\n  Doubles:     {len(token_set.doubles())}")
    print(f"  Total value: {token_set.total_value()}")


def display_set_info():
    """Display totals for the conventional sets under every variant."""
    print("=" * 60)
    print("DOMINO TOKEN SETS")
    print("=" * 60)

    for name, factory in [
        ("Double-Six", TokenSet.double_six),
        ("Double-Nine", TokenSet.double_nine),
        ("Double-Twelve", TokenSet.double_twelve),
    ]:
        print(f"\n{name}:")
        print("-" * 40)
        for variant in Variant:
            token_set = factory(variant)
            print(f"  {variant.value:<16} {len(token_set)} tokens, total value {token_set.total_value()}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Domino Token Set Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                          # Double-six set, standard scoring
  python main.py -n 12 -v doubled         # Double-twelve, doubled scoring
  python main.py --info                   # Display set information
        """
    )

    parser.add_argument(
        '--max-value', '-n',
        type=int,
        default=6,
        help='Highest face value in the set (default: 6)'
    )
    parser.add_argument(
        '--variant', '-v',
        default=Variant.STANDARD.value,
        choices=[v.value for v in Variant],
        help='Scoring variant (default: standard)'
    )
    parser.add_argument(
        '--info',
        action='store_true',
        help='Display information about the conventional sets'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.info:
        display_set_info()
    else:
        show_token_set(args.max_value, Variant.from_name(args.variant))


if __name__ == "__main__":
    main()
