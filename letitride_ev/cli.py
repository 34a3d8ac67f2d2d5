#!/usr/bin/env python3
"""
Command-line front end for the Let It Ride EV calculator.
"""

import argparse
import logging
import sys

from .calculator import Calculator
from .engine.errors import UnknownPreset, ValidationError
from .export import write_breakdown_csv, write_summary_csv
from .presets import PRESETS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="letitride-ev",
        description="Exact EV of a Let It Ride hand with 3 hole cards and 1 shown card",
    )
    parser.add_argument("cards", nargs="*", help="Hole cards then shown card, e.g. Ah Kh Qh Jh")
    parser.add_argument("--preset", default="standard", help="Paytable preset")
    parser.add_argument("--csv", type=str, help="Write the EV summary CSV to this path")
    parser.add_argument("--breakdown", type=str, help="Write the per-final-card CSV to this path")
    parser.add_argument("--verbose", action="store_true", help="Show every final card and debug logging")
    parser.add_argument("--list-presets", action="store_true", help="List paytable presets and exit")
    return parser


def list_presets_text() -> str:
    lines = []
    for key, preset in PRESETS.items():
        lines.append(f"{key:<10} {preset.description}")
        for line in preset.paytable.lines():
            lines.append(f"    {line}")
    return "\n".join(lines)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.list_presets:
        print(list_presets_text())
        return 0

    try:
        calc = Calculator(args.preset)
    except UnknownPreset as e:
        print(e.args[0], file=sys.stderr)
        return 2

    cards = list(args.cards) + [None] * (4 - len(args.cards))
    if len(args.cards) > 4:
        print(f"Expected 4 cards, got {len(args.cards)}", file=sys.stderr)
        return 2

    outcome = calc.run(*cards, verbose=args.verbose)
    if isinstance(outcome, ValidationError):
        print(outcome.message, file=sys.stderr)
        return 2

    print(outcome)
    print("\nPaytable used (net payouts):")
    for line in calc.paytable_lines():
        print(f"  {line}")

    if args.csv:
        path = write_summary_csv(outcome, args.csv, calc.config)
        print(f"\nSummary written to {path}")
    if args.breakdown:
        path = write_breakdown_csv(outcome, args.breakdown)
        print(f"Breakdown written to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
