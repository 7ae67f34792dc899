#!/usr/bin/env python
"""CLI runner for ranking bets from a JSON export.

The input document has the shape of ``POST /bets/rank``::

    {"bets": [...], "beliefs": [...], "actions": [...], "annual_salary": 150000}

Usage:
    python scripts/score_bets.py bets.json
    cat bets.json | python scripts/score_bets.py - --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

# Add project root to path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pydantic import ValidationError  # noqa: E402

from api.routes.bets import BetRankRequest, BetRankResponse, rank_bet_request  # noqa: E402
from practice.formatting import format_currency, format_downside  # noqa: E402


def _read_document(source: str) -> dict:
    if source == "-":
        return json.load(sys.stdin)
    with open(source) as f:
        return json.load(f)


def print_table(response: BetRankResponse) -> None:
    """Print ranked bets as a fixed-width table."""
    print(f"\n{'=' * 96}")
    print(f"BET RANKING (annual salary {format_currency(response.annual_salary)})")
    print(f"{'=' * 96}")
    header = f"{'#':>3}  {'Bet':<28}{'Score':>8}  {'Label':<10}{'Conf':>6}{'Years':>7}{'Upside':>8}{'Downside':>10}{'EV':>10}"
    print(header)
    print("-" * len(header))
    for position, bet in enumerate(response.bets, start=1):
        print(
            f"{position:>3}  "
            f"{(bet.name or bet.id)[:27]:<28}"
            f"{bet.score:>8.2f}  "
            f"{bet.label:<10}"
            f"{bet.confidence:>6.0f}"
            f"{bet.timeline_years:>7.2f}"
            f"{bet.upside_multiplier:>7.1f}x"
            f"{format_downside(bet.downside, show_negative=True):>10}"
            f"{format_currency(bet.expected_value):>10}"
        )
    print()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Rank bets by their Kelly-inspired score",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("source", help="Path to a JSON document, or - for stdin")
    parser.add_argument("--salary", type=float, default=None, help="Annual opportunity-cost rate")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Rank the bets in a JSON document."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        document = _read_document(args.source)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"ERROR: cannot read {args.source}: {exc}", file=sys.stderr)
        return 1

    if not isinstance(document, dict):
        print("ERROR: input document must be a JSON object", file=sys.stderr)
        return 1

    if args.salary is not None:
        document["annual_salary"] = args.salary

    try:
        response = rank_bet_request(BetRankRequest.model_validate(document))
    except ValidationError as exc:
        print(f"ERROR: invalid input document:\n{exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(response.model_dump_json(indent=2))
    else:
        print_table(response)
    return 0


if __name__ == "__main__":
    sys.exit(main())
