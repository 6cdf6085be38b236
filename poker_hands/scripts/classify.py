#!/usr/bin/env python3
"""Classify poker hands from the command line and pick a winner.

Each positional argument is one hand: space-separated cards written as a
rank code (2-9, T or 10, J, Q, K, A) followed by a suit letter (H, C, S, D)
or symbol (♥ ♣ ♠ ♦).

Usage:
    python -m poker_hands.scripts.classify "9C KD 7H"
    python -m poker_hands.scripts.classify "2H 3H 4H 5H 6H" "AS AD AC AH KD"
    python -m poker_hands.scripts.classify --plain "4H KD 4C" "TS TD 2C"
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table
from rich import box

from poker_hands.rules import (
    Card,
    Hand,
    HandError,
    describe_categories,
    make_cards_from_string,
    select,
    winning_hands,
)

logger = logging.getLogger(__name__)


def classify_hands(texts: Sequence[str]) -> List[Tuple[List[Card], Hand]]:
    """Parse and classify each hand string.

    Raises:
        ValueError: If a card cannot be parsed or a hand is empty
    """
    results = []
    for text in texts:
        cards = make_cards_from_string(text)
        hand = select(cards)
        logger.info("%s -> %s", " ".join(str(c) for c in cards), hand)
        results.append((cards, hand))
    return results


def format_winner(results: List[Tuple[List[Card], Hand]]) -> str:
    """One-line summary naming the winning hand(s), 1-based."""
    hands = [hand for _, hand in results]
    winners = winning_hands(hands)
    positions = [i + 1 for i, hand in enumerate(hands) if any(hand is w for w in winners)]
    if len(positions) == 1:
        return f"Winner: hand {positions[0]} ({winners[0].description()})"
    joined = ", ".join(str(p) for p in positions)
    return f"Tie between hands {joined} ({str(winners[0].category)})"


def render_table(results: List[Tuple[List[Card], Hand]]) -> Table:
    table = Table(title="Poker hands", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Cards")
    table.add_column("Category")
    table.add_column("Description")
    for i, (cards, hand) in enumerate(results, start=1):
        table.add_row(str(i), " ".join(str(c) for c in cards), str(hand.category), hand.description())
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Classify poker hands and compare them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m poker_hands.scripts.classify "9C KD 7H"
  python -m poker_hands.scripts.classify "2H 3H 4H 5H 6H" "AS AD AC AH KD"
  python -m poker_hands.scripts.classify --plain "4H KD 4C" "TS TD 2C"
        """,
    )

    parser.add_argument(
        "hands",
        nargs="*",
        help='Hands to classify, one quoted argument per hand (e.g. "9C KD 7H")',
    )

    parser.add_argument(
        "--plain", action="store_true", help="Print one description per line instead of a table"
    )

    parser.add_argument(
        "--list-categories",
        action="store_true",
        help="List hand categories from weakest to strongest and exit",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging of the classifier"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the classify script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    console = Console(highlight=False)

    if args.list_categories:
        for category, requirement in describe_categories().items():
            if args.plain:
                print(f"{str(category)}: {requirement}")
            else:
                console.print(f"[bold]{str(category)}[/bold]: {requirement}", soft_wrap=True)
        return 0

    if not args.hands:
        parser.error("at least one hand is required")

    try:
        results = classify_hands(args.hands)
    except HandError:
        parser.error("every hand needs at least one card")
    except ValueError as exc:
        parser.error(str(exc))

    if args.plain:
        for cards, hand in results:
            print(f"{' '.join(str(c) for c in cards)}: {hand.description()}")
        if len(results) > 1:
            print(format_winner(results))
    else:
        console.print(render_table(results))
        if len(results) > 1:
            console.print(f"[bold green]{format_winner(results)}[/bold green]", soft_wrap=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
