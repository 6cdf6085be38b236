"""Poker hand rules.

This module provides:
- Card and rank definitions (ranks.py)
- Hand variants and their ordering (hands.py)
- Hand classification (classifier.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    RANK_NAMES,
    RANK_CODES,
    SUIT_SYMBOLS,
    compare_ranks,
    are_consecutive,
    get_rank_counts,
    sort_cards,
    make_cards_from_ranks,
    make_cards_from_string,
)

from .hands import (
    HandCategory,
    Hand,
    HandError,
    EmptyHandError,
    HandInvariantError,
    HighestCard,
    Pair,
    TwoPairs,
    ThreeOfAKind,
    Straight,
    Flush,
    FullHouse,
    FourOfAKind,
    StraightFlush,
    compare_hands,
    winning_hands,
    describe_categories,
)

from .classifier import (
    DETECTORS,
    Hands,
    select,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "RANK_NAMES",
    "RANK_CODES",
    "SUIT_SYMBOLS",
    "compare_ranks",
    "are_consecutive",
    "get_rank_counts",
    "sort_cards",
    "make_cards_from_ranks",
    "make_cards_from_string",
    # Hands
    "HandCategory",
    "Hand",
    "HandError",
    "EmptyHandError",
    "HandInvariantError",
    "HighestCard",
    "Pair",
    "TwoPairs",
    "ThreeOfAKind",
    "Straight",
    "Flush",
    "FullHouse",
    "FourOfAKind",
    "StraightFlush",
    "compare_hands",
    "winning_hands",
    "describe_categories",
    # Classifier
    "DETECTORS",
    "Hands",
    "select",
]
