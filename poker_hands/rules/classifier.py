"""Hand classification.

``select`` sorts the cards by rank, then tries each detector in order of
decreasing strength. The first detector that recognises the cards decides
the hand; when none does, the result is the highest card.

Detectors take the rank-ordered cards and return a Hand, or None when the
cards do not form their category. Hand size is not enforced: a single card
passes both the same-suit and the consecutive-rank tests and is therefore a
straight flush. Ace is always high, so A-2-3-4-5 is not a straight.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .hands import (
    EmptyHandError,
    Flush,
    FourOfAKind,
    FullHouse,
    Hand,
    HighestCard,
    Pair,
    Straight,
    StraightFlush,
    ThreeOfAKind,
    TwoPairs,
)
from .ranks import Card, Rank, are_consecutive, get_rank_counts, sort_cards

logger = logging.getLogger(__name__)

Detector = Callable[[List[Card]], Optional[Hand]]


def is_straight(cards: List[Card]) -> bool:
    """Check if rank-ordered cards form a run with no gaps and no repeats."""
    return are_consecutive([card.rank for card in cards])


def have_same_suit(cards: List[Card]) -> bool:
    return all(card.suit == cards[0].suit for card in cards)


def _ranks_with_count(cards: List[Card], count: int) -> List[Rank]:
    """Ranks appearing exactly ``count`` times, highest first."""
    rank_counts = get_rank_counts(cards)
    return sorted((r for r, c in rank_counts.items() if c == count), reverse=True)


def select_straight_flush(cards: List[Card]) -> Optional[Hand]:
    if is_straight(cards) and have_same_suit(cards):
        return StraightFlush(rank=max(cards).rank)
    return None


def select_full_house(cards: List[Card]) -> Optional[Hand]:
    triplets = _ranks_with_count(cards, 3)
    pairs = _ranks_with_count(cards, 2)
    if not triplets or not pairs:
        return None
    return FullHouse(pair=pairs[0], triplet=triplets[0])


def select_flush(cards: List[Card]) -> Optional[Hand]:
    if have_same_suit(cards):
        return Flush(card=max(cards))
    return None


def select_straight(cards: List[Card]) -> Optional[Hand]:
    if is_straight(cards):
        return Straight(rank=max(cards).rank)
    return None


def select_group(cards: List[Card]) -> Optional[Hand]:
    """Detect four of a kind, three of a kind, two pairs or a pair.

    The largest group decides, and groups larger than four are not a hand.
    Among groups of equal size the highest rank is used; with two or more
    pairs the two highest form the hand.
    """
    rank_counts = get_rank_counts(cards)
    size = max(rank_counts.values())
    ranks = _ranks_with_count(cards, size)

    if size == 4:
        return FourOfAKind(rank=ranks[0])
    if size == 3:
        return ThreeOfAKind(rank=ranks[0])
    if size == 2:
        if len(ranks) >= 2:
            return TwoPairs(low=ranks[1], high=ranks[0])
        return Pair(rank=ranks[0])
    return None


# Strongest category first; the first match wins
DETECTORS: Tuple[Detector, ...] = (
    select_straight_flush,
    select_full_house,
    select_flush,
    select_straight,
    select_group,
)


def first_match(detectors: Sequence[Detector], cards: List[Card]) -> Optional[Hand]:
    """Return the hand from the first detector that recognises ``cards``."""
    for detector in detectors:
        hand = detector(cards)
        if hand is not None:
            logger.debug("%s matched %s", detector.__name__, hand)
            return hand
    return None


def select(cards: Sequence[Card]) -> Hand:
    """Classify cards into the best matching hand.

    Args:
        cards: Non-empty sequence of Card objects, in any order

    Returns:
        The strongest Hand the cards satisfy

    Raises:
        EmptyHandError: If ``cards`` is empty
    """
    if not cards:
        raise EmptyHandError("cannot classify an empty hand")

    ordered = sort_cards(cards)
    hand = first_match(DETECTORS, ordered)
    if hand is None:
        hand = HighestCard(card=max(cards))
        logger.debug("no detector matched, falling back to %s", hand)
    return hand


class Hands:
    """Namespace entry point: ``Hands.select(cards)``."""

    detectors = DETECTORS

    @staticmethod
    def select(cards: Sequence[Card]) -> Hand:
        return select(cards)
