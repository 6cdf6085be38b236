"""Hand variants and their ordering.

Hand types supported (weakest first):
- HighestCard: no other category applies
- Pair: two cards of the same rank
- TwoPairs: two distinct pairs
- ThreeOfAKind: three cards of the same rank
- Straight: consecutive ranks, any suits
- Flush: all cards share one suit
- FullHouse: three of one rank plus two of another
- FourOfAKind: four cards of the same rank
- StraightFlush: consecutive ranks, all of one suit

Comparison rules:
- Different categories: the higher category always wins
- Same category: compare the carried tie-break data
- FullHouse: compare by triplet rank only, the pair is ignored
- TwoPairs: compare the high pair, then the low pair
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Iterable, List, Tuple

from .ranks import Card, Rank


class HandCategory(IntEnum):
    """Precedence of hand variants. Higher value = stronger category."""

    HIGHEST_CARD = 0
    PAIR = 1
    TWO_PAIRS = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class HandError(Exception):
    """Base class for hand classification errors."""

    pass


class EmptyHandError(HandError, ValueError):
    """Raised when a hand is requested from an empty card sequence."""

    pass


class HandInvariantError(AssertionError):
    """Raised when two different hand variants claim the same category."""

    pass


class Hand(ABC):
    """A classified, comparable poker hand.

    Concrete variants are frozen dataclasses. Each declares its ``category``
    and the tie-break key used against hands of the same variant.
    """

    category: ClassVar[HandCategory]

    @abstractmethod
    def description(self) -> str:
        """Human readable label, e.g. "Pair of Tens"."""

    @abstractmethod
    def tiebreak(self) -> Tuple[int, ...]:
        """Ranks deciding order within the category, most significant first."""

    def compare(self, other: "Hand") -> int:
        """Compare two hands.

        Returns:
            Positive if self > other, negative if self < other, zero if the
            hands are of equal strength
        """
        if self.category != other.category:
            return int(self.category) - int(other.category)

        if type(self) is not type(other):
            raise HandInvariantError(
                f"{type(self).__name__} and {type(other).__name__} "
                f"both claim category {self.category.name}"
            )

        for mine, theirs in zip(self.tiebreak(), other.tiebreak()):
            if mine != theirs:
                return mine - theirs
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return self.description()


@dataclass(frozen=True)
class HighestCard(Hand):
    card: Card

    category: ClassVar[HandCategory] = HandCategory.HIGHEST_CARD

    def description(self) -> str:
        return f"High card: {self.card.description()}"

    def tiebreak(self) -> Tuple[int, ...]:
        return (int(self.card.rank),)


@dataclass(frozen=True)
class Pair(Hand):
    rank: Rank

    category: ClassVar[HandCategory] = HandCategory.PAIR

    def description(self) -> str:
        return f"Pair of {self.rank.display_name}s"

    def tiebreak(self) -> Tuple[int, ...]:
        return (int(self.rank),)


@dataclass(frozen=True)
class TwoPairs(Hand):
    """Two distinct pairs. Fields are ordered low pair first."""

    low: Rank
    high: Rank

    category: ClassVar[HandCategory] = HandCategory.TWO_PAIRS

    def description(self) -> str:
        return f"Pair of {self.low.display_name}s and pair of {self.high.display_name}s"

    def tiebreak(self) -> Tuple[int, ...]:
        return (int(self.high), int(self.low))


@dataclass(frozen=True)
class ThreeOfAKind(Hand):
    rank: Rank

    category: ClassVar[HandCategory] = HandCategory.THREE_OF_A_KIND

    def description(self) -> str:
        return f"Three of a kind: {self.rank.display_name}"

    def tiebreak(self) -> Tuple[int, ...]:
        return (int(self.rank),)


@dataclass(frozen=True)
class Straight(Hand):
    """Consecutive ranks; ``rank`` is the highest card of the run."""

    rank: Rank

    category: ClassVar[HandCategory] = HandCategory.STRAIGHT

    def description(self) -> str:
        return f"Straight: {self.rank.display_name} high"

    def tiebreak(self) -> Tuple[int, ...]:
        return (int(self.rank),)


@dataclass(frozen=True)
class Flush(Hand):
    """Cards of a single suit; ``card`` is the highest of them."""

    card: Card

    category: ClassVar[HandCategory] = HandCategory.FLUSH

    def description(self) -> str:
        return f"Flush of {self.card.suit.value}, {self.card.rank.display_name} high"

    def tiebreak(self) -> Tuple[int, ...]:
        return (int(self.card.rank),)


@dataclass(frozen=True)
class FullHouse(Hand):
    pair: Rank
    triplet: Rank

    category: ClassVar[HandCategory] = HandCategory.FULL_HOUSE

    def description(self) -> str:
        return f"Full house: {self.triplet.display_name} over {self.pair.display_name}"

    def tiebreak(self) -> Tuple[int, ...]:
        # Only the triplet decides between two full houses
        return (int(self.triplet),)


@dataclass(frozen=True)
class FourOfAKind(Hand):
    rank: Rank

    category: ClassVar[HandCategory] = HandCategory.FOUR_OF_A_KIND

    def description(self) -> str:
        return f"Four of a kind: {self.rank.display_name}"

    def tiebreak(self) -> Tuple[int, ...]:
        return (int(self.rank),)


@dataclass(frozen=True)
class StraightFlush(Hand):
    rank: Rank

    category: ClassVar[HandCategory] = HandCategory.STRAIGHT_FLUSH

    def description(self) -> str:
        return f"Straight flush: {self.rank.display_name} high"

    def tiebreak(self) -> Tuple[int, ...]:
        return (int(self.rank),)


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Returns:
        Positive if hand1 > hand2
        Negative if hand1 < hand2
        Zero if the hands are of equal strength
    """
    return hand1.compare(hand2)


def winning_hands(hands: Iterable[Hand]) -> List[Hand]:
    """Return every hand that no other hand beats, in input order.

    Several hands are returned when the best ones tie.

    Raises:
        EmptyHandError: If no hands are given
    """
    hands = list(hands)
    if not hands:
        raise EmptyHandError("cannot pick a winner among zero hands")

    best = max(hands)
    return [hand for hand in hands if hand.compare(best) == 0]


def describe_categories() -> dict:
    """Get a description of requirements for each hand category.

    Returns:
        Dict mapping HandCategory to description string
    """
    return {
        HandCategory.HIGHEST_CARD: "No other category applies; the highest card counts",
        HandCategory.PAIR: "Two cards of the same rank",
        HandCategory.TWO_PAIRS: "Two different pairs",
        HandCategory.THREE_OF_A_KIND: "Three cards of the same rank",
        HandCategory.STRAIGHT: "Consecutive ranks, ace high only",
        HandCategory.FLUSH: "All cards of the same suit",
        HandCategory.FULL_HOUSE: "Three cards of one rank and two of another",
        HandCategory.FOUR_OF_A_KIND: "Four cards of the same rank",
        HandCategory.STRAIGHT_FLUSH: "Consecutive ranks, all of the same suit",
    }
