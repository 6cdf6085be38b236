"""Card rank, suit and card definitions.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Rank constants and ordering
- Suit definitions (unordered)
- Card representation, ordered by rank only
- Parsing and counting utilities
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterable, List, Optional, Sequence


class Rank(IntEnum):
    """Card ranks. The enum value is the numeric rank (Deuce = 2, Ace = 14).

    Ace is always high: there is no ace-low value.
    """

    DEUCE = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def display_name(self) -> str:
        """Human readable name, e.g. "Deuce" or "Ace"."""
        return RANK_NAMES[self]

    @property
    def code(self) -> str:
        """Single-character code, e.g. "2", "T" or "A"."""
        return RANK_CODES[self]

    def compare(self, other: "Rank") -> int:
        return compare_ranks(self, other)


class Suit(Enum):
    """Card suits. Suits have no order; comparing them raises TypeError."""

    HEARTS = "hearts"
    CLUBS = "clubs"
    SPADES = "spades"
    DIAMONDS = "diamonds"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


RANK_NAMES = {
    Rank.DEUCE: "Deuce",
    Rank.THREE: "Three",
    Rank.FOUR: "Four",
    Rank.FIVE: "Five",
    Rank.SIX: "Six",
    Rank.SEVEN: "Seven",
    Rank.EIGHT: "Eight",
    Rank.NINE: "Nine",
    Rank.TEN: "Ten",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
    Rank.ACE: "Ace",
}

RANK_CODES = {
    Rank.DEUCE: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
    Suit.DIAMONDS: "♦",
}

# Code to rank mapping (for parsing); "10" is accepted alongside "T"
CODE_TO_RANK = {v: k for k, v in RANK_CODES.items()}
CODE_TO_RANK["10"] = Rank.TEN

SUIT_LETTERS = {"H": Suit.HEARTS, "C": Suit.CLUBS, "S": Suit.SPADES, "D": Suit.DIAMONDS}


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank only, but equality and hashing use both fields:
    the deuce of spades is neither greater nor smaller than the deuce of
    hearts, yet the two are different cards.
    """

    rank: Rank
    suit: Suit

    def compare(self, other: "Card") -> int:
        return compare_ranks(self.rank, other.rank)

    def description(self) -> str:
        return f"{self.rank.display_name} of {self.suit.value}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return f"{self.rank.code}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self.rank.code}{self.suit.symbol})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a string like 'K♦', 'KD', 'Td' or '10H'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            ValueError: If string cannot be parsed
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card: {s!r}")

        suit_char = s[-1]
        rank_str = s[:-1].upper()

        suit_map = {v: k for k, v in SUIT_SYMBOLS.items()}
        suit_map.update(SUIT_LETTERS)
        suit_map.update({k.lower(): v for k, v in SUIT_LETTERS.items()})

        if suit_char not in suit_map:
            raise ValueError(f"Invalid suit character: {suit_char}")
        if rank_str not in CODE_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_str}")

        return cls(rank=CODE_TO_RANK[rank_str], suit=suit_map[suit_char])


def compare_ranks(rank1: Rank, rank2: Rank) -> int:
    """Compare two ranks.

    Returns:
        Positive if rank1 > rank2, negative if rank1 < rank2, zero if equal
    """
    return int(rank1) - int(rank2)


def are_consecutive(ranks: Sequence[Rank]) -> bool:
    """Check if a sorted list of ranks are consecutive.

    Every adjacent pair must differ by exactly one, so repeated ranks break
    the run. Fewer than two ranks are trivially consecutive.
    """
    for i in range(1, len(ranks)):
        if int(ranks[i]) - int(ranks[i - 1]) != 1:
            return False
    return True


def get_rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a list of cards."""
    counts: Dict[Rank, int] = {}
    for card in cards:
        counts[card.rank] = counts.get(card.rank, 0) + 1
    return counts


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by rank (ascending). Cards of equal rank keep their input order."""
    return sorted(cards)


def make_cards_from_ranks(ranks: List[Rank], suits: Optional[List[Suit]] = None) -> List[Card]:
    """Create cards from a list of ranks and optional suits.

    If suits not provided, cycles through suits for variety.

    Args:
        ranks: List of Rank values
        suits: Optional list of Suit values (must match length of ranks if provided)

    Returns:
        List of Card objects
    """
    if suits is None:
        all_suits = list(Suit)
        suits = [all_suits[i % len(all_suits)] for i in range(len(ranks))]

    if len(ranks) != len(suits):
        raise ValueError("ranks and suits must have same length")

    return [Card(rank=r, suit=s) for r, s in zip(ranks, suits)]


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "9C KD 7H"."""
    return [Card.from_string(cs) for cs in s.split()]
