"""Poker Hands - classify playing cards into poker hands and rank them.

A small rules engine that decides which poker category a set of cards
forms and orders the resulting hands to find a winner.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.rules import Card, Hand, Hands, Rank, Suit, select

__all__ = ["__version__", "Card", "Hand", "Hands", "Rank", "Suit", "select"]
