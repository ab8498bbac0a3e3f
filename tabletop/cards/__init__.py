"""
Cards - Card value objects and the deck engine.

A Deck owns a fixed roster of CardState instances and moves them between
zones (draw pile, discard pile, in play) as the host plays.
"""

from .card import Card, CardCost, CardOptions, CardStat
from .deck import CardState, Deck, DeckOptions, Zone, shuffle_sequence

__all__ = [
    "Card",
    "CardCost",
    "CardOptions",
    "CardStat",
    "CardState",
    "Deck",
    "DeckOptions",
    "Zone",
    "shuffle_sequence",
]
