"""
Tabletop - In-memory primitives for tabletop-style games.

A small library consumed by a host application that owns turn logic,
rendering and persistence. It provides:
- Cards with stateful deck management (draw, discard, purge, restore)
- Dice with configurable faces
- Dice pools that roll and aggregate results
"""

import logging

from .cards import Card, CardCost, CardOptions, CardStat, CardState, Deck, DeckOptions, Zone
from .dice import DicePool, Die, DieFace, DieOptions, DieResult, InvalidDieError

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Card",
    "CardCost",
    "CardOptions",
    "CardStat",
    "CardState",
    "Deck",
    "DeckOptions",
    "Zone",
    "DicePool",
    "Die",
    "DieFace",
    "DieOptions",
    "DieResult",
    "InvalidDieError",
]
