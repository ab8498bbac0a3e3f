"""
Dice - Dice with configurable faces, and pools that roll them together.
"""

from .die import Die, DieFace, DieOptions, InvalidDieError
from .pool import VALUE_KEY, DicePool, DieResult

__all__ = [
    "Die",
    "DieFace",
    "DieOptions",
    "InvalidDieError",
    "DicePool",
    "DieResult",
    "VALUE_KEY",
]
