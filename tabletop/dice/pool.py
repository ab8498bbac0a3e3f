"""
Dice Pool - Rolls a group of dice and totals their results.
"""

from __future__ import annotations
from typing import Iterator

from .die import Die, DieFace

# Symbol name -> count, plus the numeric total under VALUE_KEY
DieResult = dict[str, int]

VALUE_KEY = "value"


class DicePool:
    """
    A group of dice rolled together.

    The pool keeps the list it is given; dice are shared with the
    caller, not copied.
    """

    def __init__(self, dice: list[Die] | None = None):
        self._dice = dice if dice is not None else []

    @property
    def dice(self) -> list[Die]:
        return self._dice

    def add_die(self, die: Die) -> None:
        self._dice.append(die)

    def roll_all(self) -> list[DieFace]:
        """Roll every die and return the new faces."""
        return [die.roll() for die in self._dice]

    def see_results(self) -> list[DieFace]:
        """Current face of every die. Dice never rolled are rolled once."""
        return [die.get_current_result() for die in self._dice]

    def sum_results(self) -> DieResult:
        """
        Count symbols across current results and total their values.

        Empty symbols are skipped, and so are zero values: a pool whose
        faces are all blank has no VALUE_KEY entry.
        """
        totals: DieResult = {}

        for face in self.see_results():
            for symbol in face.symbols:
                if symbol:
                    totals[symbol] = totals.get(symbol, 0) + 1
            if face.value:
                totals[VALUE_KEY] = totals.get(VALUE_KEY, 0) + face.value

        return totals

    def __len__(self) -> int:
        return len(self._dice)

    def __iter__(self) -> Iterator[Die]:
        return iter(self._dice)
