"""
Die - A single die with a fixed face list and a cached last result.

Faces are normalized at construction to exactly `sides` entries:
- no faces given: numbered faces 1..sides
- too few: padded with blank faces (value 0, one empty symbol)
- too many: truncated
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Sequence
import logging

from ..config import RandomSource, default_rng, get_settings

logger = logging.getLogger(__name__)


class InvalidDieError(ValueError):
    """Raised when a die cannot be built from its options."""


@dataclass(frozen=True)
class DieFace:
    """One possible outcome of a roll."""
    descriptor: str | None = None
    symbols: tuple[str, ...] = ()
    value: int | None = None
    color: str | None = None


BLANK_FACE = DieFace(value=0, symbols=("",))


@dataclass(frozen=True)
class DieOptions:
    """Die construction options. default_color None means the configured default."""
    sides: int = 6
    faces: tuple[DieFace, ...] = ()
    default_color: str | None = None
    label: str = ""


def normalize_faces(sides: int, faces: Sequence[DieFace] = ()) -> tuple[DieFace, ...]:
    """Build exactly `sides` faces from whatever was supplied."""
    if sides < 1:
        raise InvalidDieError(f"A die needs at least one side, got {sides}")

    if not faces:
        return tuple(DieFace(value=i + 1) for i in range(sides))

    padded = list(faces) + [BLANK_FACE] * (sides - len(faces))
    return tuple(padded[:sides])


class Die:
    """
    A die that remembers its last roll.

    Usage:
        d6 = Die(sides=6)
        d6.roll()
        d6.get_current_result()  # same face, no re-roll
    """

    def __init__(
        self,
        options: DieOptions | None = None,
        *,
        rng: RandomSource | None = None,
        **kwargs: Any,
    ):
        if options is None:
            if "faces" in kwargs and kwargs["faces"] is not None:
                kwargs["faces"] = tuple(kwargs["faces"])
            options = DieOptions(**kwargs)
        elif kwargs:
            raise TypeError("Pass either a DieOptions or keyword options, not both")

        self._sides = options.sides
        self._faces = normalize_faces(options.sides, options.faces)
        self._default_color = options.default_color or get_settings().default_die_color
        self._label = options.label
        self._rng = rng or default_rng()
        self._current_result: DieFace | None = None

    @property
    def sides(self) -> int:
        return self._sides

    @property
    def faces(self) -> tuple[DieFace, ...]:
        return self._faces

    @property
    def default_color(self) -> str:
        return self._default_color

    @property
    def label(self) -> str:
        return self._label

    @property
    def has_rolled(self) -> bool:
        return self._current_result is not None

    def roll(self) -> DieFace:
        """Pick a face uniformly at random and cache it, colored."""
        face = self._faces[self._rng.randrange(len(self._faces))]
        self._current_result = replace(face, color=face.color or self._default_color)
        logger.debug(f"Die {self._label or self._sides!r} rolled {self._current_result}")
        return self._current_result

    def get_current_result(self) -> DieFace:
        """Get the last roll, rolling once if the die has never been rolled."""
        if self._current_result is None:
            return self.roll()
        return self._current_result

    def __repr__(self) -> str:
        return f"Die(sides={self._sides}, label={self._label!r})"
