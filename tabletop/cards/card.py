"""
Card - Passive card definitions.

A card is pure configuration: display text, costs, stats and trigger
text for the host to interpret. The library never reads these fields.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CardStat:
    """A stat shown on a card (attack, health, etc.)."""
    icon: str | None = None
    label: str | None = None
    value: str | int | None = None
    color: str | None = None
    css_class: str | None = None


@dataclass(frozen=True)
class CardCost:
    """One component of a card's cost."""
    value: int
    icon: str | None = None
    suit: str | None = None


@dataclass(frozen=True)
class CardOptions:
    """
    Everything a host can say about a card.

    Only title is required. Sequence fields are tuples so the
    options stay hashable and cannot be mutated after construction.
    """
    title: str
    subtitle: str | None = None
    primary: tuple[CardStat, ...] = ()
    secondary: tuple[CardStat, ...] = ()
    flavor_text: str | None = None
    image_url: str | None = None
    suits: tuple[str, ...] = ()
    cost: tuple[CardCost, ...] = ()
    tags: tuple[str, ...] = ()
    set_identifier: str | None = None

    # Trigger text (e.g. "Sentinel")
    traits: tuple[str, ...] = ()
    on_reveal: str | None = None
    on_play: str | None = None
    on_discard: str | None = None
    on_exhaust: str | None = None

    image_hints: tuple[str, ...] = ()


_TUPLE_FIELDS = ("primary", "secondary", "suits", "cost", "tags", "traits", "image_hints")


@dataclass(frozen=True)
class Card:
    """A card definition handed to a Deck."""
    config: CardOptions

    @property
    def title(self) -> str:
        return self.config.title

    @classmethod
    def create(cls, title: str, **fields: Any) -> Card:
        """Create a card from keyword fields, converting lists to tuples."""
        for name in _TUPLE_FIELDS:
            if name in fields and fields[name] is not None:
                fields[name] = tuple(fields[name])
        return cls(config=CardOptions(title=title, **fields))
