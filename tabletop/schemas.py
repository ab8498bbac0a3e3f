"""
Pydantic Schemas - Data contracts between the host application and the library.

Input models validate plain (JSON-shaped) configuration from the host and
build library objects. Both snake_case and the camelCase keys used by
card/die configuration files are accepted:

    CardSchema.model_validate({"title": "Bard", "flavorText": "..."}).to_card()
    DieSchema.model_validate({"sides": 6, "defaultColor": "blue"}).to_die()

View models are read-only snapshots for rendering. They are not a
persistence format: there is no way to rebuild a deck from a snapshot.
"""

from __future__ import annotations
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .cards import Card, CardCost, CardOptions, CardStat, CardState, Deck, DeckOptions
from .config import RandomSource
from .dice import VALUE_KEY, DicePool, Die, DieFace, DieOptions


class _HostModel(BaseModel):
    """Accepts field names or their camelCase aliases."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Card input
# =============================================================================

class CardStatSchema(_HostModel):
    """A stat shown on a card."""
    icon: Optional[str] = None
    label: Optional[str] = None
    value: Optional[Union[int, str]] = None
    color: Optional[str] = None
    css_class: Optional[str] = Field(None, alias="class")

    def to_stat(self) -> CardStat:
        return CardStat(
            icon=self.icon,
            label=self.label,
            value=self.value,
            color=self.color,
            css_class=self.css_class,
        )


class CardCostSchema(_HostModel):
    """One component of a card's cost."""
    value: int
    icon: Optional[str] = None
    suit: Optional[str] = None

    def to_cost(self) -> CardCost:
        return CardCost(value=self.value, icon=self.icon, suit=self.suit)


class CardSchema(_HostModel):
    """Card configuration as supplied by the host."""
    title: str = Field(..., min_length=1)
    subtitle: Optional[str] = None
    primary: list[CardStatSchema] = Field(default_factory=list)
    secondary: list[CardStatSchema] = Field(default_factory=list)
    flavor_text: Optional[str] = None
    image_url: Optional[str] = None
    suits: list[str] = Field(default_factory=list)
    cost: list[CardCostSchema] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    set_identifier: Optional[str] = None
    traits: list[str] = Field(default_factory=list)
    on_reveal: Optional[str] = None
    on_play: Optional[str] = None
    on_discard: Optional[str] = None
    on_exhaust: Optional[str] = None
    image_hints: list[str] = Field(default_factory=list)

    def to_card(self) -> Card:
        return Card(config=CardOptions(
            title=self.title,
            subtitle=self.subtitle,
            primary=tuple(s.to_stat() for s in self.primary),
            secondary=tuple(s.to_stat() for s in self.secondary),
            flavor_text=self.flavor_text,
            image_url=self.image_url,
            suits=tuple(self.suits),
            cost=tuple(c.to_cost() for c in self.cost),
            tags=tuple(self.tags),
            set_identifier=self.set_identifier,
            traits=tuple(self.traits),
            on_reveal=self.on_reveal,
            on_play=self.on_play,
            on_discard=self.on_discard,
            on_exhaust=self.on_exhaust,
            image_hints=tuple(self.image_hints),
        ))


class DeckOptionsSchema(_HostModel):
    """Deck options. min_size/max_size are carried but not enforced."""
    shuffle: bool = False
    min_size: Optional[int] = Field(None, ge=0)
    max_size: Optional[int] = Field(None, ge=0)


class DeckSchema(_HostModel):
    """A labelled list of cards."""
    label: str = Field(..., min_length=1)
    cards: list[CardSchema] = Field(default_factory=list)
    options: DeckOptionsSchema = Field(default_factory=DeckOptionsSchema)

    def to_deck(self, rng: RandomSource | None = None) -> Deck:
        options = DeckOptions(
            shuffle=self.options.shuffle,
            min_size=self.options.min_size,
            max_size=self.options.max_size,
        )
        return Deck(self.label, [c.to_card() for c in self.cards], options=options, rng=rng)


# =============================================================================
# Die input
# =============================================================================

class DieFaceSchema(_HostModel):
    """One face of a die."""
    descriptor: Optional[str] = None
    symbols: list[str] = Field(default_factory=list)
    value: Optional[int] = None
    color: Optional[str] = None

    def to_face(self) -> DieFace:
        return DieFace(
            descriptor=self.descriptor,
            symbols=tuple(self.symbols),
            value=self.value,
            color=self.color,
        )


class DieSchema(_HostModel):
    """Die configuration as supplied by the host."""
    sides: int = Field(6, ge=1)
    faces: list[DieFaceSchema] = Field(default_factory=list)
    default_color: Optional[str] = None
    label: str = ""

    def to_die(self, rng: RandomSource | None = None) -> Die:
        options = DieOptions(
            sides=self.sides,
            faces=tuple(f.to_face() for f in self.faces),
            default_color=self.default_color,
            label=self.label,
        )
        return Die(options, rng=rng)


# =============================================================================
# Views
# =============================================================================

class CardStateInfo(BaseModel):
    """A card instance for display."""
    state_id: str
    title: str
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_state(cls, card: CardState) -> CardStateInfo:
        return cls(state_id=card.state_id, title=card.title, tags=list(card.config.tags))


class DeckSnapshot(BaseModel):
    """Zone contents of a deck at one moment."""
    label: str
    active_deck: list[CardStateInfo] = Field(default_factory=list, description="Draw order")
    discard_pile: list[CardStateInfo] = Field(default_factory=list)
    in_play: list[CardStateInfo] = Field(default_factory=list)
    purged: list[CardStateInfo] = Field(default_factory=list)
    counts: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_deck(cls, deck: Deck) -> DeckSnapshot:
        zones = {
            "active_deck": [CardStateInfo.from_state(c) for c in deck.active_deck],
            "discard_pile": [CardStateInfo.from_state(c) for c in deck.discard_pile],
            "in_play": [CardStateInfo.from_state(c) for c in deck.in_play],
            "purged": [CardStateInfo.from_state(c) for c in deck.purged],
        }
        counts = {name: len(cards) for name, cards in zones.items()}
        counts["roster"] = len(deck.card_list)
        return cls(label=deck.label, counts=counts, **zones)


class DieFaceInfo(BaseModel):
    """A rolled face for display."""
    descriptor: Optional[str] = None
    symbols: list[str] = Field(default_factory=list)
    value: Optional[int] = None
    color: Optional[str] = None

    @classmethod
    def from_face(cls, face: DieFace) -> DieFaceInfo:
        return cls(
            descriptor=face.descriptor,
            symbols=list(face.symbols),
            value=face.value,
            color=face.color,
        )


class DicePoolSnapshot(BaseModel):
    """Current faces of a pool and their totals."""
    results: list[DieFaceInfo] = Field(default_factory=list)
    totals: dict[str, int] = Field(default_factory=dict)
    value: int = Field(0, description="Numeric total, 0 when no face has a value")

    @classmethod
    def from_pool(cls, pool: DicePool) -> DicePoolSnapshot:
        totals = pool.sum_results()
        return cls(
            results=[DieFaceInfo.from_face(f) for f in pool.see_results()],
            totals=totals,
            value=totals.get(VALUE_KEY, 0),
        )
