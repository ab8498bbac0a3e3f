"""
Deck - Card zones, shuffling and the draw engine.

A deck stamps every input card with a state_id once, at construction,
and from then on only moves those CardState instances between zones:

    active deck  -> ordered draw pile (front is the next draw)
    discard pile -> spent cards, recycled into the draw pile when it runs dry
    in play      -> cards drawn and held by the player

A card that is in none of the three is purged. The master roster never
changes and is used by restore_card_list() to bring purged cards back.

All operations are total: unknown ids, empty piles and non-positive counts
are handled without raising.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, TypeVar
import itertools
import logging

from .card import Card, CardOptions
from ..config import RandomSource, default_rng

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Zone(Enum):
    """Where a card currently sits."""
    ACTIVE = "active"
    DISCARD = "discard"
    IN_PLAY = "in_play"
    PURGED = "purged"


@dataclass(frozen=True, eq=False)
class CardState:
    """
    A card instance inside one deck.

    Identity is the state_id, which embeds the card's input position and
    the deck label, so it is unique across decks in the same process.
    """
    card: Card
    state_id: str

    @property
    def config(self) -> CardOptions:
        return self.card.config

    @property
    def title(self) -> str:
        return self.card.title

    def __hash__(self):
        return hash(self.state_id)

    def __eq__(self, other):
        if not isinstance(other, CardState):
            return False
        return self.state_id == other.state_id


@dataclass(frozen=True)
class DeckOptions:
    """
    Deck construction options.

    min_size and max_size are accepted and exposed for hosts but are
    not enforced.
    """
    shuffle: bool = False
    min_size: int | None = None
    max_size: int | None = None


def shuffle_sequence(items: Iterable[T], rng: RandomSource | None = None) -> list[T]:
    """
    Return a shuffled copy of items (Fisher-Yates).

    Walks from the last index down to 1, swapping each element with a
    uniformly chosen element at or before it.
    """
    rng = rng or default_rng()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


class Deck:
    """
    A fixed roster of cards partitioned across draw, discard and in-play zones.

    Usage:
        deck = Deck("tavern", [Card.create("Ale"), Card.create("Bard")],
                    options=DeckOptions(shuffle=True))
        hand = deck.draw(2)
        deck.discard(hand)

    Discard and in-play zones are insertion-ordered dicts keyed by state_id.
    The draw pile is a deque of (state_id, ticket) entries plus a dict of
    each live card's current ticket. Removing a card from the draw pile
    only drops its ticket; draw() pops and skips stale entries, so draws,
    purges and restores never scan the zones.
    """

    def __init__(
        self,
        label: str,
        cards: Sequence[Card] = (),
        options: DeckOptions | None = None,
        rng: RandomSource | None = None,
    ):
        self._label = label
        self._options = options or DeckOptions()
        self._rng = rng or default_rng()

        self._card_list: tuple[CardState, ...] = tuple(
            CardState(card=card, state_id=f"card-{index}-{label}")
            for index, card in enumerate(cards)
        )
        self._roster: dict[str, CardState] = {c.state_id: c for c in self._card_list}

        self._tickets = itertools.count()
        self._active: dict[str, int] = {}
        self._order: deque[tuple[str, int]] = deque()
        for card in self._card_list:
            self._push_active(card)

        self._discard: dict[str, CardState] = {}
        self._in_play: dict[str, CardState] = {}

        logger.debug(f"Deck {label!r} created with {len(self._card_list)} cards")

        if self._options.shuffle:
            self.shuffle()

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def label(self) -> str:
        return self._label

    @property
    def options(self) -> DeckOptions:
        return self._options

    @property
    def card_list(self) -> tuple[CardState, ...]:
        """The master roster, in input order."""
        return self._card_list

    @property
    def active_deck(self) -> tuple[CardState, ...]:
        """The draw pile; index 0 is the next card drawn."""
        return tuple(
            self._roster[sid] for sid, ticket in self._order
            if self._active.get(sid) == ticket
        )

    @property
    def discard_pile(self) -> tuple[CardState, ...]:
        return tuple(self._discard.values())

    @property
    def in_play(self) -> tuple[CardState, ...]:
        return tuple(self._in_play.values())

    @property
    def purged(self) -> tuple[CardState, ...]:
        """Roster cards that are in none of the tracked zones."""
        return tuple(c for c in self._card_list if self.zone_of(c.state_id) is Zone.PURGED)

    def get(self, state_id: str) -> CardState | None:
        """Look up a roster card by id, whatever zone it is in."""
        return self._roster.get(state_id)

    def zone_of(self, state_id: str) -> Zone | None:
        """Get the zone holding a card, or None if the id is not in this deck."""
        if state_id not in self._roster:
            return None
        if state_id in self._active:
            return Zone.ACTIVE
        if state_id in self._discard:
            return Zone.DISCARD
        if state_id in self._in_play:
            return Zone.IN_PLAY
        return Zone.PURGED

    def __len__(self) -> int:
        return len(self._active)

    def __repr__(self) -> str:
        return (
            f"Deck(label={self._label!r}, active={len(self._active)}, "
            f"discard={len(self._discard)}, in_play={len(self._in_play)}, "
            f"roster={len(self._card_list)})"
        )

    # -------------------------------------------------------------------------
    # Draw pile bookkeeping
    # -------------------------------------------------------------------------

    def _push_active(self, card: CardState) -> None:
        """Put a card at the back of the draw pile under a fresh ticket."""
        ticket = next(self._tickets)
        self._active[card.state_id] = ticket
        self._order.append((card.state_id, ticket))

    def _pop_active(self) -> CardState:
        """Take the front card of a non-empty draw pile, dropping stale entries."""
        while True:
            sid, ticket = self._order.popleft()
            if self._active.get(sid) == ticket:
                del self._active[sid]
                return self._roster[sid]

    def _remove_active(self, state_id: str) -> bool:
        if self._active.pop(state_id, None) is None:
            return False
        # Stale entries are skipped by _pop_active; compact once they dominate
        if len(self._order) > 2 * len(self._active) + 32:
            self._order = deque(
                (sid, ticket) for sid, ticket in self._order
                if self._active.get(sid) == ticket
            )
        return True

    # -------------------------------------------------------------------------
    # Zone transitions
    # -------------------------------------------------------------------------

    def shuffle(self, include_discard: bool = False) -> None:
        """
        Shuffle the draw pile.

        The discard pile is folded in first when include_discard is set
        or when the draw pile is empty.
        """
        stack = list(self.active_deck)

        if include_discard or not stack:
            if self._discard:
                logger.debug(f"Deck {self._label!r}: recycling {len(self._discard)} discarded cards")
            stack.extend(self._discard.values())
            self._discard = {}

        self._active = {}
        self._order = deque()
        for card in shuffle_sequence(stack, self._rng):
            self._push_active(card)

    def draw(self, count: int = 1) -> list[CardState]:
        """
        Move up to count cards from the front of the draw pile into play.

        count is truncated to an int. An empty draw pile is refilled from
        the discard pile mid-draw. When both are exhausted fewer cards than
        requested are returned.
        """
        drawn: list[CardState] = []

        for _ in range(max(int(count), 0)):
            if not self._active:
                self.shuffle(include_discard=True)

            if not self._active:
                logger.debug(
                    f"Deck {self._label!r} exhausted: drew {len(drawn)} of {count} requested"
                )
                break

            drawn.append(self._pop_active())

        for card in drawn:
            self._in_play[card.state_id] = card

        return drawn

    def discard(self, cards: Iterable[CardState] = ()) -> None:
        """Move cards to the discard pile from whichever zone holds them."""
        cards = list(cards)
        self.purge_list(cards)

        for card in cards:
            owned = self._roster.get(card.state_id)
            if owned is None:
                logger.warning(f"Deck {self._label!r}: ignoring foreign card {card.state_id!r}")
                continue
            self._discard[owned.state_id] = owned

    def purge(self, state_id: str) -> None:
        """Remove a card from every zone. Unknown ids are ignored."""
        removed = self._remove_active(state_id)
        for zone in (self._discard, self._in_play):
            if zone.pop(state_id, None) is not None:
                removed = True

        if not removed:
            logger.debug(f"Deck {self._label!r}: purge of {state_id!r} matched nothing")

    def purge_list(self, cards: Iterable[CardState] = ()) -> None:
        for card in cards:
            self.purge(card.state_id)

    def restore_card_list(self) -> None:
        """Append every roster card that is in no zone to the back of the draw pile."""
        restored = 0
        for card in self._card_list:
            sid = card.state_id
            if sid in self._active or sid in self._discard or sid in self._in_play:
                continue
            self._push_active(card)
            restored += 1

        if restored:
            logger.debug(f"Deck {self._label!r}: restored {restored} cards")
