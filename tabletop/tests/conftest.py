"""
Pytest fixtures for Tabletop tests.
"""

import pytest

from ..cards import Card, CardCost, Deck
from ..config import reset_settings


class ScriptedRandom:
    """
    Random source that replays a fixed list of picks.

    Each pick is reduced modulo the requested range, and the list
    cycles when exhausted.
    """

    def __init__(self, picks: list[int]):
        self.picks = picks
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        pick = self.picks[len(self.calls) % len(self.picks)]
        self.calls.append(stop)
        return pick % stop


class IdentityRandom:
    """Always picks the last index, so a Fisher-Yates shuffle leaves order unchanged."""

    def randrange(self, stop: int) -> int:
        return stop - 1


@pytest.fixture(autouse=True)
def clean_settings():
    """Each test reads the environment afresh."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def identity_rng() -> IdentityRandom:
    return IdentityRandom()


@pytest.fixture
def five_cards() -> list[Card]:
    """Five distinct card definitions."""
    return [
        Card.create("Archer", cost=[CardCost(value=1)], tags=["unit"]),
        Card.create("Builder", tags=["unit", "worker"]),
        Card.create("Catapult", on_play="Deal 3 damage"),
        Card.create("Dragon", traits=["Sentinel"]),
        Card.create("Eagle"),
    ]


@pytest.fixture
def deck(five_cards: list[Card], identity_rng: IdentityRandom) -> Deck:
    """An unshuffled five-card deck whose shuffles keep order."""
    return Deck("test", five_cards, rng=identity_rng)
