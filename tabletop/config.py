"""
Configuration - Environment settings, random source and logging setup.

Environment variables:
    TABLETOP_RANDOM_SEED         Seed for the process-wide random generator
    TABLETOP_DEFAULT_DIE_COLOR   Fallback color for die faces without one
    TABLETOP_LOG_LEVEL           Level used by configure_logging()
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol
import logging
import os
import random


class RandomSource(Protocol):
    """
    Anything that can pick an integer in [0, stop).

    random.Random satisfies this; tests pass scripted sources.
    """

    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class Settings:
    """Library settings, usually read from the environment."""
    random_seed: int | None = None
    default_die_color: str = "red"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        seed = os.getenv("TABLETOP_RANDOM_SEED")
        try:
            random_seed = int(seed) if seed else None
        except ValueError:
            raise ValueError(f"TABLETOP_RANDOM_SEED must be an integer, got {seed!r}")

        return cls(
            random_seed=random_seed,
            default_die_color=os.getenv("TABLETOP_DEFAULT_DIE_COLOR", "red"),
            log_level=os.getenv("TABLETOP_LOG_LEVEL", "WARNING").upper(),
        )


_settings: Settings | None = None
_rng: random.Random | None = None


def get_settings() -> Settings:
    """Get the cached settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings and the shared generator."""
    global _settings, _rng
    _settings = None
    _rng = None


def default_rng() -> random.Random:
    """
    Get the process-wide random generator.

    Seeded from TABLETOP_RANDOM_SEED when set, otherwise from system entropy.
    """
    global _rng
    if _rng is None:
        _rng = random.Random(get_settings().random_seed)
    return _rng


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    The library itself only installs a NullHandler; hosts call this
    when they want deck and dice activity printed.
    """
    logger = logging.getLogger("tabletop")
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
               for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        logger.addHandler(handler)

    return logger
