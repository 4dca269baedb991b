"""Trainer profiles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Game(IntEnum):
    """Game version a profile plays."""

    SWORD = 0
    SHIELD = 1


_VERSION_NAMES = {Game.SWORD: "Sword", Game.SHIELD: "Shield"}


@dataclass(frozen=True)
class Profile:
    """A named trainer with IDs and a game version."""

    name: str = "None"
    tid: int = 12345
    sid: int = 54321
    version: Game = Game.SWORD

    def version_string(self) -> str:
        """Display name of the version, or ``-`` when unknown."""
        return _VERSION_NAMES.get(self.version, "-")