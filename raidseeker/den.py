"""A den and the raids it can hold in each game version."""

from __future__ import annotations

from dataclasses import dataclass, field

from raidseeker.profile import Game
from raidseeker.raid import Raid


@dataclass
class Den:
    """Encounter tables of one den for Sword and Shield."""

    sword_raids: list[Raid] = field(default_factory=list)
    shield_raids: list[Raid] = field(default_factory=list)

    def _table(self, version: Game) -> list[Raid]:
        return self.sword_raids if version == Game.SWORD else self.shield_raids

    def get_raid(self, index: int, version: Game) -> Raid:
        """Raid at ``index`` in the table of ``version``."""
        return self._table(version)[index]

    def get_raids(self, version: Game) -> list[Raid]:
        """Copy of the raid table of ``version``."""
        return list(self._table(version))