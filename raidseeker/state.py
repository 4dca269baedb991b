"""A single generated raid encounter."""

from __future__ import annotations

from dataclasses import dataclass, field

UNSET_IV = 255

# Characteristic stat order: HP, Atk, Def, Spe, SpA, SpD mapped to IV slots.
_CHARACTERISTIC_ORDER = (0, 1, 2, 5, 3, 4)


@dataclass
class State:
    """Result of generating one advance; IVs start unset (255)."""

    seed: int
    advances: int
    ec: int = 0
    pid: int = 0
    nature: int = 0
    ability: int = 0
    gender: int = 0
    shiny: int = 0
    ivs: list[int] = field(default_factory=lambda: [UNSET_IV] * 6)

    def characteristic(self) -> int:
        """Index of the characteristic derived from the EC and perfect IVs."""
        start = self.ec % 6
        for offset in range(6):
            stat = (start + offset) % 6
            if self.ivs[_CHARACTERISTIC_ORDER[stat]] == 31:
                return stat
        return start