"""Per-species base data."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PersonalInfo:
    """Base stats, gender ratio, abilities and form data of one species form."""

    hp: int
    atk: int
    defense: int
    spa: int
    spd: int
    spe: int
    gender_ratio: int
    ability1: int
    ability2: int
    ability_h: int
    form_count: int
    form_stat_index: int
    included: bool

    def base_stats(self) -> list[int]:
        """Base stats in HP, Atk, Def, SpA, SpD, Spe order."""
        return [self.hp, self.atk, self.defense, self.spa, self.spd, self.spe]

    def base_stat(self, index: int) -> int:
        """One base stat by index, or 0 for an index outside 0..5."""
        if 0 <= index < 6:
            return self.base_stats()[index]
        return 0