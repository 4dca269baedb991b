"""Raid encounter slots of a den."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from raidseeker import personal_loader


@dataclass(frozen=True)
class Raid:
    """One encounter slot: species, form, locks and per-star probabilities."""

    ability: int
    altform: int
    iv_count: int
    gender: int
    gender_ratio: int
    gigantamax: bool
    species: int
    stars: tuple[int, ...]
    shiny_type: int = 0

    def _active_stars(self) -> list[int]:
        return [index for index, chance in enumerate(self.stars[:5]) if chance]

    def min_stars(self) -> int:
        """Lowest star rank this slot can appear at (5 when none is set)."""
        return min(self._active_stars(), default=4) + 1

    def max_stars(self) -> int:
        """Highest star rank this slot can appear at (1 when none is set)."""
        return max(self._active_stars(), default=0) + 1

    def star_display(self) -> str:
        """Star range such as ``3★`` or ``1-3★``."""
        low = self.min_stars()
        high = self.max_stars()
        if low == high:
            return f"{low}★"
        return f"{low}-{high}★"


def make_raid(
    ability: int,
    altform: int,
    iv_count: int,
    gender: int,
    gigantamax: bool,
    species: int,
    stars: Sequence[int],
    shiny_type: int = 0,
) -> Raid:
    """Build a raid, taking the gender ratio from the loaded species table."""
    gender_ratio = personal_loader.get_info(species, altform).gender_ratio
    return Raid(
        ability=ability,
        altform=altform,
        iv_count=iv_count,
        gender=gender,
        gender_ratio=gender_ratio,
        gigantamax=bool(gigantamax),
        species=species,
        stars=tuple(stars),
        shiny_type=shiny_type,
    )