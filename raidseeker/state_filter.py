"""Filtering of generated states by the user's criteria."""

from __future__ import annotations

from dataclasses import dataclass, field

from raidseeker.state import State

ANY = 255


@dataclass(frozen=True)
class StateFilter:
    """Criteria a generated state must meet; ``ANY`` (255) disables a field."""

    gender: int = ANY
    ability: int = ANY
    shiny: int = ANY
    skip: bool = False
    min_ivs: tuple[int, ...] = (0, 0, 0, 0, 0, 0)
    max_ivs: tuple[int, ...] = (31, 31, 31, 31, 31, 31)
    natures: tuple[bool, ...] = field(default_factory=lambda: (True,) * 25)

    def compare_state(self, state: State) -> bool:
        """Check gender, ability, nature and IV ranges."""
        if self.skip:
            return True
        if self.gender != ANY and self.gender != state.gender:
            return False
        if self.ability != ANY and self.ability != state.ability:
            return False
        if not self.natures[state.nature]:
            return False
        return all(
            low <= iv <= high for iv, low, high in zip(state.ivs, self.min_ivs, self.max_ivs)
        )

    def compare_shiny(self, state: State) -> bool:
        """Check the shiny type against the shiny mask."""
        return self.skip or self.shiny == ANY or bool(self.shiny & state.shiny)