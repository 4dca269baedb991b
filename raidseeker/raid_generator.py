"""Generation of raid encounters from a den seed."""

from __future__ import annotations

from raidseeker.raid import Raid
from raidseeker.rng import XOROSHIRO_CONSTANT, XoroShiro
from raidseeker.state import UNSET_IV, State
from raidseeker.state_filter import StateFilter

_MASK64 = (1 << 64) - 1
_TOXTRICITY = 849
_TOXTRICITY_AMPED_NATURES = (3, 4, 2, 8, 9, 19, 22, 11, 13, 14, 0, 6, 24)
_TOXTRICITY_LOW_KEY_NATURES = (1, 5, 7, 10, 12, 15, 16, 17, 18, 20, 21, 23)


class RaidGenerator:
    """Generates the encounters of one raid slot over a range of advances."""

    def __init__(self, initial_advances: int, max_advances: int, tid: int, sid: int, raid: Raid) -> None:
        if not 0 <= raid.iv_count <= 6:
            raise ValueError(f"iv_count must be between 0 and 6, got {raid.iv_count}")
        self.initial_advances = initial_advances
        self.max_advances = max_advances
        self.tid = tid & 0xFFFF
        self.sid = sid & 0xFFFF
        self.species = raid.species
        self.altform = raid.altform
        self.ability_type = raid.ability
        self.shiny_type = raid.shiny_type
        self.iv_count = raid.iv_count
        self.gender_type = raid.gender
        self.gender_ratio = raid.gender_ratio

    def generate(self, state_filter: StateFilter, seed: int) -> list[State]:
        """States for each advance from the seed that pass ``state_filter``."""
        states = []
        seed = (seed + XOROSHIRO_CONSTANT * self.initial_advances) & _MASK64
        for advance in range(self.max_advances + 1):
            state = self._generate_one(state_filter, seed, self.initial_advances + advance)
            if state is not None:
                states.append(state)
            seed = (seed + XOROSHIRO_CONSTANT) & _MASK64
        return states

    def _generate_one(self, state_filter: StateFilter, seed: int, advances: int) -> State | None:
        rng = XoroShiro(seed)
        result = State(seed, advances)

        result.ec = rng.next_int(0xFFFFFFFF)
        sidtid = rng.next_int(0xFFFFFFFF)
        pid = rng.next_int(0xFFFFFFFF)
        result.shiny, result.pid = self._apply_shiny(sidtid, pid)

        if not state_filter.compare_shiny(result):
            return None

        placed = 0
        while placed < self.iv_count:
            index = rng.next_int(6)
            if result.ivs[index] == UNSET_IV:
                result.ivs[index] = 31
                placed += 1

        for index, iv in enumerate(result.ivs):
            if iv == UNSET_IV:
                result.ivs[index] = rng.next_int(32)

        if self.ability_type == 4:
            result.ability = rng.next_int(3)
        elif self.ability_type == 3:
            result.ability = rng.next_int(2)
        else:
            result.ability = self.ability_type

        result.gender = self._gender(rng, result.gender)

        if self.species != _TOXTRICITY:
            result.nature = rng.next_int(25)
        elif self.altform == 0:
            result.nature = _TOXTRICITY_AMPED_NATURES[rng.next_int(13)]
        else:
            result.nature = _TOXTRICITY_LOW_KEY_NATURES[rng.next_int(12)]

        return result if state_filter.compare_state(result) else None

    def _apply_shiny(self, sidtid: int, pid: int) -> tuple[int, int]:
        tsv = (self.tid ^ self.sid) >> 4
        pid_xor = (pid >> 16) ^ (pid & 0xFFFF)
        psv = pid_xor >> 4
        real_xor = pid_xor ^ self.tid ^ self.sid

        if self.shiny_type == 0:
            # The shiny roll uses a fake trainer ID; the PID is fixed up afterwards.
            fake_xor = (sidtid >> 16) ^ (sidtid & 0xFFFF) ^ pid_xor
            if fake_xor < 16:
                shiny = 2 if fake_xor == 0 else 1
                if fake_xor != real_xor:
                    high = (pid & 0xFFFF) ^ self.tid ^ self.sid ^ (2 - shiny)
                    pid = ((high & 0xFFFF) << 16) | (pid & 0xFFFF)
                return shiny, pid
            if psv == tsv:
                pid ^= 0x10000000
            return 0, pid

        if self.shiny_type == 1:
            if psv == tsv:
                pid ^= 0x10000000
            return 0, pid

        if real_xor:
            high = (pid & 0xFFFF) ^ self.tid ^ self.sid
            pid = ((high & 0xFFFF) << 16) | (pid & 0xFFFF)
        return 2, pid

    def _gender(self, rng: XoroShiro, current: int) -> int:
        if self.gender_type == 0:
            if self.gender_ratio == 255:
                return 2
            if self.gender_ratio == 254:
                return 1
            if self.gender_ratio == 0:
                return 0
            return int(rng.next_int(253) + 1 < self.gender_ratio)
        if self.gender_type == 1:
            return 0
        if self.gender_type == 2:
            return 1
        if self.gender_type == 3:
            return 2
        return current