"""Loading of den encounter tables and lookup of dens by index."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from raidseeker.den import Den
from raidseeker.den_data import EVENT_DEN_HASH, den_hash
from raidseeker.raid import Raid, make_raid

RAID_SIZE = 12
RAIDS_PER_TABLE = 12
TABLE_SIZE = RAID_SIZE * RAIDS_PER_TABLE
HASH_SIZE = 8
DEN_BLOCK_SIZE = 2 * TABLE_SIZE + HASH_SIZE
EVENT_FILE_NAME = "nests_event.json"

_dens: dict[int, Den] = {}


def _parse_raid(entry: bytes) -> Raid:
    return make_raid(
        ability=entry[0],
        altform=entry[1],
        iv_count=entry[2],
        gender=entry[3],
        gigantamax=bool(entry[4]),
        species=int.from_bytes(entry[5:7], "big"),
        stars=tuple(entry[7:12]),
    )


def _parse_table(table: bytes) -> list[Raid]:
    return [_parse_raid(table[start:start + RAID_SIZE]) for start in range(0, TABLE_SIZE, RAID_SIZE)]


def parse_nests(data: bytes) -> dict[int, Den]:
    """Decode packed den blocks (Shield table, Sword table, big-endian hash) keyed by hash."""
    if len(data) % DEN_BLOCK_SIZE:
        raise ValueError(f"nest data length {len(data)} is not a multiple of {DEN_BLOCK_SIZE}")
    dens: dict[int, Den] = {}
    for start in range(0, len(data), DEN_BLOCK_SIZE):
        block = data[start:start + DEN_BLOCK_SIZE]
        shield_raids = _parse_table(block[:TABLE_SIZE])
        sword_raids = _parse_table(block[TABLE_SIZE:2 * TABLE_SIZE])
        hash_value = int.from_bytes(block[2 * TABLE_SIZE:], "big")
        dens[hash_value] = Den(sword_raids=sword_raids, shield_raids=shield_raids)
    return dens


def _parse_event_entries(entries: Any) -> list[Raid]:
    raids = []
    for entry in entries:
        stars = tuple(int(entry["Probabilities"][index]) for index in range(5))
        if not any(stars):
            continue
        raids.append(
            make_raid(
                ability=int(entry["Ability"]),
                altform=int(entry["AltForm"]),
                iv_count=int(entry["FlawlessIVs"]),
                gender=int(entry["Gender"]),
                gigantamax=bool(entry["IsGigantamax"]),
                species=int(entry["Species"]),
                stars=stars,
                shiny_type=int(entry["ShinyForced"]),
            )
        )
    return raids


def load_event_den(path: str | Path) -> Den | None:
    """Read the event den from ``nests_event.json`` in ``path``.

    Returns None when the file is missing or is not valid JSON.
    """
    file_path = Path(path) / EVENT_FILE_NAME
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError:
        return None
    try:
        document = json.loads(text)
    except ValueError:
        return None
    try:
        tables = document["Tables"]
        sword_raids = _parse_event_entries(tables[0]["Entries"])
        shield_raids = _parse_event_entries(tables[1]["Entries"])
    except (KeyError, IndexError, TypeError) as error:
        raise ValueError(f"malformed event den file {file_path}: {error}") from error
    return Den(sword_raids=sword_raids, shield_raids=shield_raids)


def init(nests: bytes, path: str | Path) -> None:
    """Load the normal and rare dens from ``nests`` and the event den from ``path``."""
    dens = parse_nests(nests)
    event = load_event_den(path)
    if event is not None:
        dens[EVENT_DEN_HASH] = event
    _dens.clear()
    _dens.update(dens)


def get_den(index: int, rarity: int) -> Den:
    """Den at ``index`` with the given rarity; an empty den when none was loaded."""
    return _dens.setdefault(den_hash(index, rarity), Den())