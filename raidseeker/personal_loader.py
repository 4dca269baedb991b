"""Loading of the packed species table and lookup by species and form."""

from __future__ import annotations

from raidseeker.personal_info import PersonalInfo

ENTRY_SIZE = 176

_info: list[PersonalInfo] = []


def _u16(entry: bytes, offset: int) -> int:
    return int.from_bytes(entry[offset:offset + 2], "little")


def parse_personal(data: bytes) -> list[PersonalInfo]:
    """Decode a packed table of fixed-size species entries."""
    if len(data) % ENTRY_SIZE:
        raise ValueError(f"personal data length {len(data)} is not a multiple of {ENTRY_SIZE}")
    entries = []
    for start in range(0, len(data), ENTRY_SIZE):
        entry = data[start:start + ENTRY_SIZE]
        entries.append(
            PersonalInfo(
                hp=entry[0],
                atk=entry[1],
                defense=entry[2],
                spe=entry[3],
                spa=entry[4],
                spd=entry[5],
                gender_ratio=entry[18],
                ability1=_u16(entry, 24),
                ability2=_u16(entry, 26),
                ability_h=_u16(entry, 28),
                form_stat_index=_u16(entry, 30),
                form_count=entry[32],
                included=bool((entry[33] >> 6) & 1),
            )
        )
    return entries


def init(data: bytes) -> None:
    """Replace the loaded table with the entries decoded from ``data``."""
    _info[:] = parse_personal(data)


def get_info(species: int, form: int = 0) -> PersonalInfo:
    """Entry of a species, or of its alternate form when one exists."""
    if not _info:
        raise RuntimeError("personal data has not been loaded")
    base = _info[species]
    if form == 0 or base.form_stat_index == 0:
        return base
    return _info[base.form_stat_index + form - 1]