"""Bot actions around a single raid den."""

from __future__ import annotations

from collections.abc import Iterable

from raidseeker.swsh_bot import SWSHBot

WATTS_ADDRESS = "0x45068FE8"

_THROW_PIECE = (("A", 500), ("A", 1300), ("A", 1400), ("A", 1000), ("HOME", 500))
_LEAVE_DEN = (("B", 200), ("B", 900))


class RaidBot(SWSHBot):
    """Collects watts, throws wishing pieces and reads a target den."""

    def __init__(self, ip: str, port: int | str) -> None:
        super().__init__(ip, port)
        self.resets = 0
        self.watts = 0
        self._den_id = 0

    def _tap_sequence(self, steps: Iterable[tuple[str, int]]) -> None:
        for button, delay in steps:
            self.click(button)
            self.pause(delay)

    def set_target_den(self, den_id: int) -> None:
        """Select the den by its 1-based number."""
        self._den_id = den_id - 1

    def get_den_data(self) -> bytes:
        """Raw data of the selected den."""
        return self.read_den(self._den_id)

    def get_watts(self, watt_farmer: bool = False, speed: int = 0) -> None:
        """Collect the watts of the den in front of the player."""
        self._tap_sequence((("A", 1500 - speed), ("A", 1200 - speed)))
        if watt_farmer:
            self.read_watts()
        self._tap_sequence((("A", 1200),))
        if watt_farmer:
            self._tap_sequence(_LEAVE_DEN)
        else:
            self.save_game()

    def read_watts(self) -> None:
        """Refresh ``watts`` from memory."""
        self.watts = int.from_bytes(self.read(WATTS_ADDRESS, "0x3"), "little")

    def throw_piece(self) -> None:
        """Throw a wishing piece into the den and return to HOME."""
        self._tap_sequence(_THROW_PIECE)