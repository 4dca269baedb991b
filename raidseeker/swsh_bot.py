"""Memory layout and game-flow helpers for Sword and Shield."""

from __future__ import annotations

from raidseeker.bot_core import BotCore, SystemLanguage

PK8_STORED_SIZE = 0x148
PK8_PARTY_SIZE = 0x158
DEN_COUNT = 276

SWORD_VERSION = 44
SHIELD_VERSION = 45

_EVENT_OFFSETS = {
    SystemLanguage.ZHCN: -0xE00,
    SystemLanguage.ZHHANS: -0xE00,
    SystemLanguage.ZHTW: -0xE60,
    SystemLanguage.ZHHANT: -0xE60,
    SystemLanguage.KO: -0xA00,
    SystemLanguage.IT: -0x80,
    SystemLanguage.JA: 0x160,
    SystemLanguage.FR: 0x1F0,
    SystemLanguage.FRCA: 0x1F0,
    SystemLanguage.ES: 0x1C0,
    SystemLanguage.ES419: 0x1C0,
    SystemLanguage.DE: 0x2D0,
}


def event_offset(language: int = SystemLanguage.ENUS) -> int:
    """Shift of the event data blocks in memory for a console language."""
    return _EVENT_OFFSETS.get(language, 0)


def _hex(value: int) -> str:
    return f"0x{value:x}"


class SWSHBot(BotCore):
    """Bot that knows where Sword/Shield keep trainer, party, box and den data."""

    def __init__(self, ip: str, port: int | str) -> None:
        super().__init__(ip, port)
        self.resets = 0
        self.tid = 0
        self.sid = 0
        self.is_playing_sword = False
        self._event_offset = 0
        trainer = self.read_trainer_block()
        if len(trainer) > 0xA4 and trainer[0xA4] in (SWORD_VERSION, SHIELD_VERSION):
            self.is_playing_sword = trainer[0xA4] == SWORD_VERSION
            self._event_offset = event_offset(self.get_system_language())
            self.tid = int.from_bytes(trainer[0xA0:0xA2], "little")
            self.sid = int.from_bytes(trainer[0xA2:0xA4], "little")

    def read_trainer_block(self) -> bytes:
        """Trainer save block followed by three extra trainer bytes."""
        return self.read("0x45068F18", "0x110") + self.read("0x45072DF4", "0x3")

    def read_party(self, slot: int = 1) -> bytes:
        """Party Pokémon at ``slot`` (1-based, at most 6)."""
        slot = min(slot, 6)
        address = 0x450C68B0 + (slot - 1) * PK8_PARTY_SIZE
        return self.read(_hex(address), _hex(PK8_PARTY_SIZE))

    def read_box(self, box: int = 1, slot: int = 1) -> bytes:
        """Boxed Pokémon (box at most 31, slot at most 29, both 1-based)."""
        box = min(box, 31)
        slot = min(slot, 29)
        address = 0x45075880 + (box - 1) * 30 * PK8_PARTY_SIZE + (slot - 1) * PK8_PARTY_SIZE
        return self.read(_hex(address), _hex(PK8_PARTY_SIZE))

    def read_trade(self) -> bytes:
        """Pokémon offered in a trade."""
        return self.read("0xAF286078", _hex(PK8_STORED_SIZE))

    def read_wild(self) -> bytes:
        """Current wild encounter."""
        return self.read("0x8FEA3648", _hex(PK8_STORED_SIZE))

    def read_raid(self) -> bytes:
        """Current raid encounter."""
        return self.read("0x886C1EC8", _hex(PK8_STORED_SIZE))

    def read_legend(self) -> bytes:
        """Current legendary encounter."""
        return self.read("0x886BC348", _hex(PK8_STORED_SIZE))

    def read_event_raid_encounter(self, path: str = "") -> bytes:
        """Event raid encounter table, saved as ``normal_encount`` under ``path``."""
        return self.read(_hex(0x2F9EB300 + self._event_offset), "0x23D4", f"{path}normal_encount")

    def read_event_crystal_encounter(self, path: str = "") -> bytes:
        """Event crystal encounter table, saved as ``dai_encount`` under ``path``."""
        return self.read(_hex(0x2F9ED788 + self._event_offset), "0x1241C", f"{path}dai_encount")

    def read_event_drop_rewards(self, path: str = "") -> bytes:
        """Event drop rewards, saved as ``drop_rewards`` under ``path``."""
        return self.read(_hex(0x2F9FFC58 + self._event_offset), "0x426C", f"{path}drop_rewards")

    def read_event_bonus_rewards(self, path: str = "") -> bytes:
        """Event bonus rewards, saved as ``bonus_rewards`` under ``path``."""
        return self.read(_hex(0x2FA03F78 + self._event_offset), "0x116C4", f"{path}bonus_rewards")

    def read_den(self, den_id: int) -> bytes:
        """Raw data of one den (index clamped to the last den)."""
        den_size = 0x18
        den_id = min(den_id, DEN_COUNT + 31)
        return self.read(_hex(0x450C8A70 + den_id * den_size), _hex(den_size))

    def read_screen_off(self) -> bytes:
        """Screen state flag used to detect loading screens."""
        return self.read("0x6B30FA00", "0x8")

    def read_overworld_check(self) -> bytes:
        """Flag telling whether the player is in the overworld."""
        return self.read(_hex(0x2F770638 + self._event_offset), "0x4")

    def read_battle_start(self) -> bytes:
        """Flag telling whether a battle has started."""
        return self.read("0x6B578EDC", "0x8")

    def increase_resets(self) -> None:
        """Count one more reset."""
        self.resets += 1

    def quit_game(self, need_home: bool = True) -> None:
        """Close the running game from the HOME menu."""
        if need_home:
            self.click("HOME")
            self.pause(800)
        self.click("X")
        self.pause(200)
        self.click("X")
        self.pause(400)
        self.click("A")
        self.pause(200)
        self.click("A")
        self.pause(3000)

    def enter_game(self) -> None:
        """Start the game from the HOME menu."""
        self.click("A")
        self.pause(200)
        self.click("A")
        self.pause(1300)
        self.click("A")
        self.pause(200)
        self.click("A")

    def _require_connection(self) -> None:
        if not self.is_connected():
            raise ConnectionError("not connected to the console")

    def skip_intro_animation(self) -> None:
        """Press through the title screen until the game has loaded."""
        self._require_connection()
        self.pause(14700)
        while True:
            self.pause(300)
            screen = self.read_screen_off()[:8]
            if int.from_bytes(screen, "big") >= 0xFFFF:
                break
            self._require_connection()
            self.click("A")
        for _ in range(10):
            self.click("A")
            self.pause(500)
        self.pause(800)
        while True:
            screen = self.read_screen_off()
            loaded = bool(screen) and screen[0] != 0
            self.pause(500)
            if loaded:
                break
            self._require_connection()

    def save_game(self) -> None:
        """Save from the X menu."""
        self.click("X")
        self.pause(1200)
        self.click("R")
        self.pause(1500)
        self.click("A")
        self.pause(4000)

    def close_game(self) -> None:
        """End the session."""
        self.close()

    def found_actions(self) -> bool:
        """Handle a found target: end the session and stop searching."""
        self.close_game()
        return False

    def not_found_actions(self) -> None:
        """Handle a miss: count the reset."""
        self.increase_resets()