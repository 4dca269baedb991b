import socketserver
import threading
from unittest import mock

import pytest

from raidseeker.bot_core import SystemLanguage
from raidseeker.swsh_bot import SWSHBot, event_offset

TRAINER_ADDRESS = 0x45068F18
SCREEN_ADDRESS = 0x6B30FA00


class _Handler(socketserver.StreamRequestHandler):
    def handle(self):
        for raw in self.rfile:
            command = raw.decode().strip()
            if command:
                self.server.commands.append(command)
                self.wfile.write(self.server.answer(command).encode())


class FakeConsole(socketserver.TCPServer):
    """Serves one client, logging its commands and answering memory reads."""

    def __init__(self, memory=None, language=1):
        super().__init__(("127.0.0.1", 0), _Handler)
        self.memory = memory or {}
        self.language = language
        self.commands = []
        self.port = self.server_address[1]
        self._worker = threading.Thread(target=self._serve_once, daemon=True)
        self._worker.start()

    def _serve_once(self):
        self.handle_request()
        self.server_close()

    def answer(self, command):
        name, *args = command.split()
        if name == "peek":
            address, size = (int(value, 16) for value in args)
            return self.memory.get(address, b"")[:size].ljust(size, b"\0").hex() + "\n"
        if name == "getSystemLanguage":
            return f"{self.language:02x}\n"
        return ""

    def finish(self):
        self._worker.join(timeout=5)
        return self.commands


def _run(action=None, memory=None, language=1):
    """Run ``action`` against a fresh bot; return bot, result, commands."""
    console = FakeConsole(memory, language)
    bot = SWSHBot("127.0.0.1", console.port)
    with mock.patch("raidseeker.bot_core.time.sleep"):
        result = action(bot) if action else None
    bot.close_now()
    return bot, result, console.finish()


def _trainer_block(version, tid=12345, sid=54321):
    block = bytearray(0x110)
    block[0xA0:0xA2] = tid.to_bytes(2, "little")
    block[0xA2:0xA4] = sid.to_bytes(2, "little")
    block[0xA4] = version
    return bytes(block)


def _starting(commands, prefix):
    return [command for command in commands if command.startswith(prefix)]


@pytest.mark.parametrize(
    "language, offset",
    [
        (SystemLanguage.JA, 0x160),
        (SystemLanguage.DE, 0x2D0),
        (SystemLanguage.KO, -0xA00),
        (SystemLanguage.ZHHANT, -0xE60),
        (SystemLanguage.ENUS, 0),
        (SystemLanguage.NL, 0),
    ],
)
def test_event_offset(language, offset):
    assert event_offset(language) == offset


def test_trainer_details_are_read():
    bot, _, commands = _run(memory={TRAINER_ADDRESS: _trainer_block(44)})
    assert bot.is_playing_sword
    assert (bot.tid, bot.sid) == (12345, 54321)
    assert "getSystemLanguage" in commands


def test_unknown_game_leaves_defaults():
    bot, _, commands = _run()
    assert not bot.is_playing_sword
    assert (bot.tid, bot.sid) == (0, 0)
    assert "getSystemLanguage" not in commands


def _event_address(language, path):
    bot, data, commands = _run(
        lambda b: b.read_event_raid_encounter(path),
        memory={TRAINER_ADDRESS: _trainer_block(45)},
        language=language,
    )
    return int(_starting(commands, "peek")[-1].split()[1], 16), data, bot


def test_event_block_uses_language_offset(tmp_path):
    german, data, bot = _event_address(SystemLanguage.DE, f"{tmp_path}/")
    english, _, _ = _event_address(SystemLanguage.ENUS, f"{tmp_path}/")
    assert not bot.is_playing_sword
    assert german - english == event_offset(SystemLanguage.DE)
    assert len(data) == 0x23D4
    assert (tmp_path / "normal_encount").read_bytes() == data


def test_slot_limits_are_clamped():
    def reads(bot):
        bot.read_party(7)
        bot.read_party(6)
        bot.read_box(40, 35)
        bot.read_box(31, 29)
        bot.read_den(1000)
        bot.read_den(307)

    _, _, commands = _run(reads)
    peeks = _starting(commands, "peek")[-6:]
    assert peeks[0::2] == peeks[1::2]


def test_quit_and_enter_game_button_sequences():
    def reset(bot):
        bot.quit_game(False)
        bot.enter_game()

    _, _, commands = _run(reset)
    assert _starting(commands, "click") == ["click X", "click X"] + ["click A"] * 6


def test_save_game_sequence():
    _, _, commands = _run(lambda b: b.save_game())
    assert _starting(commands, "click") == ["click X", "click R", "click A"]


def test_skip_intro_animation_when_loaded():
    _, _, commands = _run(lambda b: b.skip_intro_animation(), memory={SCREEN_ADDRESS: b"\xff" * 8})
    assert _starting(commands, "click") == ["click A"] * 10


def test_skip_intro_animation_needs_connection():
    bot, _, _ = _run()
    with pytest.raises(ConnectionError):
        bot.skip_intro_animation()


def test_reset_and_found_actions():
    console = FakeConsole()
    bot = SWSHBot("127.0.0.1", console.port)
    bot.not_found_actions()
    bot.not_found_actions()
    with mock.patch("raidseeker.bot_core.time.sleep"):
        keep_going = bot.found_actions()
    assert bot.resets == 2
    assert keep_going is False
    assert not bot.is_connected()
    assert console.finish()[-1] == "detachController"