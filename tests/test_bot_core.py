import socket
import threading
from unittest import mock

from raidseeker.bot_core import BotCore, SystemLanguage


class FakeSysBot:
    """Single-connection server that records commands and answers peeks."""

    def __init__(self, memory=None, language=1):
        self.memory = dict(memory or {})
        self.language = language
        self.commands = []
        self._listener = socket.socket()
        self._listener.bind(("127.0.0.1", 0))
        self._listener.listen(1)
        self.port = self._listener.getsockname()[1]
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _serve(self):
        conn, _ = self._listener.accept()
        with conn, conn.makefile("rb") as reader:
            for raw in reader:
                command = raw.decode().strip()
                if not command:
                    continue
                self.commands.append(command)
                reply = self._reply(command)
                if reply is not None:
                    conn.sendall(reply.encode())
        self._listener.close()

    def _reply(self, command):
        parts = command.split()
        if parts[0] == "peek":
            address = int(parts[1], 16)
            size = int(parts[2], 16)
            data = self.memory.get(address, b"")[:size].ljust(size, b"\0")
            return data.hex() + "\n"
        if parts[0] == "getSystemLanguage":
            return f"{self.language:02x}\n"
        return None

    def finish(self):
        self._thread.join(timeout=5)
        return self.commands


def _session(action, port_type=int, **server_options):
    """Connect, run ``action`` on the bot, disconnect; return bot, result, commands."""
    server = FakeSysBot(**server_options)
    bot = BotCore("127.0.0.1", port_type(server.port))
    result = action(bot)
    bot.close_now()
    return bot, result, server.finish()


def _unused_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_connect_configures_first():
    bot, was_connected, commands = _session(lambda b: b.is_connected(), port_type=str)
    assert was_connected
    assert not bot.is_connected()
    assert commands == ["configure echoCommands 0", "detachController"]


def test_button_commands():
    def buttons(bot):
        bot.click("A")
        bot.press("B")
        bot.release("B")

    _, _, commands = _session(buttons)
    assert commands[1:4] == ["click A", "press B", "release B"]


def test_stick_commands_keep_last_axis():
    def sticks(bot):
        bot.move_stick("LEFT", 0x7FFF, 0)
        bot.move_left_stick(0x100, 0x200)
        bot.move_left_stick(y=0x300)
        bot.move_right_stick(x=0x10)

    _, _, commands = _session(sticks)
    assert commands[1:5] == [
        "setStick LEFT 0x7fff 0x0",
        "setStick LEFT 0x100 0x200",
        "setStick LEFT 0x100 0x300",
        "setStick RIGHT 0x10 0x0",
    ]


def test_read_returns_bytes_and_saves_file(tmp_path):
    target = tmp_path / "dump.bin"

    def reads(bot):
        return bot.read("0x1000", "0x10", str(target)), bot.read("0x1000", "0x4")

    _, (data, second), commands = _session(reads, memory={0x1000: bytes(range(16))})
    assert data == bytes(range(16))
    assert target.read_bytes() == data
    assert second == bytes(range(4))
    assert "peek 0x1000 0x10" in commands


def test_write_sends_poke():
    _, _, commands = _session(lambda b: b.write("0x2000", "0xABCD"))
    assert commands[1] == "poke 0x2000 0xABCD"


def test_system_language():
    _, language, _ = _session(lambda b: b.get_system_language(), language=11)
    assert language == SystemLanguage.ZHTW


def test_close_pauses_then_detaches():
    server = FakeSysBot()
    bot = BotCore("127.0.0.1", server.port)
    with mock.patch("raidseeker.bot_core.time.sleep") as sleep:
        bot.close()
    assert sleep.call_count == 1
    assert not bot.is_connected()
    assert server.finish()[-1] == "detachController"


def test_context_manager_closes():
    server = FakeSysBot()
    with mock.patch("raidseeker.bot_core.time.sleep"):
        with BotCore("127.0.0.1", server.port) as bot:
            bot.click("HOME")
    assert not bot.is_connected()
    assert server.finish() == ["configure echoCommands 0", "click HOME", "detachController"]


def test_unconnected_bot_is_inert(tmp_path):
    bot = BotCore("127.0.0.1", _unused_port())
    assert not bot.is_connected()
    assert bot.read("0x0", "0x4") == b""
    assert bot.get_system_language() == 0
    target = tmp_path / "empty.bin"
    bot.read("0x0", "0x4", str(target))
    assert target.read_bytes() == b""