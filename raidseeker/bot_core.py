"""Line-based TCP remote control of a console running a sys-botbase style server."""

from __future__ import annotations

import socket
import string
import time
from enum import IntEnum
from pathlib import Path

_CONNECT_TIMEOUT = 3.0
_READ_TIMEOUT = 30.0
_HEX_DIGITS = frozenset(string.hexdigits)


class SystemLanguage(IntEnum):
    """Console system language identifiers."""

    JA = 0
    ENUS = 1
    FR = 2
    DE = 3
    IT = 4
    ES = 5
    ZHCN = 6
    KO = 7
    NL = 8
    PT = 9
    ZHTW = 11
    ENGB = 12
    FRCA = 13
    ES419 = 14
    ZHHANS = 15
    ZHHANT = 16


def _decode_hex(text: str) -> bytes:
    """Decode hex text, skipping any characters that are not hex digits."""
    digits = "".join(char for char in text if char in _HEX_DIGITS)
    if len(digits) % 2:
        digits = "0" + digits
    return bytes.fromhex(digits)


class BotCore:
    """Connection to the remote-control server with button, stick and memory commands."""

    def __init__(self, ip: str, port: int | str) -> None:
        self.ip = ip
        self.port = int(port)
        self._sock: socket.socket | None = None
        self._pending = bytearray()
        self._left_stick = [0, 0]
        self._right_stick = [0, 0]
        try:
            self._sock = socket.create_connection((ip, self.port), timeout=_CONNECT_TIMEOUT)
        except OSError:
            self._sock = None
            return
        self._sock.settimeout(_READ_TIMEOUT)
        self.configure()

    def __enter__(self) -> BotCore:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _disconnect(self) -> None:
        if self._sock is not None:
            try:
                self._sock.close()
            except OSError:
                pass
            self._sock = None

    def _read_reply(self) -> str:
        """Receive one newline-terminated reply, without the newline."""
        while self._sock is not None and b"\n" not in self._pending:
            try:
                chunk = self._sock.recv(4096)
            except socket.timeout:
                break
            except OSError:
                self._disconnect()
                break
            if not chunk:
                self._disconnect()
                break
            self._pending += chunk
        line, _, rest = bytes(self._pending).partition(b"\n")
        self._pending = bytearray(rest)
        return line.decode("latin-1")

    def send_command(self, content: str) -> None:
        """Send one command line when connected."""
        if self._sock is None:
            return
        try:
            self._sock.sendall(f"{content}\r\n".encode("utf-8"))
        except OSError:
            self._disconnect()

    def configure(self) -> None:
        """Turn off command echoing on the server."""
        self.send_command("configure echoCommands 0")

    def detach(self) -> None:
        """Release the virtual controller."""
        self.send_command("detachController")

    def close(self) -> None:
        """Wait briefly, detach the controller and disconnect."""
        if self.is_connected():
            self.pause(500)
            self.detach()
            self._disconnect()

    def close_now(self) -> None:
        """Detach the controller and disconnect without waiting."""
        if self.is_connected():
            self.detach()
            self._disconnect()

    def click(self, button: str) -> None:
        """Press and release a button."""
        self.send_command(f"click {button}")

    def press(self, button: str) -> None:
        """Hold a button down."""
        self.send_command(f"press {button}")

    def release(self, button: str) -> None:
        """Release a held button."""
        self.send_command(f"release {button}")

    def move_stick(self, button: str, x: int, y: int) -> None:
        """Set a stick position; coordinates are sent in hex."""
        self.send_command(f"setStick {button} 0x{x:x} 0x{y:x}")

    def move_left_stick(self, x: int | None = None, y: int | None = None) -> None:
        """Move the left stick, keeping the last value of an omitted axis."""
        if x is not None:
            self._left_stick[0] = x
        if y is not None:
            self._left_stick[1] = y
        self.move_stick("LEFT", *self._left_stick)

    def move_right_stick(self, x: int | None = None, y: int | None = None) -> None:
        """Move the right stick, keeping the last value of an omitted axis."""
        if x is not None:
            self._right_stick[0] = x
        if y is not None:
            self._right_stick[1] = y
        self.move_stick("RIGHT", *self._right_stick)

    def read(self, address: str, size: str, file_name: str = "") -> bytes:
        """Read ``size`` bytes at ``address``; also save them to ``file_name`` if given."""
        data = b""
        if self.is_connected():
            self.send_command(f"peek {address} {size}")
            data = _decode_hex(self._read_reply())
        if file_name:
            try:
                Path(file_name).write_bytes(data)
            except OSError:
                pass
        return data

    def write(self, address: str, data: str) -> None:
        """Write hex ``data`` at ``address``."""
        self.send_command(f"poke {address} {data}")

    def get_system_language(self) -> int:
        """Console language as reported by the server, 0 when unavailable."""
        self.send_command("getSystemLanguage")
        if not self.is_connected():
            return 0
        text = self._read_reply().strip()
        try:
            return int(text, 16)
        except ValueError:
            return 0

    def pause(self, duration: int) -> None:
        """Sleep for ``duration`` milliseconds."""
        time.sleep(duration / 1000)

    def is_connected(self) -> bool:
        """Whether the connection is open."""
        return self._sock is not None