"""A socket wrapper that dumps the head of every read for debugging."""

from __future__ import annotations

import socket
import sys
import traceback
from typing import Optional

_DUMP_LIMIT = 20


def _printable(byte: int) -> str:
    return chr(byte) if 32 <= byte <= 126 else "."


def _hex_dump(data: bytes) -> str:
    """Return a canonical hex dump: offset, two groups of eight bytes, then text."""
    lines = []
    for offset in range(0, len(data), 16):
        chunk = data[offset:offset + 16]
        left = " ".join(f"{b:02x}" for b in chunk[:8])
        right = " ".join(f"{b:02x}" for b in chunk[8:])
        text = "".join(_printable(b) for b in chunk)
        lines.append(f"{offset:08x}  {left:<23}  {right:<23}  |{text}|\n")
    return "".join(lines)


class DCConn:
    """Wraps a connected socket; every read prints a stack trace and a hex dump."""

    def __init__(self, conn: socket.socket) -> None:
        self.base = conn

    def read(self, size: int) -> bytes:
        """Receive up to ``size`` bytes, dumping the first twenty of them."""
        data = self.base.recv(size)
        print("ReadHex:")
        traceback.print_stack(file=sys.stderr)
        print(_hex_dump(data[:_DUMP_LIMIT]))
        return data

    def write(self, data: bytes) -> int:
        """Send all of ``data`` and return how many bytes were sent."""
        self.base.sendall(data)
        return len(data)

    def close(self) -> None:
        """Close the underlying socket."""
        self.base.close()

    def local_addr(self):
        """Return the local address of the socket."""
        return self.base.getsockname()

    def remote_addr(self):
        """Return the address of the peer."""
        return self.base.getpeername()

    def settimeout(self, timeout: Optional[float]) -> None:
        """Set the timeout, in seconds, for reads and writes (None blocks)."""
        self.base.settimeout(timeout)

    def __enter__(self) -> "DCConn":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()