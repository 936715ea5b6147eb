"""Length-exact reads and writes over a stream connection."""

from __future__ import annotations

BUFFER_SIZE = 32768


def _recv(conn, size: int) -> bytes:
    recv = getattr(conn, "recv", None)
    if recv is not None:
        return recv(size)
    return conn.read(size)


def _send(conn, data: bytes) -> None:
    sendall = getattr(conn, "sendall", None)
    if sendall is not None:
        sendall(data)
        return
    written = conn.write(data)
    if written is not None and written != len(data):
        raise OSError("write != len(data)")


class DCSTcp:
    """Reads and writes exact byte counts over a connection while running."""

    def __init__(self, conn) -> None:
        self.conn = conn
        self.running = False
        self.buffer_size = BUFFER_SIZE
        self.start()

    def start(self) -> None:
        """Allow transfers."""
        self.running = True

    def stop(self) -> None:
        """Stop transfers; pending loops end after their current chunk."""
        self.running = False

    def _chunk(self, length: int) -> bytes:
        data = _recv(self.conn, min(self.buffer_size, length))
        if not data:
            raise EOFError("connection closed")
        return data

    def read_byte(self) -> int:
        """Read a single byte."""
        data = self.read_bytes(1)
        if not data:
            raise RuntimeError("connection stopped")
        return data[0]

    def read_bytes(self, length: int) -> bytes:
        """Read exactly ``length`` bytes, or fewer if stopped meanwhile."""
        parts = []
        while self.running and length > 0:
            data = self._chunk(length)
            length -= len(data)
            parts.append(data)
        return b"".join(parts)

    def write_byte(self, data: int) -> "DCSTcp":
        """Write a single byte."""
        return self.write_bytes(bytes([data]))

    def write_bytes(self, data: bytes) -> "DCSTcp":
        """Write all of ``data``; empty or missing data is ignored."""
        if not data:
            return self
        _send(self.conn, data)
        return self

    def read_to(self, writer, length: int) -> "DCSTcp":
        """Copy exactly ``length`` bytes from the connection into ``writer``."""
        while self.running and length > 0:
            data = self._chunk(length)
            length -= len(data)
            written = writer.write(data)
            if written is not None and written != len(data):
                raise OSError("write != read")
        return self

    def write_from(self, reader, length: int) -> "DCSTcp":
        """Copy exactly ``length`` bytes from ``reader`` to the connection."""
        while self.running and length > 0:
            data = reader.read(min(self.buffer_size, length))
            if not data:
                raise EOFError("reader exhausted")
            length -= len(data)
            _send(self.conn, data)
        return self