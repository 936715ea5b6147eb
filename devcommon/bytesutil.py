"""Bounded copying between byte buffers and readers."""

from __future__ import annotations

_CHUNK = 1024


def bytes_copy(dst: bytearray, dst_offset: int, src: bytes, src_offset: int, length: int) -> int:
    """Copy up to ``length`` bytes from ``src[src_offset:]`` into ``dst[dst_offset:]``.

    The count is clipped to what both buffers hold; negative offsets copy nothing.
    Returns the number of bytes copied.
    """
    count = min(length, len(src) - src_offset, len(dst) - dst_offset)
    if count <= 0 or dst_offset < 0 or src_offset < 0:
        return 0
    dst[dst_offset:dst_offset + count] = src[src_offset:src_offset + count]
    return count


def reader_copy(reader, out: bytearray) -> int:
    """Read up to ``len(out)`` bytes from ``reader`` into the start of ``out``.

    Returns the number of bytes stored. Raises ValueError if the reader hands
    back more data than was asked for.
    """
    collected = bytearray()
    remaining = len(out)
    while remaining > 0:
        chunk = reader.read(min(remaining, _CHUNK))
        if not chunk:
            break
        collected += chunk
        remaining -= len(chunk)
    if len(collected) > len(out):
        raise ValueError("ReaderCopy is error")
    return bytes_copy(out, 0, collected, 0, len(collected))