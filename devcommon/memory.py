"""memcpy- and memcmp-style helpers for byte buffers."""

from __future__ import annotations

from typing import Optional


def mem_cpy(dst: bytearray, src: bytes, length: int) -> bytearray:
    """Copy the first ``length`` bytes of ``src`` into ``dst``, clipped to both sizes."""
    count = max(0, min(len(dst), length, len(src)))
    dst[:count] = src[:count]
    return dst


def mem_cmp(p1: Optional[bytes], p2: Optional[bytes], length: int) -> int:
    """Compare the first ``length`` bytes of two buffers.

    Returns 0 when equal, otherwise the difference of the first differing bytes
    taken modulo 256. A missing or too short first buffer gives -1, a too short
    second buffer gives 1.
    """
    if p1 is None or p2 is None:
        return -1
    if len(p1) < length:
        return -1
    if len(p2) < length:
        return 1
    for a, b in zip(p1[:length], p2[:length]):
        if a != b:
            return (a - b) & 0xFF
    return 0