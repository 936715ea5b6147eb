"""Fixed-width integer to byte conversions in both byte orders."""

from __future__ import annotations


def _pack(value: int, size: int, order: str, signed: bool) -> bytes:
    return value.to_bytes(size, order, signed=signed)


def uint32_to_bytes_big_endian(src: int) -> bytes:
    """Encode an unsigned 32-bit integer, most significant byte first."""
    return _pack(src, 4, "big", False)


def int32_to_bytes_big_endian(src: int) -> bytes:
    """Encode a signed 32-bit integer, most significant byte first."""
    return _pack(src, 4, "big", True)


def uint16_to_bytes_big_endian(src: int) -> bytes:
    """Encode an unsigned 16-bit integer, most significant byte first."""
    return _pack(src, 2, "big", False)


def int16_to_bytes_big_endian(src: int) -> bytes:
    """Encode a signed 16-bit integer, most significant byte first."""
    return _pack(src, 2, "big", True)


def uint64_to_bytes_big_endian(src: int) -> bytes:
    """Encode an unsigned 64-bit integer, most significant byte first."""
    return _pack(src, 8, "big", False)


def int64_to_bytes_big_endian(src: int) -> bytes:
    """Encode a signed 64-bit integer, most significant byte first."""
    return _pack(src, 8, "big", True)


def uint32_to_bytes_little_endian(src: int) -> bytes:
    """Encode an unsigned 32-bit integer, least significant byte first."""
    return _pack(src, 4, "little", False)


def int32_to_bytes_little_endian(src: int) -> bytes:
    """Encode a signed 32-bit integer, least significant byte first."""
    return _pack(src, 4, "little", True)


def uint16_to_bytes_little_endian(src: int) -> bytes:
    """Encode an unsigned 16-bit integer, least significant byte first."""
    return _pack(src, 2, "little", False)


def int16_to_bytes_little_endian(src: int) -> bytes:
    """Encode a signed 16-bit integer, least significant byte first."""
    return _pack(src, 2, "little", True)


def uint64_to_bytes_little_endian(src: int) -> bytes:
    """Encode an unsigned 64-bit integer, least significant byte first."""
    return _pack(src, 8, "little", False)


def int64_to_bytes_little_endian(src: int) -> bytes:
    """Encode a signed 64-bit integer, least significant byte first."""
    return _pack(src, 8, "little", True)