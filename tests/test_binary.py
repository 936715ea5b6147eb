import pytest

from devcommon import binary


def _samples(size, signed):
    bits = size * 8
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    return [low, high, 0, 1, high // 3]


def test_pinned_values():
    assert binary.uint32_to_bytes_big_endian(0x01020304) == b"\x01\x02\x03\x04"
    assert binary.uint16_to_bytes_little_endian(0x0102) == b"\x02\x01"
    assert binary.int16_to_bytes_big_endian(-1) == b"\xff\xff"


@pytest.mark.parametrize("value", _samples(2, False))
def test_uint16_round_trip(value):
    be = binary.uint16_to_bytes_big_endian(value)
    le = binary.uint16_to_bytes_little_endian(value)
    assert len(be) == 2 and len(le) == 2
    assert int.from_bytes(be, "big") == value
    assert int.from_bytes(le, "little") == value
    assert be == le[::-1]


@pytest.mark.parametrize("value", _samples(2, True))
def test_int16_round_trip(value):
    be = binary.int16_to_bytes_big_endian(value)
    le = binary.int16_to_bytes_little_endian(value)
    assert len(be) == 2 and len(le) == 2
    assert int.from_bytes(be, "big", signed=True) == value
    assert int.from_bytes(le, "little", signed=True) == value
    assert be == le[::-1]


@pytest.mark.parametrize("value", _samples(4, False))
def test_uint32_round_trip(value):
    be = binary.uint32_to_bytes_big_endian(value)
    le = binary.uint32_to_bytes_little_endian(value)
    assert len(be) == 4 and len(le) == 4
    assert int.from_bytes(be, "big") == value
    assert int.from_bytes(le, "little") == value
    assert be == le[::-1]


@pytest.mark.parametrize("value", _samples(4, True))
def test_int32_round_trip(value):
    be = binary.int32_to_bytes_big_endian(value)
    le = binary.int32_to_bytes_little_endian(value)
    assert len(be) == 4 and len(le) == 4
    assert int.from_bytes(be, "big", signed=True) == value
    assert int.from_bytes(le, "little", signed=True) == value
    assert be == le[::-1]


@pytest.mark.parametrize("value", _samples(8, False))
def test_uint64_round_trip(value):
    be = binary.uint64_to_bytes_big_endian(value)
    le = binary.uint64_to_bytes_little_endian(value)
    assert len(be) == 8 and len(le) == 8
    assert int.from_bytes(be, "big") == value
    assert int.from_bytes(le, "little") == value
    assert be == le[::-1]


@pytest.mark.parametrize("value", _samples(8, True))
def test_int64_round_trip(value):
    be = binary.int64_to_bytes_big_endian(value)
    le = binary.int64_to_bytes_little_endian(value)
    assert len(be) == 8 and len(le) == 8
    assert int.from_bytes(be, "big", signed=True) == value
    assert int.from_bytes(le, "little", signed=True) == value
    assert be == le[::-1]


def test_out_of_range_raises():
    with pytest.raises(OverflowError):
        binary.uint16_to_bytes_big_endian(1 << 16)
    with pytest.raises(OverflowError):
        binary.uint16_to_bytes_little_endian(1 << 16)
    with pytest.raises(OverflowError):
        binary.int16_to_bytes_big_endian(1 << 15)
    with pytest.raises(OverflowError):
        binary.int16_to_bytes_little_endian(1 << 15)
    with pytest.raises(OverflowError):
        binary.uint32_to_bytes_big_endian(1 << 32)
    with pytest.raises(OverflowError):
        binary.uint32_to_bytes_little_endian(1 << 32)
    with pytest.raises(OverflowError):
        binary.int32_to_bytes_big_endian(1 << 31)
    with pytest.raises(OverflowError):
        binary.int32_to_bytes_little_endian(1 << 31)
    with pytest.raises(OverflowError):
        binary.uint64_to_bytes_big_endian(1 << 64)
    with pytest.raises(OverflowError):
        binary.uint64_to_bytes_little_endian(1 << 64)
    with pytest.raises(OverflowError):
        binary.int64_to_bytes_big_endian(1 << 63)
    with pytest.raises(OverflowError):
        binary.int64_to_bytes_little_endian(1 << 63)


@pytest.mark.parametrize(
    "encoder",
    [
        binary.uint16_to_bytes_big_endian,
        binary.uint32_to_bytes_little_endian,
        binary.uint64_to_bytes_big_endian,
    ],
)
def test_unsigned_rejects_negative(encoder):
    with pytest.raises(OverflowError):
        encoder(-1)


def test_signed_negative_matches_unsigned_twos_complement():
    assert binary.int32_to_bytes_big_endian(-2) == binary.uint32_to_bytes_big_endian((1 << 32) - 2)
    assert binary.int64_to_bytes_little_endian(-5) == binary.uint64_to_bytes_little_endian((1 << 64) - 5)