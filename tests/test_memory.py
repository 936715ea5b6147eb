from devcommon.memory import mem_cmp, mem_cpy


def test_mem_cmp_source_case():
    p2 = bytes([0x34, 0x23, 0x34, 0x45, 0x12])
    p3 = bytes([0x34, 0x23, 0x34, 0x45])
    assert mem_cmp(p3, p2, 4) == 0


def test_mem_cmp_none_buffers():
    assert mem_cmp(None, b"a", 1) == -1
    assert mem_cmp(b"a", None, 1) == -1


def test_mem_cmp_short_buffers():
    assert mem_cmp(b"ab", b"abc", 3) == -1
    assert mem_cmp(b"abc", b"ab", 3) == 1


def test_mem_cmp_difference_wraps_as_byte():
    assert mem_cmp(b"\x03", b"\x01", 1) == 2
    assert mem_cmp(b"\x01", b"\x02", 1) == 255


def test_mem_cmp_only_first_length_bytes():
    assert mem_cmp(b"abX", b"abY", 2) == 0
    assert mem_cmp(b"", b"", 0) == 0


def test_mem_cpy_clips_to_source():
    dst = bytearray(5)
    result = mem_cpy(dst, b"abc", 10)
    assert result is dst
    assert dst == bytearray(b"abc\x00\x00")


def test_mem_cpy_clips_to_length_and_destination():
    dst = bytearray(b"xxxx")
    mem_cpy(dst, b"abcdef", 2)
    assert dst == bytearray(b"abxx")
    small = bytearray(2)
    mem_cpy(small, b"abcdef", 6)
    assert small == bytearray(b"ab")


def test_mem_cpy_negative_length_copies_nothing():
    dst = bytearray(b"keep")
    mem_cpy(dst, b"zzzz", -3)
    assert dst == bytearray(b"keep")