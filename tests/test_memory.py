import pytest

from ftkit.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    original = bytes(b"hello world")
    buf = bytearray(original)
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert all(byte == ord("x") for byte in buf[:5])
    assert buf[5:] == original[5:]
    assert len(buf) == len(original)


def test_memset_truncates_value_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytearray([0x41] * 3)


def test_memset_zero_count_is_noop():
    buf = bytearray(b"abc")
    memset(buf, 0, 0)
    assert buf == bytearray(b"abc")


def test_memset_past_end_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"abcdef")
    result = bzero(buf, 4)
    assert result is buf
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"ef"


def test_memcpy_copies_prefix():
    dest = bytearray(b"..........")
    src = b"copied"
    result = memcpy(dest, src, len(src))
    assert result is dest
    assert dest[: len(src)] == src
    assert dest[len(src):] == b"." * (10 - len(src))


def test_memcpy_same_buffer_unchanged():
    buf = bytearray(b"same")
    memcpy(buf, buf, 4)
    assert buf == bytearray(b"same")


def test_memcpy_too_long_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 3)


def test_memmove_forward_overlap():
    original = bytes(b"abcdefgh")
    buf = bytearray(original)
    result = memmove(buf, 2, 0, 5)
    assert result is buf
    assert buf[2:7] == original[0:5]
    assert buf[:2] == original[:2]
    assert buf[7:] == original[7:]


def test_memmove_backward_overlap():
    original = bytes(b"abcdefgh")
    buf = bytearray(original)
    memmove(buf, 0, 3, 5)
    assert buf[0:5] == original[3:8]
    assert buf[5:] == original[5:]


def test_memmove_pinned_example():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    idx = memchr(data, ord("l"), len(data))
    assert data[idx] == ord("l")
    assert ord("l") not in data[:idx]


def test_memchr_respects_count():
    data = b"abcdef"
    assert memchr(data, ord("e"), 3) is None
    assert memchr(data, ord("e"), 6) == data.index(b"e")


def test_memchr_value_is_taken_modulo_256():
    data = bytes([1, 2, 0x41, 4])
    assert memchr(data, 0x141, 4) == memchr(data, 0x41, 4)


def test_memchr_finds_nul_byte():
    data = b"ab\x00cd"
    idx = memchr(data, 0, 5)
    assert data[idx] == 0


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0
    assert memcmp(b"", b"", 0) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x01\x80zz", b"\x01\x10zz"
    assert memcmp(a, b, 4) == -memcmp(b, a, 4)


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_too_long_raises():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_calloc_returns_zeroed_buffer():
    buf = calloc(4, 3)
    assert len(buf) == 4 * 3
    assert not any(buf)


def test_calloc_zero_sizes():
    assert len(calloc(0, 5)) == 0
    assert len(calloc(5, 0)) == 0


def test_calloc_buffer_is_writable():
    buf = calloc(2, 2)
    memset(buf, 7, 4)
    assert all(byte == 7 for byte in buf)


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX, 2)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)