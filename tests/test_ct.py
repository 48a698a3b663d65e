import pytest

from sigprims.ct import is_zero, leading_zeros, lt, rshift

A = bytes([0, 0, 0, 0])
B = bytes([0, 0, 0, 1])
C = bytes([0xFF, 0, 0, 0])
D = bytes([0xFF, 0, 0, 1])
E = bytes([0xFF, 0xFF, 0xFF, 0xFE])
F = bytes([0xFF, 0xFF, 0xFF, 0xFF])


def test_is_zero():
    assert is_zero(A) is True
    assert is_zero(B) is False


@pytest.mark.parametrize("value", [A, B, C, D, E, F])
def test_lt_equal_is_false(value):
    assert lt(value, value) is False


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (A, B, True),
        (A, C, True),
        (B, A, False),
        (C, A, False),
        (B, C, True),
        (B, D, True),
        (C, B, False),
        (D, B, False),
        (C, D, True),
        (C, E, True),
        (D, C, False),
        (E, C, False),
        (E, F, True),
        (F, E, False),
    ],
)
def test_lt(a, b, expected):
    assert lt(a, b) is expected


def test_lt_length_mismatch():
    with pytest.raises(ValueError):
        lt(b"\x00", b"\x00\x00")


def test_leading_zeros():
    assert leading_zeros(bytes([0x04, 0xFF])) == 5
    assert leading_zeros(bytes([0x80])) == 0
    assert leading_zeros(bytes([0x01])) == 7
    assert leading_zeros(bytes([0x00, 0x01])) == 8


def test_rshift():
    assert rshift(bytes([0x01, 0x80]), 1) == bytes([0x00, 0xC0])
    assert rshift(bytes([0xFF, 0xFF]), 4) == bytes([0x0F, 0xFF])
    assert rshift(bytes([0x12, 0x34]), 0) == bytes([0x12, 0x34])


def test_rshift_rejects_large_shift():
    with pytest.raises(ValueError):
        rshift(b"\x01", 8)