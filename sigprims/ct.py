"""Byte-string helpers for big-endian integers, written to avoid early exits."""

from __future__ import annotations

from typing import Sequence


def leading_zeros(n: Sequence[int]) -> int:
    """Number of leading zero bits in the first byte of ``n``."""
    raw = bytes(n)
    if not raw:
        raise ValueError("cannot count leading zeros of an empty byte string")
    return 8 - raw[0].bit_length()


def rshift(n: Sequence[int], shift: int) -> bytes:
    """Shift the big-endian integer ``n`` right by ``shift`` bits, keeping its length."""
    if not 0 <= shift < 8:
        raise ValueError("shift must lie in [0, 8)")
    mask = (1 << shift) - 1
    carry = 0
    out = bytearray()
    for byte in bytes(n):
        new_carry = ((byte & mask) << (8 - shift)) & 0xFF
        out.append((byte >> shift) | carry)
        carry = new_carry
    return bytes(out)


def is_zero(n: Sequence[int]) -> bool:
    """True when every byte of ``n`` is zero."""
    acc = 0
    for byte in bytes(n):
        acc |= byte
    return acc == 0


def lt(a: Sequence[int], b: Sequence[int]) -> bool:
    """True when big-endian ``a`` is less than big-endian ``b`` of the same length."""
    left, right = bytes(a), bytes(b)
    if len(left) != len(right):
        raise ValueError("operands must have the same length")
    borrow = 0
    # Subtract with borrow from the least significant byte; a final borrow means a < b.
    for x, y in zip(reversed(left), reversed(right)):
        c = (y + (borrow >> 7)) & 0xFFFF
        borrow = ((x - c) & 0xFFFF) >> 8
    return borrow != 0