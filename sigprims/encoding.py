"""Bit packing of polynomials and vectors of polynomials into byte strings.

``simple_bit_pack`` stores each of the 256 coefficients in a fixed number of
bits, little-endian. ``bit_pack`` stores coefficients drawn from the signed
range ``[-a, b]`` by first mapping each ``w`` to ``b - w``.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .algebra import N, Q, Elem, Polynomial, Vector


def truncate(x: int, bits: int) -> int:
    """Keep the low ``bits`` bits of a non-negative integer."""
    if bits < 0:
        raise ValueError("bit count must be non-negative")
    if x < 0:
        raise ValueError("value must be non-negative")
    return x & ((1 << bits) - 1)


def flatten(parts: Iterable[Sequence[int]]) -> bytes:
    """Concatenate byte sequences into one byte string."""
    return b"".join(bytes(part) for part in parts)


def unflatten(data: Sequence[int], count: int) -> list[bytes]:
    """Split ``data`` into ``count`` parts of equal length."""
    if count <= 0:
        raise ValueError("part count must be positive")
    raw = bytes(data)
    size, rest = divmod(len(raw), count)
    if rest:
        raise ValueError(f"{len(raw)} bytes cannot be split into {count} equal parts")
    return [raw[start : start + size] for start in range(0, len(raw), size)]


def encoded_polynomial_size(bits: int) -> int:
    """Number of bytes taken by a polynomial with ``bits`` bits per coefficient."""
    if bits <= 0:
        raise ValueError("bit width must be positive")
    return N * bits // 8


def simple_bit_pack(poly: Polynomial, bits: int) -> bytes:
    """Pack each coefficient of ``poly`` into ``bits`` bits."""
    size = encoded_polynomial_size(bits)
    packed = 0
    for position, coeff in enumerate(poly):
        if coeff.value >> bits:
            raise ValueError(f"coefficient {coeff.value} does not fit in {bits} bits")
        packed |= coeff.value << (bits * position)
    return packed.to_bytes(size, "little")


def simple_bit_unpack(data: Sequence[int], bits: int) -> Polynomial:
    """Inverse of :func:`simple_bit_pack`."""
    raw = bytes(data)
    size = encoded_polynomial_size(bits)
    if len(raw) != size:
        raise ValueError(f"expected {size} bytes, got {len(raw)}")
    packed = int.from_bytes(raw, "little")
    mask = (1 << bits) - 1
    values = ((packed >> (bits * position)) & mask for position in range(N))
    if bits == 12:
        values = (value % Q for value in values)
    return Polynomial(Elem(value) for value in values)


def simple_bit_pack_vector(vector: Vector, bits: int) -> bytes:
    """Pack every polynomial of ``vector`` and concatenate the results."""
    return flatten(simple_bit_pack(poly, bits) for poly in vector)


def simple_bit_unpack_vector(data: Sequence[int], bits: int, k: int) -> Vector:
    """Inverse of :func:`simple_bit_pack_vector` for a vector of ``k`` polynomials."""
    raw = bytes(data)
    expected = k * encoded_polynomial_size(bits)
    if len(raw) != expected:
        raise ValueError(f"expected {expected} bytes, got {len(raw)}")
    return Vector(simple_bit_unpack(part, bits) for part in unflatten(raw, k))


def range_encoding_bits(a: int, b: int) -> int:
    """Bits needed per coefficient for values in ``[-a, b]``."""
    if a < 0 or b < 0:
        raise ValueError("range bounds must be non-negative")
    return (a + b).bit_length()


def bit_pack(poly: Polynomial, a: int, b: int) -> bytes:
    """Pack coefficients in ``[-a, b]`` (as residues mod q)."""
    bits = range_encoding_bits(a, b)
    lower = -Elem(a)
    upper = Elem(b)

    def shifted(w: Elem) -> Elem:
        if not (w.value <= upper.value or w.value >= lower.value):
            raise ValueError(f"coefficient {w.value} outside the range [-{a}, {b}]")
        return upper - w

    return simple_bit_pack(Polynomial(shifted(w) for w in poly), bits)


def bit_unpack(data: Sequence[int], a: int, b: int) -> Polynomial:
    """Inverse of :func:`bit_pack`."""
    bits = range_encoding_bits(a, b)
    upper = Elem(b)
    limit = (Elem(a) + upper).value
    decoded = simple_bit_unpack(data, bits)

    def restored(z: Elem) -> Elem:
        if z.value > limit:
            raise ValueError(f"encoded value {z.value} exceeds {limit}")
        return upper - z

    return Polynomial(restored(z) for z in decoded)


def bit_pack_vector(vector: Vector, a: int, b: int) -> bytes:
    """Range-pack every polynomial of ``vector`` and concatenate the results."""
    return flatten(bit_pack(poly, a, b) for poly in vector)


def bit_unpack_vector(data: Sequence[int], a: int, b: int, k: int) -> Vector:
    """Inverse of :func:`bit_pack_vector` for a vector of ``k`` polynomials."""
    raw = bytes(data)
    expected = k * encoded_polynomial_size(range_encoding_bits(a, b))
    if len(raw) != expected:
        raise ValueError(f"expected {expected} bytes, got {len(raw)}")
    return Vector(bit_unpack(part, a, b) for part in unflatten(raw, k))