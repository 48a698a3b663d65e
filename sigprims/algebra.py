"""Arithmetic over Z_q for q = 8380417: field elements, polynomials, vectors and NTT forms.

Elements are kept as integers in ``[0, q)``. Signed quantities such as the
outputs of ``mod_plus_minus`` are represented by their residue mod q, so a
negative value ``-x`` is stored as ``q - x``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

Q = 8_380_417
N = 256
D = 13


def barrett_reduce(x: int, modulus: int) -> int:
    """Reduce ``x`` modulo ``modulus`` with Barrett reduction.

    Valid whenever ``x`` is below ``modulus ** 2``, which holds for every
    value reduced mod q against the moduli used here.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if x < 0:
        raise ValueError("value must be non-negative")
    shift = 2 * modulus.bit_length()
    multiplier = (1 << shift) // modulus
    quotient = (x * multiplier) >> shift
    remainder = x - quotient * modulus
    return remainder if remainder < modulus else remainder - modulus


@dataclass(frozen=True)
class Elem:
    """A member of the prime field Z_q."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value < Q:
            raise ValueError(f"field element {self.value} out of range [0, {Q})")

    def __add__(self, other: object) -> Elem:
        if not isinstance(other, Elem):
            return NotImplemented
        return Elem((self.value + other.value) % Q)

    def __sub__(self, other: object) -> Elem:
        if not isinstance(other, Elem):
            return NotImplemented
        return Elem((self.value - other.value) % Q)

    def __mul__(self, other: object) -> Elem:
        if not isinstance(other, Elem):
            return NotImplemented
        return Elem((self.value * other.value) % Q)

    def __neg__(self) -> Elem:
        return Elem((Q - self.value) % Q)

    def mod_plus_minus(self, modulus: int) -> Elem:
        """Centred reduction into ``(-modulus/2, modulus/2]``."""
        raw = Elem(barrett_reduce(self.value, modulus))
        if raw.value <= modulus >> 1:
            return raw
        return raw - Elem(modulus)

    def infinity_norm(self) -> int:
        """Absolute value of the centred representative mod q."""
        if self.value <= Q >> 1:
            return self.value
        return Q - self.value

    def power2round(self) -> tuple[Elem, Elem]:
        """Split into ``(r1, r0)`` with ``r = r1 * 2**13 + r0``."""
        r0 = self.mod_plus_minus(1 << D)
        r1 = Elem((self - r0).value >> D)
        return r1, r0

    def decompose(self, two_gamma2: int) -> tuple[Elem, Elem]:
        """Split into high and low parts with respect to ``2 * gamma2``."""
        r0 = self.mod_plus_minus(two_gamma2)
        diff = self - r0
        if diff == Elem(Q - 1):
            return Elem(0), r0 - Elem(1)
        return Elem(diff.value // two_gamma2), r0

    def high_bits(self, two_gamma2: int) -> Elem:
        return self.decompose(two_gamma2)[0]

    def low_bits(self, two_gamma2: int) -> Elem:
        return self.decompose(two_gamma2)[1]


class _Sequence:
    """Read-only sequence behaviour over a tuple held in ``_items``."""

    __slots__ = ()

    def _items(self) -> tuple:
        raise NotImplementedError

    def __iter__(self) -> Iterator:
        return iter(self._items())

    def __len__(self) -> int:
        return len(self._items())

    def __getitem__(self, index):
        return self._items()[index]


def _coefficients(values: Iterable[Elem]) -> tuple[Elem, ...]:
    coeffs = tuple(values)
    if len(coeffs) != N:
        raise ValueError(f"expected {N} coefficients, got {len(coeffs)}")
    if not all(isinstance(c, Elem) for c in coeffs):
        raise TypeError("coefficients must be Elem instances")
    return coeffs


@dataclass(frozen=True)
class Polynomial(_Sequence):
    """A degree-256 polynomial over Z_q."""

    coeffs: tuple[Elem, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coeffs", _coefficients(self.coeffs))

    def _items(self) -> tuple[Elem, ...]:
        return self.coeffs

    @staticmethod
    def zero() -> Polynomial:
        return Polynomial((Elem(0),) * N)

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(x + y for x, y in zip(self.coeffs, other.coeffs))

    def __sub__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(x - y for x, y in zip(self.coeffs, other.coeffs))

    def __neg__(self) -> Polynomial:
        return Polynomial(-x for x in self.coeffs)

    def __rmul__(self, scalar: object) -> Polynomial:
        if not isinstance(scalar, Elem):
            return NotImplemented
        return Polynomial(scalar * x for x in self.coeffs)

    def mod_plus_minus(self, modulus: int) -> Polynomial:
        return Polynomial(x.mod_plus_minus(modulus) for x in self.coeffs)

    def infinity_norm(self) -> int:
        return max(x.infinity_norm() for x in self.coeffs)

    def power2round(self) -> tuple[Polynomial, Polynomial]:
        pairs = [x.power2round() for x in self.coeffs]
        return Polynomial(p[0] for p in pairs), Polynomial(p[1] for p in pairs)

    def high_bits(self, two_gamma2: int) -> Polynomial:
        return Polynomial(x.high_bits(two_gamma2) for x in self.coeffs)

    def low_bits(self, two_gamma2: int) -> Polynomial:
        return Polynomial(x.low_bits(two_gamma2) for x in self.coeffs)


@dataclass(frozen=True)
class Vector(_Sequence):
    """A vector of polynomials over Z_q."""

    polys: tuple[Polynomial, ...]

    def __post_init__(self) -> None:
        polys = tuple(self.polys)
        if not all(isinstance(p, Polynomial) for p in polys):
            raise TypeError("vector entries must be Polynomial instances")
        object.__setattr__(self, "polys", polys)

    def _items(self) -> tuple[Polynomial, ...]:
        return self.polys

    @staticmethod
    def zero(k: int) -> Vector:
        return Vector(Polynomial.zero() for _ in range(k))

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(x + y for x, y in zip(self.polys, other.polys, strict=True))

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(x - y for x, y in zip(self.polys, other.polys, strict=True))

    def __neg__(self) -> Vector:
        return Vector(-x for x in self.polys)

    def __rmul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, Elem):
            return NotImplemented
        return Vector(scalar * x for x in self.polys)

    def mod_plus_minus(self, modulus: int) -> Vector:
        return Vector(x.mod_plus_minus(modulus) for x in self.polys)

    def infinity_norm(self) -> int:
        if not self.polys:
            raise ValueError("infinity norm of an empty vector")
        return max(x.infinity_norm() for x in self.polys)

    def power2round(self) -> tuple[Vector, Vector]:
        pairs = [x.power2round() for x in self.polys]
        return Vector(p[0] for p in pairs), Vector(p[1] for p in pairs)

    def high_bits(self, two_gamma2: int) -> Vector:
        return Vector(x.high_bits(two_gamma2) for x in self.polys)

    def low_bits(self, two_gamma2: int) -> Vector:
        return Vector(x.low_bits(two_gamma2) for x in self.polys)


@dataclass(frozen=True)
class NttPolynomial(_Sequence):
    """A 256-tuple of field elements in the NTT domain."""

    coeffs: tuple[Elem, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coeffs", _coefficients(self.coeffs))

    def _items(self) -> tuple[Elem, ...]:
        return self.coeffs

    @staticmethod
    def zero() -> NttPolynomial:
        return NttPolynomial((Elem(0),) * N)

    def __add__(self, other: object) -> NttPolynomial:
        if not isinstance(other, NttPolynomial):
            return NotImplemented
        return NttPolynomial(x + y for x, y in zip(self.coeffs, other.coeffs))

    def __sub__(self, other: object) -> NttPolynomial:
        if not isinstance(other, NttPolynomial):
            return NotImplemented
        return NttPolynomial(x - y for x, y in zip(self.coeffs, other.coeffs))

    def __neg__(self) -> NttPolynomial:
        return NttPolynomial(-x for x in self.coeffs)

    def __mul__(self, other: object) -> NttPolynomial:
        """Pointwise product of two NTT-domain polynomials."""
        if not isinstance(other, NttPolynomial):
            return NotImplemented
        return NttPolynomial(x * y for x, y in zip(self.coeffs, other.coeffs))

    def __rmul__(self, scalar: object) -> NttPolynomial:
        if not isinstance(scalar, Elem):
            return NotImplemented
        return NttPolynomial(scalar * x for x in self.coeffs)


@dataclass(frozen=True)
class NttVector(_Sequence):
    """A vector of NTT-domain polynomials."""

    polys: tuple[NttPolynomial, ...]

    def __post_init__(self) -> None:
        polys = tuple(self.polys)
        if not all(isinstance(p, NttPolynomial) for p in polys):
            raise TypeError("vector entries must be NttPolynomial instances")
        object.__setattr__(self, "polys", polys)

    def _items(self) -> tuple[NttPolynomial, ...]:
        return self.polys

    def __add__(self, other: object) -> NttVector:
        if not isinstance(other, NttVector):
            return NotImplemented
        return NttVector(x + y for x, y in zip(self.polys, other.polys, strict=True))

    def __sub__(self, other: object) -> NttVector:
        if not isinstance(other, NttVector):
            return NotImplemented
        return NttVector(x - y for x, y in zip(self.polys, other.polys, strict=True))

    def __mul__(self, other: object) -> NttPolynomial:
        """Dot product of two NTT vectors."""
        if not isinstance(other, NttVector):
            return NotImplemented
        total = NttPolynomial.zero()
        for x, y in zip(self.polys, other.polys, strict=True):
            total = total + x * y
        return total

    def __rmul__(self, other: object) -> NttVector:
        """Scale every entry by an NTT polynomial."""
        if not isinstance(other, NttPolynomial):
            return NotImplemented
        return NttVector(other * x for x in self.polys)


@dataclass(frozen=True)
class NttMatrix(_Sequence):
    """A K x L matrix of NTT polynomials, stored as K row vectors."""

    rows: tuple[NttVector, ...]

    def __post_init__(self) -> None:
        rows = tuple(self.rows)
        if not all(isinstance(r, NttVector) for r in rows):
            raise TypeError("matrix rows must be NttVector instances")
        object.__setattr__(self, "rows", rows)

    def _items(self) -> tuple[NttVector, ...]:
        return self.rows

    def __mul__(self, vector: object) -> NttVector:
        if not isinstance(vector, NttVector):
            return NotImplemented
        return NttVector(row * vector for row in self.rows)