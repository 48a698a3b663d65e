"""Hints that let a verifier recover the high bits of a perturbed vector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .algebra import N, Q, Elem, Polynomial, Vector
from .params import ParameterSet


def make_hint(z: Elem, r: Elem, two_gamma2: int) -> bool:
    """True when adding ``z`` to ``r`` changes the high bits of ``r``."""
    return r.high_bits(two_gamma2) != (r + z).high_bits(two_gamma2)


def use_hint(h: bool, r: Elem, two_gamma2: int) -> Elem:
    """Recover the high bits of ``r + z`` from ``r`` and the hint bit ``h``."""
    m = (Q - 1) // two_gamma2
    r1, r0 = r.decompose(two_gamma2)
    if not h:
        return r1
    gamma2 = two_gamma2 // 2
    if r0.value <= gamma2:
        return Elem((r1.value + 1) % m)
    if r0.value >= Q - gamma2:
        return Elem((r1.value + m - 1) % m)
    raise ValueError("low bits outside [-gamma2, gamma2]")


def _monotonic(values: Sequence[int]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


@dataclass(frozen=True)
class Hint:
    """One bit per coefficient of a ``k``-polynomial vector."""

    params: ParameterSet
    rows: tuple[tuple[bool, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(bool(bit) for bit in row) for row in self.rows)
        if len(rows) != self.params.k:
            raise ValueError(f"expected {self.params.k} hint rows, got {len(rows)}")
        if any(len(row) != N for row in rows):
            raise ValueError(f"every hint row must have {N} entries")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def from_vectors(cls, params: ParameterSet, z: Vector, r: Vector) -> Hint:
        """Build the hint for adding ``z`` to ``r``."""
        two_gamma2 = params.two_gamma2
        return cls(
            params,
            tuple(
                tuple(make_hint(zc, rc, two_gamma2) for zc, rc in zip(zp, rp))
                for zp, rp in zip(z, r, strict=True)
            ),
        )

    def hamming_weight(self) -> int:
        """Number of set hint bits."""
        return sum(sum(row) for row in self.rows)

    def use_hint(self, r: Vector) -> Vector:
        """Apply the hint to ``r``, giving the corrected high bits."""
        two_gamma2 = self.params.two_gamma2
        return Vector(
            Polynomial(use_hint(h, rc, two_gamma2) for h, rc in zip(row, poly))
            for row, poly in zip(self.rows, r, strict=True)
        )

    def bit_pack(self) -> bytes:
        """Encode as ``omega`` position bytes followed by one cut byte per row."""
        omega = self.params.omega
        if self.hamming_weight() > omega:
            raise ValueError(f"hint has more than {omega} set bits")
        positions: list[int] = []
        cuts: list[int] = []
        for row in self.rows:
            positions.extend(j for j, bit in enumerate(row) if bit)
            cuts.append(len(positions))
        return bytes(positions) + bytes(omega - len(positions)) + bytes(cuts)

    @classmethod
    def bit_unpack(cls, params: ParameterSet, data: bytes) -> Hint:
        """Decode a packed hint, rejecting any non-canonical encoding."""
        indices, cuts = params.split_hint(bytes(data))
        max_cut = max(cuts)
        if not _monotonic(cuts) or max_cut > len(indices) or any(indices[max_cut:]):
            raise ValueError("malformed hint encoding")

        rows = []
        start = 0
        for end in cuts:
            row_indices = indices[start:end]
            if not _monotonic(row_indices):
                raise ValueError("hint positions within a row must be ascending")
            row = [False] * N
            for j in row_indices:
                row[j] = True
            rows.append(tuple(row))
            start = end
        return cls(params, tuple(rows))