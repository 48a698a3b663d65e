"""Rejection sampling of polynomials, vectors and matrices from seeds."""

from __future__ import annotations

from enum import IntEnum

from .algebra import N, Q, Elem, NttMatrix, NttPolynomial, NttVector, Polynomial, Vector
from .encoding import bit_unpack, encoded_polynomial_size, range_encoding_bits
from .xof import g, h


class Eta(IntEnum):
    """Bound on private-key coefficients."""

    TWO = 2
    FOUR = 4


def _bit_set(z: bytes, i: int) -> bool:
    return bool(z[i >> 3] & (1 << (i & 7)))


def coeff_from_three_bytes(b: bytes) -> Elem | None:
    """Build a coefficient from three bytes, or ``None`` if it is not below q."""
    b0, b1, b2 = bytes(b)
    z = ((b2 & 0x7F) << 16) | (b1 << 8) | b0
    return Elem(z) if z < Q else None


def coeff_from_half_byte(b: int, eta: Eta) -> Elem | None:
    """Map a nibble to a coefficient in ``[-eta, eta]``, or ``None`` if rejected."""
    eta = Eta(eta)
    if eta is Eta.TWO and b < 15:
        b %= 5
        return Elem(2 - b) if b <= 2 else -Elem(b - 2)
    if eta is Eta.FOUR and b < 9:
        return Elem(4 - b) if b <= 4 else -Elem(b - 4)
    return None


def sample_in_ball(rho: bytes, tau: int) -> Polynomial:
    """Sample a polynomial with exactly ``tau`` coefficients in {-1, 1}, the rest 0."""
    if not 0 <= tau <= N:
        raise ValueError(f"tau must lie in [0, {N}]")
    one = Elem(1)
    minus_one = Elem(Q - 1)
    coeffs = [Elem(0)] * N
    ctx = h().absorb(rho)
    signs = ctx.squeeze(8)
    for i in range(N - tau, N):
        j = ctx.squeeze(1)[0]
        while j > i:
            j = ctx.squeeze(1)[0]
        coeffs[i] = coeffs[j]
        coeffs[j] = minus_one if _bit_set(signs, i + tau - N) else one
    return Polynomial(coeffs)


def rej_ntt_poly(rho: bytes, r: int, s: int) -> NttPolynomial:
    """Sample a uniform NTT polynomial from ``rho`` and the indices ``(r, s)``."""
    ctx = g().absorb(rho).absorb(bytes([s])).absorb(bytes([r]))
    coeffs: list[Elem] = []
    while len(coeffs) < N:
        x = coeff_from_three_bytes(ctx.squeeze(3))
        if x is not None:
            coeffs.append(x)
    return NttPolynomial(coeffs)


def rej_bounded_poly(rho: bytes, eta: Eta, r: int) -> Polynomial:
    """Sample a polynomial with coefficients in ``[-eta, eta]``."""
    ctx = h().absorb(rho).absorb(r.to_bytes(2, "little"))
    coeffs: list[Elem] = []
    while len(coeffs) < N:
        z = ctx.squeeze(1)[0]
        for nibble in (z & 0x0F, z >> 4):
            if len(coeffs) == N:
                break
            c = coeff_from_half_byte(nibble, eta)
            if c is not None:
                coeffs.append(c)
    return Polynomial(coeffs)


def expand_a(rho: bytes, k: int, l: int) -> NttMatrix:
    """Expand ``rho`` into a ``k`` x ``l`` matrix of NTT polynomials."""
    return NttMatrix(
        NttVector(rej_ntt_poly(rho, r & 0xFF, s & 0xFF) for s in range(l))
        for r in range(k)
    )


def expand_s(rho: bytes, eta: Eta, k: int, base: int) -> Vector:
    """Expand ``rho`` into ``k`` short polynomials, numbered from ``base``."""
    return Vector(rej_bounded_poly(rho, eta, (r + base) & 0xFFFF) for r in range(k))


def expand_mask(rho: bytes, mu: int, k: int, gamma1: int) -> Vector:
    """Expand ``rho`` into ``k`` polynomials with coefficients in ``[-gamma1 + 1, gamma1]``."""
    size = encoded_polynomial_size(range_encoding_bits(gamma1 - 1, gamma1))
    return Vector(
        bit_unpack(
            h().absorb(rho).absorb(((mu + r) & 0xFFFF).to_bytes(2, "little")).squeeze(size),
            gamma1 - 1,
            gamma1,
        )
        for r in range(k)
    )