"""Number-theoretic transform between R_q and its NTT domain T_q."""

from __future__ import annotations

from typing import overload

from .algebra import N, Q, Elem, NttPolynomial, NttVector, Polynomial, Vector

_ZETA = 1753
_INVERSE_256 = 8_347_681


def _bitrev8(x: int) -> int:
    return int(f"{x:08b}"[::-1], 2)


def _zeta_table() -> tuple[int, ...]:
    powers = [pow(_ZETA, i, Q) for i in range(N)]
    # Entry 0 stays zero to match the reference zeta table.
    return (0,) + tuple(powers[_bitrev8(i)] for i in range(1, N))


ZETA_POW_BITREV: tuple[int, ...] = _zeta_table()


def _forward(poly: Polynomial) -> NttPolynomial:
    w = [c.value for c in poly]
    m = 0
    for length in (128, 64, 32, 16, 8, 4, 2, 1):
        for start in range(0, N, 2 * length):
            m += 1
            z = ZETA_POW_BITREV[m]
            for j in range(start, start + length):
                t = z * w[j + length] % Q
                w[j + length] = (w[j] - t) % Q
                w[j] = (w[j] + t) % Q
    return NttPolynomial(Elem(x) for x in w)


def _inverse(poly: NttPolynomial) -> Polynomial:
    w = [c.value for c in poly]
    m = N
    for length in (1, 2, 4, 8, 16, 32, 64, 128):
        for start in range(0, N, 2 * length):
            m -= 1
            z = (Q - ZETA_POW_BITREV[m]) % Q
            for j in range(start, start + length):
                t = w[j]
                w[j] = (t + w[j + length]) % Q
                w[j + length] = z * (t - w[j + length]) % Q
    return Polynomial(Elem(x * _INVERSE_256 % Q) for x in w)


@overload
def ntt(value: Polynomial) -> NttPolynomial: ...
@overload
def ntt(value: Vector) -> NttVector: ...


def ntt(value):
    """Map a polynomial or vector of polynomials into the NTT domain."""
    if isinstance(value, Polynomial):
        return _forward(value)
    if isinstance(value, Vector):
        return NttVector(_forward(p) for p in value)
    raise TypeError(f"cannot transform {type(value).__name__}")


@overload
def ntt_inverse(value: NttPolynomial) -> Polynomial: ...
@overload
def ntt_inverse(value: NttVector) -> Vector: ...


def ntt_inverse(value):
    """Map an NTT-domain polynomial or vector back to R_q."""
    if isinstance(value, NttPolynomial):
        return _inverse(value)
    if isinstance(value, NttVector):
        return Vector(_inverse(p) for p in value)
    raise TypeError(f"cannot invert {type(value).__name__}")