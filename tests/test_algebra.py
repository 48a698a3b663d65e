import pytest

from sigprims.algebra import (
    Q,
    Elem,
    NttMatrix,
    NttPolynomial,
    NttVector,
    Polynomial,
    Vector,
    barrett_reduce,
)

# 2 * gamma2 for the ML-DSA-65 parameter set
MOD = (Q - 1) // 16
MOD_ELEM = Elem(MOD)


def const_ntt(x):
    return NttPolynomial([Elem(x)] * 256)


def ramp(step=1):
    return Polynomial(Elem((step * i) % Q) for i in range(256))


def test_mod_plus_minus_over_range():
    for value in range(MOD):
        x = Elem(value)
        x0 = x.mod_plus_minus(MOD)
        assert x0.value <= MOD // 2 or x0.value > Q - MOD // 2
        assert (x + MOD_ELEM).value % MOD == (x0 + MOD_ELEM).value % MOD


def test_decompose_over_range():
    for value in range(MOD):
        x = Elem(value)
        x1, x0 = x.decompose(MOD)
        assert x0.value <= MOD // 2 or x0.value >= Q - MOD // 2
        assert (MOD * x1.value + x0.value) % Q == x.value


def test_decompose_top_of_field():
    x1, x0 = Elem(Q - 1).decompose(MOD)
    assert x1 == Elem(0)
    assert (MOD * x1.value + x0.value) % Q == Q - 1


@pytest.mark.parametrize(
    "x, modulus, expected",
    [(Q - 1, 8192, 0), (8192, 8192, 0), (8191, 8192, 8191), (0, 17, 0)],
)
def test_barrett_reduce_pins(x, modulus, expected):
    assert barrett_reduce(x, modulus) == expected


def test_barrett_reduce_matches_remainder():
    for x in range(0, Q, 9973):
        assert barrett_reduce(x, MOD) == x % MOD
        assert barrett_reduce(x, 1 << 13) == x % (1 << 13)


def test_barrett_reduce_rejects_bad_modulus():
    with pytest.raises(ValueError):
        barrett_reduce(5, 0)


def test_elem_arithmetic():
    assert Elem(Q - 1) + Elem(1) == Elem(0)
    assert Elem(0) - Elem(1) == Elem(Q - 1)
    assert -Elem(0) == Elem(0)
    assert -Elem(1) == Elem(Q - 1)
    assert Elem(Q - 1) * Elem(Q - 1) == Elem(1)
    assert Elem(3) * Elem(4) == Elem(12)


@pytest.mark.parametrize("value", [-1, Q, Q + 5])
def test_elem_out_of_range(value):
    with pytest.raises(ValueError):
        Elem(value)


def test_infinity_norm():
    assert Elem(5).infinity_norm() == 5
    assert Elem(Q - 5).infinity_norm() == 5
    assert Elem(Q >> 1).infinity_norm() == Q >> 1


def test_power2round_reconstructs():
    for value in range(0, Q, 7919):
        r1, r0 = Elem(value).power2round()
        assert (r1.value * (1 << 13) + r0.value) % Q == value
        assert r0.infinity_norm() <= 1 << 12


def test_high_low_bits_match_decompose():
    x = Elem(1_234_567)
    assert (x.high_bits(MOD), x.low_bits(MOD)) == x.decompose(MOD)


def test_polynomial_length_checked():
    with pytest.raises(ValueError):
        Polynomial([Elem(0)] * 255)


def test_polynomial_ops():
    f = ramp(1)
    g = ramp(2)
    assert (f + g) == ramp(3)
    assert (g - f) == f
    assert (f - f) == Polynomial.zero()
    assert (-f + f) == Polynomial.zero()
    assert Elem(2) * f == g
    assert len(f) == 256
    assert f[10] == Elem(10)


def test_polynomial_infinity_norm_and_power2round():
    p = Polynomial([Elem(Q - 7)] + [Elem(3)] * 255)
    assert p.infinity_norm() == 7
    r1, r0 = p.power2round()
    for x, a, b in zip(p, r1, r0):
        assert (a.value * 8192 + b.value) % Q == x.value


def test_polynomial_high_low_bits():
    p = ramp(32_749)
    high = p.high_bits(MOD)
    low = p.low_bits(MOD)
    for x, a, b in zip(p, high, low):
        assert (MOD * a.value + b.value) % Q == x.value


def test_vector_ops():
    v = Vector([ramp(1), ramp(2)])
    w = Vector([ramp(2), ramp(4)])
    assert v + v == w
    assert w - v == v
    assert -v + v == Vector.zero(2)
    assert Elem(2) * v == w
    assert len(Vector.zero(3)) == 3


def test_vector_length_mismatch():
    with pytest.raises(ValueError):
        Vector.zero(2) + Vector.zero(3)


def test_vector_power2round_and_bits():
    v = Vector([ramp(12_345), ramp(98_765)])
    r1, r0 = v.power2round()
    high, low = v.high_bits(MOD), v.low_bits(MOD)
    for poly, a, b, h, lo in zip(v, r1, r0, high, low):
        for x, p1, p0, hb, lb in zip(poly, a, b, h, lo):
            assert (p1.value * 8192 + p0.value) % Q == x.value
            assert (MOD * hb.value + lb.value) % Q == x.value


def test_ntt_polynomial_ops():
    assert const_ntt(2) * const_ntt(3) == const_ntt(6)
    assert const_ntt(2) + const_ntt(3) == const_ntt(5)
    assert const_ntt(2) - const_ntt(3) == const_ntt(Q - 1)
    assert -const_ntt(1) == const_ntt(Q - 1)
    assert Elem(4) * const_ntt(5) == const_ntt(20)
    assert NttPolynomial.zero() == const_ntt(0)


def test_ntt_vector():
    v1 = NttVector([const_ntt(1)] * 3)
    v2 = NttVector([const_ntt(2)] * 3)
    v3 = NttVector([const_ntt(3)] * 3)
    assert v1 + v2 == v3
    assert v3 - v2 == v1
    assert v1 * v2 == const_ntt(6)
    assert v1 * v3 == const_ntt(9)
    assert v2 * v3 == const_ntt(18)
    assert const_ntt(2) * v3 == NttVector([const_ntt(6)] * 3)


def test_ntt_matrix():
    a = NttMatrix(
        [
            NttVector([const_ntt(1), const_ntt(2)]),
            NttVector([const_ntt(3), const_ntt(4)]),
            NttVector([const_ntt(5), const_ntt(6)]),
        ]
    )
    v_in = NttVector([const_ntt(1), const_ntt(2)])
    v_out = NttVector([const_ntt(5), const_ntt(11), const_ntt(17)])
    assert a * v_in == v_out