"""Parameter sets and the byte layouts of keys and signatures that depend on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .algebra import D, Q, Vector
from .encoding import (
    bit_pack_vector,
    bit_unpack_vector,
    encoded_polynomial_size,
    range_encoding_bits,
    simple_bit_pack_vector,
    simple_bit_unpack_vector,
)
from .sampling import Eta

SEED_SIZE = 32
TR_SIZE = 64

# t0 coefficients lie in [-(2^(d-1) - 1), 2^(d-1)].
T0_LOW = (1 << (D - 1)) - 1
T0_HIGH = 1 << (D - 1)

# t1 coefficients use bitlen(q - 1) - d bits.
T1_BITS = (Q - 1).bit_length() - D


def _check_length(name: str, data: bytes, size: int) -> bytes:
    raw = bytes(data)
    if len(raw) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(raw)}")
    return raw


def _split(name: str, data: Sequence[int], sizes: Sequence[int]) -> tuple[bytes, ...]:
    raw = _check_length(name, bytes(data), sum(sizes))
    parts = []
    start = 0
    for size in sizes:
        parts.append(raw[start : start + size])
        start += size
    return tuple(parts)


@dataclass(frozen=True)
class ParameterSet:
    """The parameters of one ML-DSA security level and the encodings they imply."""

    name: str
    k: int
    l: int
    eta: Eta
    gamma1: int
    gamma2: int
    lambda_bytes: int
    omega: int
    tau: int

    @property
    def beta(self) -> int:
        return self.tau * int(self.eta)

    @property
    def two_gamma2(self) -> int:
        return 2 * self.gamma2

    @property
    def w1_bits(self) -> int:
        return ((Q - 1) // self.two_gamma2 - 1).bit_length()

    @property
    def gamma1_minus_beta(self) -> int:
        return self.gamma1 - self.beta

    @property
    def gamma2_minus_beta(self) -> int:
        return self.gamma2 - self.beta

    @property
    def _eta_poly_size(self) -> int:
        eta = int(self.eta)
        return encoded_polynomial_size(range_encoding_bits(eta, eta))

    @property
    def s1_size(self) -> int:
        return self.l * self._eta_poly_size

    @property
    def s2_size(self) -> int:
        return self.k * self._eta_poly_size

    @property
    def t0_size(self) -> int:
        return self.k * encoded_polynomial_size(range_encoding_bits(T0_LOW, T0_HIGH))

    @property
    def signing_key_size(self) -> int:
        return 2 * SEED_SIZE + TR_SIZE + self.s1_size + self.s2_size + self.t0_size

    @property
    def t1_size(self) -> int:
        return self.k * encoded_polynomial_size(T1_BITS)

    @property
    def verifying_key_size(self) -> int:
        return SEED_SIZE + self.t1_size

    @property
    def w1_size(self) -> int:
        return self.k * encoded_polynomial_size(self.w1_bits)

    @property
    def z_size(self) -> int:
        bits = range_encoding_bits(self.gamma1 - 1, self.gamma1)
        return self.l * encoded_polynomial_size(bits)

    @property
    def hint_size(self) -> int:
        return self.omega + self.k

    @property
    def signature_size(self) -> int:
        return self.lambda_bytes + self.z_size + self.hint_size

    # Signing key

    def encode_s1(self, s1: Vector) -> bytes:
        eta = int(self.eta)
        return bit_pack_vector(s1, eta, eta)

    def decode_s1(self, data: bytes) -> Vector:
        eta = int(self.eta)
        return bit_unpack_vector(data, eta, eta, self.l)

    def encode_s2(self, s2: Vector) -> bytes:
        eta = int(self.eta)
        return bit_pack_vector(s2, eta, eta)

    def decode_s2(self, data: bytes) -> Vector:
        eta = int(self.eta)
        return bit_unpack_vector(data, eta, eta, self.k)

    def encode_t0(self, t0: Vector) -> bytes:
        return bit_pack_vector(t0, T0_LOW, T0_HIGH)

    def decode_t0(self, data: bytes) -> Vector:
        return bit_unpack_vector(data, T0_LOW, T0_HIGH, self.k)

    def concat_sk(
        self, rho: bytes, key: bytes, tr: bytes, s1: bytes, s2: bytes, t0: bytes
    ) -> bytes:
        """Join the parts of an encoded signing key."""
        return b"".join(
            (
                _check_length("rho", rho, SEED_SIZE),
                _check_length("key", key, SEED_SIZE),
                _check_length("tr", tr, TR_SIZE),
                _check_length("s1", s1, self.s1_size),
                _check_length("s2", s2, self.s2_size),
                _check_length("t0", t0, self.t0_size),
            )
        )

    def split_sk(self, data: bytes) -> tuple[bytes, bytes, bytes, bytes, bytes, bytes]:
        """Split an encoded signing key into ``(rho, key, tr, s1, s2, t0)``."""
        return _split(
            "signing key",
            data,
            (SEED_SIZE, SEED_SIZE, TR_SIZE, self.s1_size, self.s2_size, self.t0_size),
        )

    # Verifying key

    def encode_t1(self, t1: Vector) -> bytes:
        return simple_bit_pack_vector(t1, T1_BITS)

    def decode_t1(self, data: bytes) -> Vector:
        return simple_bit_unpack_vector(data, T1_BITS, self.k)

    def concat_vk(self, rho: bytes, t1: bytes) -> bytes:
        return _check_length("rho", rho, SEED_SIZE) + _check_length("t1", t1, self.t1_size)

    def split_vk(self, data: bytes) -> tuple[bytes, bytes]:
        """Split an encoded verifying key into ``(rho, t1)``."""
        return _split("verifying key", data, (SEED_SIZE, self.t1_size))

    # Signature

    def split_hint(self, data: bytes) -> tuple[bytes, bytes]:
        """Split an encoded hint into its index bytes and its per-row cut bytes."""
        return _split("hint", data, (self.omega, self.k))

    def encode_w1(self, w1: Vector) -> bytes:
        return simple_bit_pack_vector(w1, self.w1_bits)

    def decode_w1(self, data: bytes) -> Vector:
        return simple_bit_unpack_vector(data, self.w1_bits, self.k)

    def encode_z(self, z: Vector) -> bytes:
        return bit_pack_vector(z, self.gamma1 - 1, self.gamma1)

    def decode_z(self, data: bytes) -> Vector:
        return bit_unpack_vector(data, self.gamma1 - 1, self.gamma1, self.l)

    def concat_sig(self, c_tilde: bytes, z: bytes, h: bytes) -> bytes:
        return b"".join(
            (
                _check_length("c_tilde", c_tilde, self.lambda_bytes),
                _check_length("z", z, self.z_size),
                _check_length("hint", h, self.hint_size),
            )
        )

    def split_sig(self, data: bytes) -> tuple[bytes, bytes, bytes]:
        """Split an encoded signature into ``(c_tilde, z, hint)``."""
        return _split("signature", data, (self.lambda_bytes, self.z_size, self.hint_size))


ML_DSA_44 = ParameterSet(
    name="ML-DSA-44",
    k=4,
    l=4,
    eta=Eta.TWO,
    gamma1=1 << 17,
    gamma2=(Q - 1) // 88,
    lambda_bytes=32,
    omega=80,
    tau=39,
)

ML_DSA_65 = ParameterSet(
    name="ML-DSA-65",
    k=6,
    l=5,
    eta=Eta.FOUR,
    gamma1=1 << 19,
    gamma2=(Q - 1) // 32,
    lambda_bytes=48,
    omega=55,
    tau=49,
)

ML_DSA_87 = ParameterSet(
    name="ML-DSA-87",
    k=8,
    l=7,
    eta=Eta.TWO,
    gamma1=1 << 19,
    gamma2=(Q - 1) // 32,
    lambda_bytes=64,
    omega=75,
    tau=60,
)