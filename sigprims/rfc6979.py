"""Deterministic generation of the ephemeral scalar ``k`` for DSA and ECDSA.

``digest`` arguments accept anything ``hmac.new`` takes as ``digestmod``:
a hash name such as ``"sha256"`` or a constructor such as ``hashlib.sha256``.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Callable, Union

from . import ct

Digest = Union[str, Callable[..., "hashlib._Hash"]]


def _digest_size(digest: Digest) -> int:
    if isinstance(digest, str):
        return hashlib.new(digest).digest_size
    return digest().digest_size


class HmacDrbg:
    """HMAC_DRBG from NIST SP 800-90A as used by RFC 6979."""

    def __init__(
        self,
        digest: Digest,
        entropy_input: bytes,
        nonce: bytes,
        personalization_string: bytes,
    ) -> None:
        self._digest = digest
        size = _digest_size(digest)
        self._k = bytes(size)
        self._v = b"\x01" * size
        for i in (0, 1):
            self._k = self._mac(
                self._v,
                bytes([i]),
                bytes(entropy_input),
                bytes(nonce),
                bytes(personalization_string),
            )
            self._v = self._mac(self._v)

    def _mac(self, *parts: bytes) -> bytes:
        mac = hmac.new(self._k, digestmod=self._digest)
        for part in parts:
            mac.update(part)
        return mac.digest()

    def fill_bytes(self, length: int) -> bytes:
        """Return the next ``length`` bytes of generator output."""
        if length < 0:
            raise ValueError("length must be non-negative")
        out = bytearray()
        while len(out) < length:
            self._v = self._mac(self._v)
            out += self._v[: length - len(out)]
        self._k = self._mac(self._v, b"\x00")
        self._v = self._mac(self._v)
        return bytes(out)


def generate_k(digest: Digest, x: bytes, q: bytes, h: bytes, data: bytes = b"") -> bytes:
    """Deterministically derive ``k`` in ``[1, q)``.

    ``x`` is the secret key, ``q`` the group order, ``h`` the message digest
    already reduced modulo ``q``, and ``data`` optional additional input. All of
    ``x``, ``q`` and ``h`` are big-endian and of the same length, which is
    also the length of the result.
    """
    x, q, h = bytes(x), bytes(q), bytes(h)
    size = len(q)
    if len(x) != size or len(h) != size:
        raise ValueError("x, q and h must have the same length")
    if not ct.lt(h, q):
        raise ValueError("h must be reduced modulo q")

    shift = ct.leading_zeros(q)
    drbg = HmacDrbg(digest, x, h, bytes(data))
    while True:
        k = drbg.fill_bytes(size)
        if shift:
            k = ct.rshift(k, shift)
        if not ct.is_zero(k) and ct.lt(k, q):
            return k