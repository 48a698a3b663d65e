"""SHAKE extendable-output functions with incremental squeezing."""

from __future__ import annotations

import hashlib


class ShakeState:
    """A SHAKE sponge: absorb input, then squeeze any amount of output in pieces."""

    _MIN_BLOCK = 168

    def __init__(self, bits: int) -> None:
        if bits == 128:
            self._sponge = hashlib.shake_128()
        elif bits == 256:
            self._sponge = hashlib.shake_256()
        else:
            raise ValueError("SHAKE security level must be 128 or 256")
        self.bits = bits
        self._squeezing = False
        self._output = b""
        self._offset = 0

    def absorb(self, data: bytes) -> ShakeState:
        """Feed ``data`` into the sponge; returns ``self`` for chaining."""
        if self._squeezing:
            raise RuntimeError("cannot absorb after squeezing has begun")
        self._sponge.update(bytes(data))
        return self

    def squeeze(self, length: int) -> bytes:
        """Return the next ``length`` bytes of output."""
        if length < 0:
            raise ValueError("length must be non-negative")
        self._squeezing = True
        end = self._offset + length
        if end > len(self._output):
            size = max(end, 2 * len(self._output), self._MIN_BLOCK)
            self._output = self._sponge.digest(size)
        out = self._output[self._offset : end]
        self._offset = end
        return out


def g() -> ShakeState:
    """A fresh SHAKE128 state."""
    return ShakeState(128)


def h() -> ShakeState:
    """A fresh SHAKE256 state."""
    return ShakeState(256)