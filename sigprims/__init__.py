"""Primitives for lattice signatures and RFC 6979 deterministic nonces."""

__version__ = "0.1.0"

__all__ = [
    "algebra",
    "ct",
    "encoding",
    "hint",
    "ntt",
    "params",
    "rfc6979",
    "sampling",
    "xof",
]