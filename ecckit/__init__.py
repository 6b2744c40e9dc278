"""RIPEMD-160, SHA-3, SHAKE and Keccak hashing, a fixed-width big integer and helpers."""

__version__ = "0.1.0"

__all__ = [
    "bigint",
    "intcodec",
    "keccak",
    "rmd160",
    "rng",
    "sha3",
    "util",
]