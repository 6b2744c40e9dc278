"""RIPEMD-160 message digest."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_R_LEFT = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
    3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
    1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
    4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13,
)
_R_RIGHT = (
    5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
    6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
    15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
    8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
    12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11,
)
_S_LEFT = (
    11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
    7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
    11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
    11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
    9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6,
)
_S_RIGHT = (
    8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
    9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
    9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
    15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
    8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11,
)
_K_LEFT = (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xA953FD4E)
_K_RIGHT = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x7A6D76E9, 0x00000000)


def _f(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _g(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & z)


def _h(x: int, y: int, z: int) -> int:
    return ((x | ~y) ^ z) & _MASK32


def _i(x: int, y: int, z: int) -> int:
    return (x & z) | (y & ~z)


def _j(x: int, y: int, z: int) -> int:
    return (x ^ (y | ~z)) & _MASK32


_FUNCS_LEFT = (_f, _g, _h, _i, _j)
_FUNCS_RIGHT = (_j, _i, _h, _g, _f)


def _rol(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _line(state, words, order, shifts, constants, funcs):
    a, b, c, d, e = state
    for step in range(80):
        rnd = step // 16
        t = (a + funcs[rnd](b, c, d) + words[order[step]] + constants[rnd]) & _MASK32
        t = (_rol(t, shifts[step]) + e) & _MASK32
        a, e, d, c, b = e, d, _rol(c, 10), b, t
    return a, b, c, d, e


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    words = struct.unpack("<16I", block)
    al, bl, cl, dl, el = _line(state, words, _R_LEFT, _S_LEFT, _K_LEFT, _FUNCS_LEFT)
    ar, br, cr, dr, er = _line(state, words, _R_RIGHT, _S_RIGHT, _K_RIGHT, _FUNCS_RIGHT)
    h0, h1, h2, h3, h4 = state
    return (
        (h1 + cl + dr) & _MASK32,
        (h2 + dl + er) & _MASK32,
        (h3 + el + ar) & _MASK32,
        (h4 + al + br) & _MASK32,
        (h0 + bl + cr) & _MASK32,
    )


class RMD160:
    """Incremental RIPEMD-160 hasher with a hashlib-style interface."""

    name = "ripemd160"
    digest_size = 20
    block_size = 64

    def __init__(self, data: bytes = b"") -> None:
        self._state: tuple[int, ...] = _INITIAL
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        data = bytes(data)
        self._length += len(data)
        buffer = self._buffer + data
        full = len(buffer) - len(buffer) % self.block_size
        for offset in range(0, full, self.block_size):
            self._state = _compress(self._state, buffer[offset:offset + self.block_size])
        self._buffer = buffer[full:]

    def digest(self) -> bytes:
        """Return the 20-byte digest of the data fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        padding = b"\x80" + b"\x00" * ((55 - len(self._buffer)) % 64)
        tail = self._buffer + padding + struct.pack("<Q", bit_length)
        state = self._state
        for offset in range(0, len(tail), self.block_size):
            state = _compress(state, tail[offset:offset + self.block_size])
        return struct.pack("<5I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self.digest().hex()

    def copy(self) -> RMD160:
        """Return an independent copy of this hasher."""
        clone = RMD160()
        clone._state = self._state
        clone._buffer = self._buffer
        clone._length = self._length
        return clone


def rmd160(data: bytes) -> bytes:
    """Return the RIPEMD-160 digest of ``data``."""
    return RMD160(data).digest()