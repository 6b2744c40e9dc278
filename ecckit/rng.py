"""Random number sources: a Mersenne Twister and an OS-backed generator."""

from __future__ import annotations

import os

_STATE_LEN = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF


class MersenneTwister:
    """MT19937 generator producing 32-bit words."""

    def __init__(self, seed: int = 0) -> None:
        self._key: list[int] = []
        self._pos = _STATE_LEN
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the state from a 32-bit seed."""
        seed &= _MASK32
        key = []
        for pos in range(_STATE_LEN):
            key.append(seed)
            seed = (1812433253 * (seed ^ (seed >> 30)) + pos + 1) & _MASK32
        self._key = key
        self._pos = _STATE_LEN

    def _twist(self) -> None:
        key = self._key
        for i in range(_STATE_LEN):
            y = (key[i] & _UPPER_MASK) | (key[(i + 1) % _STATE_LEN] & _LOWER_MASK)
            key[i] = key[(i + _M) % _STATE_LEN] ^ (y >> 1) ^ (_MATRIX_A if y & 1 else 0)
        self._pos = 0

    def next_uint32(self) -> int:
        """Return the next 32-bit output."""
        if self._pos == _STATE_LEN:
            self._twist()
        y = self._key[self._pos]
        self._pos += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y

    def next_double(self) -> float:
        """Return a float in [0, 1) with 53 bits of precision."""
        a = self.next_uint32() >> 5
        b = self.next_uint32() >> 6
        return (a * 67108864.0 + b) / 9007199254740992.0


_local_state = MersenneTwister(0)


def rseed(seed: int) -> None:
    """Seed the module-level generator."""
    _local_state.seed(seed)


def rndl() -> int:
    """Return a random 64-bit value from the OS, or from the seeded generator."""
    try:
        return int.from_bytes(os.urandom(8), "little")
    except (OSError, NotImplementedError):
        return _local_state.next_uint32()


def rnd() -> float:
    """Return a uniformly distributed float from the module-level generator."""
    return _local_state.next_double()