"""The Keccak-f[1600] permutation."""

from __future__ import annotations

from collections.abc import Sequence

LANES = 25
ROUNDS = 24
_MASK64 = (1 << 64) - 1

# Lane visiting order and rotation amounts of the combined rho and pi steps:
# (x, y) -> (y, 2x + 3y mod 5) starting at (1, 0), the i-th lane rotated by
# (i + 1)(i + 2)/2 mod 64.
_PI_LANES = (10, 7, 11, 17, 18, 3, 5, 16, 8, 21, 24, 4,
             15, 23, 19, 13, 12, 2, 20, 14, 22, 9, 6, 1)
_RHO_ROTATIONS = (1, 3, 6, 10, 15, 21, 28, 36, 45, 55, 2, 14,
                  27, 41, 56, 8, 25, 43, 62, 18, 39, 61, 20, 44)


def _rc_bit(t: int) -> int:
    """Return rc(t) = (x**t mod x**8 + x**6 + x**5 + x**4 + 1) mod x over GF(2)."""
    r = 1
    for _ in range(t % 255):
        r <<= 1
        if r & 0x100:
            r ^= 0x171
    return r & 1


def _round_constant(i: int) -> int:
    return sum(_rc_bit(j + 7 * i) << ((1 << j) - 1) for j in range(7))


ROUND_CONSTANTS = tuple(_round_constant(i) for i in range(ROUNDS))


def _rol64(value: int, count: int) -> int:
    return ((value << count) | (value >> (64 - count))) & _MASK64


def _round(a: list[int], constant: int) -> list[int]:
    # theta
    c = [a[x] ^ a[x + 5] ^ a[x + 10] ^ a[x + 15] ^ a[x + 20] for x in range(5)]
    d = [c[(x - 1) % 5] ^ _rol64(c[(x + 1) % 5], 1) for x in range(5)]
    a = [lane ^ d[i % 5] for i, lane in enumerate(a)]

    # rho and pi
    carried = a[1]
    for index, rotation in zip(_PI_LANES, _RHO_ROTATIONS):
        a[index], carried = _rol64(carried, rotation), a[index]

    # chi
    for y in range(0, LANES, 5):
        row = a[y:y + 5]
        a[y:y + 5] = [row[x] ^ (~row[(x + 1) % 5] & row[(x + 2) % 5]) for x in range(5)]

    # iota
    a[0] ^= constant
    return a


def keccakf1600(state: Sequence[int]) -> list[int]:
    """Apply Keccak-f[1600] to 25 64-bit lanes and return the new lanes.

    The input sequence is left unchanged.
    """
    if len(state) != LANES:
        raise ValueError(f"state must hold {LANES} lanes, got {len(state)}")
    lanes = list(state)
    for lane in lanes:
        if not 0 <= lane <= _MASK64:
            raise ValueError(f"lane value out of 64-bit range: {lane}")
    for constant in ROUND_CONSTANTS:
        lanes = _round(lanes, constant)
    return lanes