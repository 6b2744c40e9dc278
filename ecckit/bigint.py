"""Fixed-width 320-bit two's complement integers."""

from __future__ import annotations

import math
from functools import total_ordering
from typing import Union

from ecckit.rng import rndl

BITS = 320
WORD_BITS = 32
WORDS = BITS // WORD_BITS
BYTES = BITS // 8
MODULUS = 1 << BITS
MASK = MODULUS - 1
_SIGN_BIT = 1 << (BITS - 1)
_MASK32 = 0xFFFFFFFF
_MASK256 = (1 << 256) - 1

IntLike = Union["Int", int]


def _raw(value: IntLike) -> int:
    if isinstance(value, Int):
        return value._value
    if isinstance(value, int):
        return value & MASK
    raise TypeError(f"expected Int or int, got {type(value).__name__}")


@total_ordering
class Int:
    """An immutable 320-bit integer with wrap-around arithmetic.

    The value is stored as an unsigned 320-bit pattern; signed operations
    read it in two's complement. Comparisons (``<``, ``<=``...) are unsigned.
    """

    __slots__ = ("_value",)

    def __init__(self, value: IntLike = 0) -> None:
        self._value = _raw(value)

    @classmethod
    def from_bytes32(cls, data: bytes) -> Int:
        """Build a value from 32 big-endian bytes."""
        data = bytes(data)
        if len(data) != 32:
            raise ValueError(f"expected 32 bytes, got {len(data)}")
        return cls(int.from_bytes(data, "big"))

    @classmethod
    def rand(cls, nbits: int) -> Int:
        """Return a random value below ``2**nbits``."""
        if not 0 <= nbits < BITS:
            raise ValueError(f"bit count must be in [0, {BITS}), got {nbits}")
        full_words, left_bits = divmod(nbits, WORD_BITS)
        value = 0
        for i in range(full_words):
            value |= (rndl() & _MASK32) << (WORD_BITS * i)
        value |= (rndl() & ((1 << left_bits) - 1)) << (WORD_BITS * full_words)
        return cls(value)

    @classmethod
    def rand_range(cls, low: IntLike, high: IntLike) -> Int:
        """Return a random value in ``[low, high)`` drawn from 256 random bits."""
        low = cls(low)
        diff = cls(high) - low
        value = 0
        for i in range(256 // WORD_BITS):
            value |= (rndl() & _MASK32) << (WORD_BITS * i)
        return cls(value).mod(diff) + low

    def to_bytes32(self) -> bytes:
        """Return the low 256 bits as 32 big-endian bytes."""
        return (self._value & _MASK256).to_bytes(32, "big")

    def signed(self) -> int:
        """Return the value read as a two's complement signed integer."""
        return self._value - MODULUS if self._value & _SIGN_BIT else self._value

    def is_zero(self) -> bool:
        return self._value == 0

    def is_one(self) -> bool:
        return self._value == 1

    def is_positive(self) -> bool:
        """True when the sign bit is clear (zero counts as positive)."""
        return not self._value & _SIGN_BIT

    def is_negative(self) -> bool:
        return bool(self._value & _SIGN_BIT)

    def is_strict_positive(self) -> bool:
        return self.is_positive() and not self.is_zero()

    def is_even(self) -> bool:
        return not self._value & 1

    def is_odd(self) -> bool:
        return bool(self._value & 1)

    def bit_length(self) -> int:
        """Return the bit length of the absolute value."""
        return abs(self.signed()).bit_length()

    def size(self) -> int:
        """Return the number of significant 32-bit words (at least 1)."""
        return max(1, (self._value.bit_length() + WORD_BITS - 1) // WORD_BITS)

    def get_bit(self, n: int) -> int:
        if not 0 <= n < BITS:
            raise IndexError(f"bit index out of range: {n}")
        return (self._value >> n) & 1

    def get_byte(self, n: int) -> int:
        """Return byte ``n``, counting from the least significant byte."""
        if not 0 <= n < BYTES:
            raise IndexError(f"byte index out of range: {n}")
        return (self._value >> (8 * n)) & 0xFF

    def with_byte(self, n: int, byte: int) -> Int:
        """Return a copy whose byte ``n`` (little-endian) is replaced."""
        if not 0 <= n < BYTES:
            raise IndexError(f"byte index out of range: {n}")
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte value out of range: {byte}")
        shift = 8 * n
        return Int((self._value & ~(0xFF << shift)) | (byte << shift))

    def mask_byte(self, n: int) -> Int:
        """Return a copy keeping only the lowest ``n`` 32-bit words."""
        if not 0 <= n <= WORDS:
            raise IndexError(f"word count out of range: {n}")
        return Int(self._value & ((1 << (WORD_BITS * n)) - 1))

    def div(self, divisor: IntLike) -> tuple[Int, Int]:
        """Return ``(quotient, remainder)`` of unsigned division."""
        d = _raw(divisor)
        if d > self._value:
            return Int(0), Int(self)
        if d == 0:
            raise ZeroDivisionError("division by zero")
        q, r = divmod(self._value, d)
        return Int(q), Int(r)

    def mod(self, n: IntLike) -> Int:
        """Return the unsigned remainder modulo ``n``."""
        return self.div(n)[1]

    def mult_mod_n(self, other: IntLike, n: IntLike) -> Int:
        """Return ``(self * other) mod n``, the product wrapped to 320 bits first."""
        return (self * other).mod(n)

    def gcd(self, other: IntLike) -> Int:
        """Return the greatest common divisor of the absolute values."""
        other = Int(other)
        if self.is_zero():
            return other
        if other.is_zero():
            return Int(self)
        return Int(math.gcd(self.signed(), other.signed()))

    def abs(self) -> Int:
        return -self if self.is_negative() else Int(self)

    def __add__(self, other: IntLike) -> Int:
        return Int(self._value + _raw(other))

    __radd__ = __add__

    def __sub__(self, other: IntLike) -> Int:
        return Int(self._value - _raw(other))

    def __rsub__(self, other: IntLike) -> Int:
        return Int(_raw(other) - self._value)

    def __mul__(self, other: IntLike) -> Int:
        return Int(self._value * _raw(other))

    __rmul__ = __mul__

    def __neg__(self) -> Int:
        return Int(-self._value)

    def __lshift__(self, n: int) -> Int:
        if n < 0:
            raise ValueError("negative shift count")
        return Int(self._value << n)

    def __rshift__(self, n: int) -> Int:
        """Arithmetic (sign-extending) right shift."""
        if n < 0:
            raise ValueError("negative shift count")
        return Int(self.signed() >> n)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Int, int)):
            return self._value == _raw(other)
        return NotImplemented

    def __lt__(self, other: IntLike) -> bool:
        if not isinstance(other, (Int, int)):
            return NotImplemented
        return self._value < _raw(other)

    def __le__(self, other: IntLike) -> bool:
        if not isinstance(other, (Int, int)):
            return NotImplemented
        return self._value <= _raw(other)

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"Int(0x{self._value:x})"