"""Text renderings and parsers for fixed-width :class:`~ecckit.bigint.Int` values."""

from __future__ import annotations

from ecckit.bigint import WORD_BITS, WORDS, Int

_DECIMAL = "0123456789"
_HEX_UPPER = "0123456789ABCDEF"
_HEX_LOWER = "0123456789abcdef"
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_QWORDS = WORDS // 2


def from_base_n(base: int, charset: str, text: str) -> Int:
    """Parse ``text`` written in ``base`` with digits taken from ``charset``.

    Each character is upper-cased before it is looked up, so ``charset``
    should hold upper-case letters. The result wraps to the integer width.
    """
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if len(charset) < base:
        raise ValueError(f"charset has fewer than {base} digits")
    value = 0
    for char in text:
        digit = charset.find(char.upper())
        if digit < 0:
            raise ValueError(f"invalid character {char!r} for this charset")
        value = value * base + digit
    return Int(value)


def from_base10(text: str) -> Int:
    """Parse a decimal string."""
    return from_base_n(10, _DECIMAL, text)


def from_base16(text: str) -> Int:
    """Parse a hexadecimal string (either letter case)."""
    return from_base_n(16, _HEX_UPPER, text)


def to_base_n(value: Int, base: int, charset: str) -> str:
    """Render ``value`` as a signed number in ``base`` using ``charset``."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if len(charset) < base:
        raise ValueError(f"charset has fewer than {base} digits")
    value = Int(value)
    number = abs(value.signed())
    digits = []
    while True:
        number, digit = divmod(number, base)
        digits.append(charset[digit])
        if not number:
            break
    sign = "-" if value.is_negative() else ""
    return sign + "".join(reversed(digits))


def to_base10(value: Int) -> str:
    """Render ``value`` as a signed decimal string."""
    return to_base_n(value, 10, _DECIMAL)


def to_base16(value: Int) -> str:
    """Render ``value`` as a signed lower-case hexadecimal string."""
    return to_base_n(value, 16, _HEX_LOWER)


def _words32(value: Int) -> list[int]:
    raw = int(Int(value))
    return [(raw >> (WORD_BITS * i)) & _MASK32 for i in range(WORDS)]


def to_base2(value: Int) -> str:
    """Render the lowest nine 32-bit words, lowest word first, each MSB first."""
    return "".join(format(word, "032b") for word in _words32(value)[: WORDS - 1])


def block_str(value: Int) -> str:
    """Render the low 256 bits as eight space-separated upper-case hex words."""
    words = _words32(value)[: WORDS - 2]
    return " ".join(f"{word:08X}" for word in reversed(words))


def c64_str(value: Int, digits: int) -> str:
    """Render the lowest ``digits`` 64-bit words as a brace-enclosed literal list."""
    if not 0 <= digits <= _QWORDS:
        raise ValueError(f"digit count must be in [0, {_QWORDS}], got {digits}")
    raw = int(Int(value))
    parts = []
    for i in range(digits):
        word = (raw >> (64 * i)) & _MASK64
        parts.append(f"0x{word:x}ULL" if word else "0ULL")
    return "{" + ",".join(parts) + "}"