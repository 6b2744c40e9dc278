"""String trimming, tokenizing and hexadecimal helpers."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

DEFAULT_SEPARATORS = "\t\n\v\f\r "
_TOKENIZER_TRIM = "\t\n\r :"
_TOKENIZER_SPLIT = re.compile(r"[ \t:]")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def ltrim(text: str, seps: str | None = None) -> str:
    """Remove leading characters found in ``seps`` (whitespace by default)."""
    return text.lstrip(DEFAULT_SEPARATORS if seps is None else seps)


def rtrim(text: str, seps: str | None = None) -> str:
    """Remove trailing characters found in ``seps`` (whitespace by default)."""
    return text.rstrip(DEFAULT_SEPARATORS if seps is None else seps)


def trim(text: str, seps: str | None = None) -> str:
    """Remove leading and trailing characters found in ``seps``."""
    return ltrim(rtrim(text, seps), seps)


def index_of(item: str, items: Sequence[str]) -> int:
    """Return the index of the first element equal to ``item``, or -1."""
    return next((i for i, candidate in enumerate(items) if candidate == item), -1)


def tohex(data: bytes) -> str:
    """Return the lowercase hexadecimal form of ``data``."""
    return bytes(data).hex()


def hexchr2bin(char: str) -> int:
    """Return the value of one hexadecimal digit."""
    if len(char) != 1 or char not in _HEX_DIGITS:
        raise ValueError(f"not a hexadecimal digit: {char!r}")
    return int(char, 16)


def hexs2bin(text: str) -> bytes:
    """Decode a non-empty, even-length hexadecimal string into bytes."""
    if not text:
        raise ValueError("empty hexadecimal string")
    if len(text) % 2:
        raise ValueError("hexadecimal string has an odd length")
    pairs = zip(text[0::2], text[1::2])
    return bytes((hexchr2bin(high) << 4) | hexchr2bin(low) for high, low in pairs)


def is_valid_hex(text: str) -> bool:
    """Return True if every character of ``text`` is a hexadecimal digit."""
    return all(c in _HEX_DIGITS for c in text)


class Tokenizer:
    """Splits a line into tokens separated by spaces, tabs and colons."""

    def __init__(self, data: str) -> None:
        trimmed = trim(data, _TOKENIZER_TRIM)
        self.tokens: list[str] = [t for t in _TOKENIZER_SPLIT.split(trimmed) if t]
        self._current = 0

    def next_token(self) -> str | None:
        """Return the next token, or None once all tokens are consumed."""
        if self._current < len(self.tokens):
            self._current += 1
            return self.tokens[self._current - 1]
        return None

    def has_more_tokens(self) -> bool:
        """Return True while tokens remain to be read."""
        return self._current < len(self.tokens)

    def __iter__(self) -> Iterator[str]:
        while self.has_more_tokens():
            token = self.next_token()
            assert token is not None
            yield token

    def __len__(self) -> int:
        return len(self.tokens)