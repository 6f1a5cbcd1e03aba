"""Conversion of decimal integers into other bases."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

_NUMBER = re.compile(r"[+-]?[0-9]+")

INVALID_TOKEN_MESSAGE = "Error: Non-long-int token encountered."


class InvalidTokenError(ValueError):
    """Input held something other than a long integer."""

    def __init__(self, token: str) -> None:
        super().__init__(INVALID_TOKEN_MESSAGE)
        self.token = token


def _digit(value: int, base: int) -> str:
    if value <= 9:
        return str(value)
    # Letter digits are only written for bases 16 and 36.
    if base in (16, 36):
        return chr(ord("A") + value - 10)
    return ""


def to_base(number: int, base: int) -> str:
    """Write ``number`` in ``base`` (2 to 36), upper-case letters for digits above 9."""
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, not {base}")
    sign = "-" if number < 0 else ""
    magnitude = abs(number)
    digits = []
    while True:
        magnitude, value = divmod(magnitude, base)
        digits.append(_digit(value, base))
        if not magnitude:
            break
    return sign + "".join(reversed(digits))


def convert_range(base: int, start: int, finish: int) -> Iterator[str]:
    """Yield every number from ``start`` to ``finish`` inclusive in ``base``."""
    if finish > start:
        for number in range(start, finish + 1):
            yield to_base(number, base)


def _tokens(chunks: Iterable[str]) -> Iterator[str]:
    pending = ""
    for chunk in chunks:
        pending += chunk
        parts = pending.split()
        if pending and not pending[-1].isspace() and parts:
            pending = parts.pop()
        else:
            pending = ""
        yield from parts
    if pending:
        yield pending


def convert_stream(base: int, text: str | Iterable[str]) -> Iterator[str]:
    """Convert each integer read from ``text`` until the input ends.

    ``text`` is a string or an iterable of string chunks such as a file.
    A stray sign at the very end of the input ends it quietly; any other
    non-integer input raises InvalidTokenError after the numbers before it.
    """
    chunks = [text] if isinstance(text, str) else text
    tokens = _tokens(chunks)
    for token in tokens:
        rest = token
        while rest:
            match = _NUMBER.match(rest)
            if match is None:
                after_sign = rest[1:] if rest[0] in "+-" else rest
                if after_sign or any(True for _ in tokens):
                    raise InvalidTokenError(rest)
                return
            yield to_base(int(match.group()), base)
            rest = rest[match.end():]


def convert(
    base: int, start: int, finish: int, text: str | Iterable[str] = ""
) -> Iterator[str]:
    """Convert the range, or the numbers in ``text`` when no range is set."""
    if start == 0 and finish == 0:
        return convert_stream(base, text)
    return convert_range(base, start, finish)