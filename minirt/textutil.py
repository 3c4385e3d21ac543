"""Text helpers for reading scene files."""

from __future__ import annotations

from typing import Iterator, TextIO

MAX_LINE = 1023


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    return [part for part in text.split(sep) if part]


def _digits(text: str, start: int) -> tuple[list[int], int]:
    out = []
    i = start
    while i < len(text) and "0" <= text[i] <= "9":
        out.append(ord(text[i]) - ord("0"))
        i += 1
    return out, i


def parse_double(text: str | None) -> float:
    """Read a leading ``-?digits(.digits)?`` number; other text stops the scan."""
    if not text:
        return 0.0
    sign = 1.0
    i = 0
    if text[0] == "-":
        sign = -1.0
        i = 1
    whole, i = _digits(text, i)
    result = 0.0
    for digit in whole:
        result = result * 10 + digit
    if i < len(text) and text[i] == ".":
        frac_digits, _ = _digits(text, i + 1)
        frac = 0.1
        for digit in frac_digits:
            result += digit * frac
            frac *= 0.1
    return result * sign


def parse_int(text: str | None) -> int:
    """Read a leading ``-?digits`` integer; other text stops the scan."""
    if not text:
        return 0
    sign = 1
    i = 0
    if text[0] == "-":
        sign = -1
        i = 1
    digits, _ = _digits(text, i)
    result = 0
    for digit in digits:
        result = result * 10 + digit
    return result * sign


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines without their newline.

    A line holds at most ``MAX_LINE`` characters; the character read once
    that limit is reached is discarded and reading resumes with a new line.
    """
    while True:
        chars: list[str] = []
        while True:
            ch = stream.read(1)
            if not ch or len(chars) >= MAX_LINE or ch == "\n":
                break
            chars.append(ch)
        if not chars and not ch:
            return
        yield "".join(chars)