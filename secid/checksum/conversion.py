"""Alphanumeric to numeric expansion for Luhn-based identifier checks.

Digits stay as they are; each letter becomes ord(c) - 55 written in
decimal ('A' -> 10, 'B' -> 11, ..., 'Z' -> 35). The pieces are
concatenated in order and read as one integer.
"""

from __future__ import annotations

from secid.core.errors import ConversionError, ConversionFailure
from secid.core.result import Err, Ok
from secid.infra.config import MAX_NUMERIC

_SOURCE = "checksum.to_numeric"


def _is_ascii_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_ascii_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


def expand_digits(text: str) -> Ok[str] | Err[ConversionError]:
    """Expand text into its digit string without parsing it."""
    if not text:
        return Err(ConversionError.build(
            ConversionFailure.INVALID_CHARACTER, text, "empty input", _SOURCE,
        ))
    parts: list[str] = []
    for c in text:
        if _is_ascii_digit(c):
            parts.append(c)
        elif _is_ascii_letter(c):
            parts.append(str(ord(c) - 55))
        else:
            return Err(ConversionError.build(
                ConversionFailure.INVALID_CHARACTER, text, f"invalid character '{c}'", _SOURCE,
            ))
    return Ok("".join(parts))


def _parse_bounded(text: str, expanded: str, max_value: int) -> Ok[int] | Err[ConversionError]:
    digits = expanded.lstrip("0") or "0"
    if len(digits) > len(str(max_value)) or int(digits) > max_value:
        return Err(ConversionError.build(
            ConversionFailure.OVERFLOW, text, f"value out of range ({expanded})", _SOURCE,
        ))
    return Ok(int(digits))


def to_numeric(text: str, *, max_value: int = MAX_NUMERIC) -> Ok[int] | Err[ConversionError]:
    """Convert an alphanumeric string to its numeric representation.

    Fails with ConversionFailure.INVALID_CHARACTER for anything that is not an
    ASCII letter or digit, and ConversionFailure.OVERFLOW when the result is
    larger than max_value.
    """
    return expand_digits(text).and_then(
        lambda expanded: _parse_bounded(text, expanded, max_value),
    )
