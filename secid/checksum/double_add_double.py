"""Modulus 10 Double Add Double — the CUSIP check digit algorithm.

Reference: https://www.cusip.com/pdf/CUSIP_Intro_03.14.11.pdf

Each of the eight data characters is given a value (digits as themselves,
A=10 ... Z=35, then * @ # as 36, 37, 38). Values at odd positions are
doubled. The digits of every value are summed, and the check digit is
(10 - sum % 10) % 10.
"""

from __future__ import annotations

from secid.core.errors import ConversionError, ConversionFailure
from secid.core.result import Err, Ok
from secid.core.types import CanonicalCode, Scheme, Verification
from secid.infra.observer import ValidationObserver, resolve_observer

_SPECIAL_VALUES: dict[str, int] = {"*": 36, "@": 37, "#": 38}
_DATA_LENGTH = 8
_CHECK_SOURCE = "checksum.cusip_check_digit"


def _char_value(c: str) -> int | None:
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if c.isascii() and c.isalpha():
        return ord(c) - ord("A") + 10
    return _SPECIAL_VALUES.get(c)


def _digit_sum(value: int) -> int:
    total = 0
    while value:
        total += value % 10
        value //= 10
    return total


def cusip_check_digit(body: str) -> Ok[int] | Err[ConversionError]:
    """Compute the check digit for the first eight characters of body."""
    data = body[:_DATA_LENGTH]
    if len(data) != _DATA_LENGTH:
        return Err(ConversionError.build(
            ConversionFailure.INVALID_CHARACTER, body,
            f"CUSIP body must have {_DATA_LENGTH} characters", _CHECK_SOURCE,
        ))
    total = 0
    for i, c in enumerate(data):
        value = _char_value(c)
        if value is None:
            return Err(ConversionError.build(
                ConversionFailure.INVALID_CHARACTER, body,
                f"invalid CUSIP character '{c}'", _CHECK_SOURCE,
            ))
        if i % 2 == 1:
            value *= 2
        total += _digit_sum(value)
    return Ok((10 - total % 10) % 10)


def is_valid_modulus10_double_add_double(
    code: str,
    *,
    observer: ValidationObserver | None = None,
) -> bool:
    """Check a 9-character CUSIP against its trailing check digit.

    A code that is not exactly 9 characters has no check digit to compare:
    it is reported to the observer and treated as valid.
    """
    if len(code) != _DATA_LENGTH + 1:
        resolve_observer(observer).accepted_unverified(
            CanonicalCode(code, Scheme.CUSIP, Verification.MISSING_CHECK_DIGIT),
        )
        return True
    check = code[_DATA_LENGTH]
    if not "0" <= check <= "9":
        return False
    expected = cusip_check_digit(code)
    if isinstance(expected, Err):
        return False
    return expected.value == int(check)
