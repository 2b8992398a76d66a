"""Identifier value types: Scheme, Verification, CanonicalCode."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import final


class Scheme(Enum):
    """Identifier numbering schemes."""

    FIGI = "FIGI"
    ISIN = "ISIN"
    CUSIP = "CUSIP"

    @staticmethod
    def from_name(name: str) -> Scheme:
        """Look up a scheme by case-insensitive name. Raises ValueError."""
        try:
            return Scheme[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown identifier scheme: '{name}'") from None


class Verification(Enum):
    """How an accepted code got through validation.

    Only CHECKSUM means the check digit was actually verified. The other
    variants are lenient acceptances a caller may want to flag.
    """

    CHECKSUM = "checksum"
    VENDOR_PREFIX = "vendor_prefix"
    NUMERIC_OVERFLOW = "numeric_overflow"
    MISSING_CHECK_DIGIT = "missing_check_digit"


@final
@dataclass(frozen=True, slots=True)
class CanonicalCode:
    """The fixed-length code cut from the raw input and accepted."""

    value: str
    scheme: Scheme
    verification: Verification = Verification.CHECKSUM

    @property
    def verified(self) -> bool:
        return self.verification is Verification.CHECKSUM

    def __str__(self) -> str:
        return self.value
