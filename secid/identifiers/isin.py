"""ISIN — International Securities Identification Number, 12 characters.

All twelve characters are expanded to digits and Luhn-checked. Two inputs
are accepted without that check:
  - Bloomberg-style codes starting with the vendor prefix "BBG";
  - codes whose digit expansion does not fit a signed 64-bit integer.
"""

from __future__ import annotations

from secid.checksum.conversion import to_numeric
from secid.core.errors import (
    ChecksumFailedError,
    ConversionError,
    ConversionFailure,
    TooShortError,
)
from secid.core.result import Err, Ok
from secid.core.types import CanonicalCode, Scheme, Verification
from secid.identifiers._validation import accept_unverified, luhn_verdict, require_length
from secid.infra.config import DEFAULT_POLICY, ValidationPolicy
from secid.infra.observer import ValidationObserver, resolve_observer

_SOURCE = "identifiers.validate_isin"


def _check(
    isin: str, policy: ValidationPolicy, observer: ValidationObserver,
) -> Ok[CanonicalCode] | Err[ConversionError | ChecksumFailedError]:
    if policy.isin_vendor_prefix and isin.startswith(policy.isin_vendor_prefix):
        return accept_unverified(isin, Scheme.ISIN, Verification.VENDOR_PREFIX, observer)

    numeric = to_numeric(isin, max_value=policy.max_numeric)
    match numeric:
        case Err(ConversionError(kind=ConversionFailure.OVERFLOW)) if policy.accept_isin_overflow:
            return accept_unverified(isin, Scheme.ISIN, Verification.NUMERIC_OVERFLOW, observer)
    return (
        numeric
        .map_err(lambda e: e.with_context(f"ISIN {isin}"))
        .and_then(lambda number: luhn_verdict(isin, Scheme.ISIN, number, _SOURCE, observer))
    )


def validate_isin(
    raw: str,
    *,
    policy: ValidationPolicy = DEFAULT_POLICY,
    observer: ValidationObserver | None = None,
) -> Ok[CanonicalCode] | Err[TooShortError | ConversionError | ChecksumFailedError]:
    """Cut the ISIN from the front of raw and verify it."""
    return (
        require_length(Scheme.ISIN, raw, policy.isin_length, _SOURCE)
        .map(lambda r: r[:policy.isin_length])
        .and_then(lambda isin: _check(isin, policy, resolve_observer(observer)))
    )
