"""FIGI — Financial Instrument Global Identifier, 12 characters.

The first three characters are the issuer prefix (e.g. "BBG"); the
remaining nine are expanded to digits and Luhn-checked.
"""

from __future__ import annotations

from secid.checksum.conversion import to_numeric
from secid.core.errors import ChecksumFailedError, ConversionError, TooShortError
from secid.core.result import Err, Ok
from secid.core.types import CanonicalCode, Scheme
from secid.identifiers._validation import luhn_verdict, require_length
from secid.infra.config import DEFAULT_POLICY, ValidationPolicy
from secid.infra.observer import ValidationObserver, resolve_observer

_SOURCE = "identifiers.validate_figi"


def _check(
    figi: str, policy: ValidationPolicy, observer: ValidationObserver,
) -> Ok[CanonicalCode] | Err[ConversionError | ChecksumFailedError]:
    return (
        to_numeric(figi[policy.figi_prefix_length:], max_value=policy.max_numeric)
        .map_err(lambda e: e.with_context(f"FIGI {figi}"))
        .and_then(lambda number: luhn_verdict(figi, Scheme.FIGI, number, _SOURCE, observer))
    )


def validate_figi(
    raw: str,
    *,
    policy: ValidationPolicy = DEFAULT_POLICY,
    observer: ValidationObserver | None = None,
) -> Ok[CanonicalCode] | Err[TooShortError | ConversionError | ChecksumFailedError]:
    """Cut the FIGI from the front of raw and verify it."""
    return (
        require_length(Scheme.FIGI, raw, policy.figi_length, _SOURCE)
        .map(lambda r: r[:policy.figi_length])
        .and_then(lambda figi: _check(figi, policy, resolve_observer(observer)))
    )
