"""Shared helpers for the per-scheme validators."""

from __future__ import annotations

from secid.checksum.luhn import is_valid_luhn
from secid.core.errors import ChecksumFailedError, TooShortError
from secid.core.result import Err, Ok
from secid.core.types import CanonicalCode, Scheme, Verification
from secid.infra.observer import ValidationObserver


def require_length(
    scheme: Scheme, raw: str, min_length: int, source: str,
) -> Ok[str] | Err[TooShortError]:
    if len(raw) < min_length:
        return Err(TooShortError.build(scheme, raw, min_length, source))
    return Ok(raw)


def accept_unverified(
    value: str, scheme: Scheme, verification: Verification, observer: ValidationObserver,
) -> Ok[CanonicalCode]:
    """Accept without a checksum pass and tell the observer."""
    code = CanonicalCode(value, scheme, verification)
    observer.accepted_unverified(code)
    return Ok(code)


def reject_checksum(
    value: str, scheme: Scheme, algorithm: str, source: str, observer: ValidationObserver,
) -> Err[ChecksumFailedError]:
    error = ChecksumFailedError.build(scheme, algorithm, value, source)
    observer.checksum_failed(error)
    return Err(error)


def luhn_verdict(
    value: str, scheme: Scheme, number: int, source: str, observer: ValidationObserver,
) -> Ok[CanonicalCode] | Err[ChecksumFailedError]:
    if not is_valid_luhn(number):
        return reject_checksum(value, scheme, "Luhn", source, observer)
    return Ok(CanonicalCode(value, scheme))
