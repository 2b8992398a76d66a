"""CUSIP — 9-character North American security identifier.

An 8-character input is taken as a CUSIP without its check digit and
accepted unverified. Codes starting with the Bloomberg vendor prefix "BL"
are accepted as they are.
"""

from __future__ import annotations

from secid.checksum.double_add_double import is_valid_modulus10_double_add_double
from secid.core.errors import ChecksumFailedError, TooShortError
from secid.core.result import Err, Ok
from secid.core.types import CanonicalCode, Scheme, Verification
from secid.identifiers._validation import accept_unverified, reject_checksum, require_length
from secid.infra.config import CUSIP_LENGTH, CUSIP_MIN_LENGTH, DEFAULT_POLICY, ValidationPolicy
from secid.infra.observer import ValidationObserver, resolve_observer

_SOURCE = "identifiers.validate_cusip"
_ALGORITHM = "Modulus 10 Double Add Double"


def validate_cusip(
    raw: str,
    *,
    policy: ValidationPolicy = DEFAULT_POLICY,
    observer: ValidationObserver | None = None,
) -> Ok[CanonicalCode] | Err[TooShortError | ChecksumFailedError]:
    """Cut the CUSIP from the front of raw and verify it."""
    match require_length(Scheme.CUSIP, raw, CUSIP_MIN_LENGTH, _SOURCE):
        case Err(e):
            return Err(e)
    if len(raw) == CUSIP_MIN_LENGTH:
        cusip = raw
    else:
        cusip = raw[:CUSIP_LENGTH]
    obs = resolve_observer(observer)

    if policy.cusip_vendor_prefix and cusip.startswith(policy.cusip_vendor_prefix):
        return accept_unverified(cusip, Scheme.CUSIP, Verification.VENDOR_PREFIX, obs)

    if len(cusip) != CUSIP_LENGTH:
        if not policy.accept_missing_check_digit:
            return reject_checksum(cusip, Scheme.CUSIP, _ALGORITHM, _SOURCE, obs)
        return accept_unverified(cusip, Scheme.CUSIP, Verification.MISSING_CHECK_DIGIT, obs)

    if not is_valid_modulus10_double_add_double(cusip, observer=obs):
        return reject_checksum(cusip, Scheme.CUSIP, _ALGORITHM, _SOURCE, obs)
    return Ok(CanonicalCode(cusip, Scheme.CUSIP))
