"""Validation policy: lengths, vendor prefixes and leniency switches.

Pure configuration data. DEFAULT_POLICY reproduces the established
behaviour, including the two lenient acceptance paths.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, final

from secid.core.result import Err, Ok

# ---------------------------------------------------------------------------
# Scheme constants
# ---------------------------------------------------------------------------

FIGI_LENGTH: int = 12
FIGI_PREFIX_LENGTH: int = 3  # issuer/country prefix skipped before Luhn
ISIN_LENGTH: int = 12
CUSIP_MIN_LENGTH: int = 8    # without check digit
CUSIP_LENGTH: int = 9

# Bloomberg-assigned codes, not expected to satisfy the ISO/CUSIP checksums
ISIN_VENDOR_PREFIX: str = "BBG"
CUSIP_VENDOR_PREFIX: str = "BL"

MAX_NUMERIC: int = 2**63 - 1  # signed 64-bit


@final
@dataclass(frozen=True, slots=True)
class ValidationPolicy:
    """Knobs the validators read. Build overrides through create()."""

    figi_length: int = FIGI_LENGTH
    figi_prefix_length: int = FIGI_PREFIX_LENGTH
    isin_length: int = ISIN_LENGTH
    isin_vendor_prefix: str = ISIN_VENDOR_PREFIX
    cusip_vendor_prefix: str = CUSIP_VENDOR_PREFIX
    max_numeric: int = MAX_NUMERIC
    accept_isin_overflow: bool = True
    accept_missing_check_digit: bool = True

    @staticmethod
    def create(**overrides: Any) -> Ok[ValidationPolicy] | Err[str]:
        """Build a policy from DEFAULT_POLICY plus overrides, checking consistency."""
        known = {f.name for f in fields(ValidationPolicy)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            return Err(f"Unknown policy fields: {', '.join(unknown)}")
        policy = replace(DEFAULT_POLICY, **overrides)
        for name in ("figi_length", "isin_length"):
            if getattr(policy, name) <= 0:
                return Err(f"{name} must be positive, got {getattr(policy, name)}")
        if not 0 <= policy.figi_prefix_length < policy.figi_length:
            return Err(
                f"figi_prefix_length must be in [0, {policy.figi_length}), "
                f"got {policy.figi_prefix_length}"
            )
        if len(policy.isin_vendor_prefix) > policy.isin_length:
            return Err(f"isin_vendor_prefix '{policy.isin_vendor_prefix}' is longer than an ISIN")
        if len(policy.cusip_vendor_prefix) > CUSIP_MIN_LENGTH:
            return Err(f"cusip_vendor_prefix '{policy.cusip_vendor_prefix}' is longer than a CUSIP")
        if policy.max_numeric < 0:
            return Err(f"max_numeric must be non-negative, got {policy.max_numeric}")
        return Ok(policy)


DEFAULT_POLICY: ValidationPolicy = ValidationPolicy()
