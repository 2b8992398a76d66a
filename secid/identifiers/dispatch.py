"""Scheme dispatch: validate one or many raw strings by scheme name."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeAlias

from secid.core.errors import ValidationFailure
from secid.core.result import Err, Ok, sequence
from secid.core.types import CanonicalCode, Scheme
from secid.identifiers.cusip import validate_cusip
from secid.identifiers.figi import validate_figi
from secid.identifiers.isin import validate_isin
from secid.infra.config import DEFAULT_POLICY, ValidationPolicy
from secid.infra.observer import ValidationObserver

Validator: TypeAlias = Callable[..., Ok[CanonicalCode] | Err[ValidationFailure]]

VALIDATORS: dict[Scheme, Validator] = {
    Scheme.FIGI: validate_figi,
    Scheme.ISIN: validate_isin,
    Scheme.CUSIP: validate_cusip,
}


def _as_scheme(scheme: Scheme | str) -> Scheme:
    return scheme if isinstance(scheme, Scheme) else Scheme.from_name(scheme)


def validate(
    scheme: Scheme | str,
    raw: str,
    *,
    policy: ValidationPolicy = DEFAULT_POLICY,
    observer: ValidationObserver | None = None,
) -> Ok[CanonicalCode] | Err[ValidationFailure]:
    """Validate raw as an identifier of the given scheme.

    An unknown scheme name is a programming error and raises ValueError.
    """
    validator = VALIDATORS[_as_scheme(scheme)]
    return validator(raw, policy=policy, observer=observer)


def validate_all(
    scheme: Scheme | str,
    raws: Iterable[str],
    *,
    policy: ValidationPolicy = DEFAULT_POLICY,
    observer: ValidationObserver | None = None,
) -> Ok[list[CanonicalCode]] | Err[ValidationFailure]:
    """Validate every string, stopping at the first rejection."""
    resolved = _as_scheme(scheme)
    return sequence(validate(resolved, raw, policy=policy, observer=observer) for raw in raws)
