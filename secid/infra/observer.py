"""Validation observers — the side channel for lenient and failed checks.

Validators report two events: a code accepted without a checksum pass, and
a code rejected by its checksum. The observer never changes the result.
LoggingObserver is the default; NullObserver drops everything.
"""

from __future__ import annotations

import logging
from typing import Protocol, final, runtime_checkable

from secid.core.errors import ChecksumFailedError
from secid.core.types import CanonicalCode

logger = logging.getLogger("secid")


@runtime_checkable
class ValidationObserver(Protocol):
    """Receives validation events. Implementations must not raise."""

    def accepted_unverified(self, code: CanonicalCode) -> None: ...

    def checksum_failed(self, error: ChecksumFailedError) -> None: ...


@final
class LoggingObserver:
    """Write validation events to a standard-library logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log if log is not None else logger

    def accepted_unverified(self, code: CanonicalCode) -> None:
        self._log.warning(
            "%s accepted without checksum verification (%s). Provided: %s",
            code.scheme.value, code.verification.value, code.value,
        )

    def checksum_failed(self, error: ChecksumFailedError) -> None:
        self._log.warning("%s", error.message)


@final
class NullObserver:
    """Discard validation events."""

    def accepted_unverified(self, code: CanonicalCode) -> None:
        pass

    def checksum_failed(self, error: ChecksumFailedError) -> None:
        pass


DEFAULT_OBSERVER: ValidationObserver = LoggingObserver()


def resolve_observer(observer: ValidationObserver | None) -> ValidationObserver:
    return DEFAULT_OBSERVER if observer is None else observer
