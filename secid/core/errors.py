"""Error value hierarchy — validators return these inside Err, never raise them.

Every error is a frozen dataclass that can be pattern-matched and serialized.
Base class IdentifierError, three @final subclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Self, TypeAlias, final

from secid.core.types import Scheme

CODE_TOO_SHORT = "ID-TOO-SHORT"
CODE_CONVERSION = "ID-CONVERSION"
CODE_CHECKSUM = "ID-CHECKSUM"


@dataclass(frozen=True, slots=True)
class IdentifierError:
    """Base error value. NOT @final — has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def with_context(self, context: str) -> Self:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class TooShortError(IdentifierError):
    """Input is shorter than the scheme's minimum length."""

    scheme: Scheme
    min_length: int
    actual_length: int

    @staticmethod
    def build(scheme: Scheme, raw: str, min_length: int, source: str) -> TooShortError:
        return TooShortError(
            message=(
                f"{scheme.value} must be at least {min_length} characters long. "
                f"Provided: {raw}"
            ),
            code=CODE_TOO_SHORT,
            source=source,
            scheme=scheme,
            min_length=min_length,
            actual_length=len(raw),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            **IdentifierError.to_dict(self),
            "scheme": self.scheme.value,
            "min_length": self.min_length,
            "actual_length": self.actual_length,
        }


class ConversionFailure(Enum):
    """Why an alphanumeric string could not be expanded to an integer."""

    OVERFLOW = "overflow"
    INVALID_CHARACTER = "invalid_character"


@final
@dataclass(frozen=True, slots=True)
class ConversionError(IdentifierError):
    """Letter/digit expansion failed or overflowed."""

    kind: ConversionFailure
    value: str

    @staticmethod
    def build(kind: ConversionFailure, value: str, reason: str, source: str) -> ConversionError:
        return ConversionError(
            message=f"Cannot convert '{value}': {reason}",
            code=CODE_CONVERSION,
            source=source,
            kind=kind,
            value=value,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            **IdentifierError.to_dict(self),
            "kind": self.kind.value,
            "value": self.value,
        }


@final
@dataclass(frozen=True, slots=True)
class ChecksumFailedError(IdentifierError):
    """Structurally well-formed code failed its check digit."""

    scheme: Scheme
    algorithm: str
    value: str

    @staticmethod
    def build(scheme: Scheme, algorithm: str, value: str, source: str) -> ChecksumFailedError:
        return ChecksumFailedError(
            message=f"{scheme.value} failed the {algorithm} verification. Provided: {value}",
            code=CODE_CHECKSUM,
            source=source,
            scheme=scheme,
            algorithm=algorithm,
            value=value,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            **IdentifierError.to_dict(self),
            "scheme": self.scheme.value,
            "algorithm": self.algorithm,
            "value": self.value,
        }


ValidationFailure: TypeAlias = TooShortError | ConversionError | ChecksumFailedError
