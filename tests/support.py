"""Test support: reference check digits, strategies, a recording observer.

Check digits here are computed independently of secid, so valid codes
drawn from these strategies do not depend on the code under test.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from secid.core.errors import ChecksumFailedError
from secid.core.types import CanonicalCode

# ===================================================================
# REFERENCE CHECK DIGITS
# ===================================================================

UPPER_ALNUM = string.digits + string.ascii_uppercase


def ref_expand(text: str) -> str:
    return "".join(c if c.isdigit() else str(ord(c) - 55) for c in text)


def ref_luhn_check_digit(digits: str) -> str:
    """Check digit for a digit string, doubling from the rightmost digit."""
    total = 0
    for i, ch in enumerate(reversed(digits)):
        d = int(ch)
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return str((10 - total % 10) % 10)


def ref_cusip_check_digit(body: str) -> str:
    total = 0
    for i, c in enumerate(body):
        v = int(c) if c.isdigit() else ord(c) - ord("A") + 10
        if i % 2 == 1:
            v *= 2
        total += v // 10 + v % 10
    return str((10 - total % 10) % 10)


# ===================================================================
# STRATEGIES
# ===================================================================


def noise() -> SearchStrategy[str]:
    """Trailing junk appended after a code."""
    return st.text(alphabet=string.printable, min_size=1, max_size=20)


@st.composite
def valid_figis(draw: st.DrawFn) -> str:
    prefix = draw(st.sampled_from(["BBG", "GGG", "ABC"]))
    body = draw(st.text(alphabet=UPPER_ALNUM, min_size=8, max_size=8))
    return prefix + body + ref_luhn_check_digit(ref_expand(body))


@st.composite
def valid_cusips(draw: st.DrawFn) -> str:
    body = draw(st.text(alphabet=UPPER_ALNUM, min_size=8, max_size=8).filter(
        lambda s: not s.startswith("BL"),
    ))
    return body + ref_cusip_check_digit(body)


@st.composite
def valid_isins(draw: st.DrawFn) -> str:
    """ISINs whose expansion stays within a signed 64-bit integer."""
    country = draw(st.sampled_from(["US", "DE", "GB", "FR", "JP"]))
    body = draw(st.text(alphabet=string.digits, min_size=9, max_size=9))
    return country + body + ref_luhn_check_digit(ref_expand(country + body))




# ===================================================================
# OBSERVER
# ===================================================================


class RecordingObserver:
    """Collects observer events for assertions."""

    def __init__(self) -> None:
        self.unverified: list[CanonicalCode] = []
        self.failures: list[ChecksumFailedError] = []

    def accepted_unverified(self, code: CanonicalCode) -> None:
        self.unverified.append(code)

    def checksum_failed(self, error: ChecksumFailedError) -> None:
        self.failures.append(error)
