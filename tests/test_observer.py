"""Tests for secid.infra.observer — logging and null observers."""

from __future__ import annotations

import logging

import pytest

from secid.core.errors import ChecksumFailedError
from secid.core.types import CanonicalCode, Scheme, Verification
from secid.identifiers.cusip import validate_cusip
from secid.infra.observer import LoggingObserver, NullObserver, ValidationObserver
from support import RecordingObserver


def _failure() -> ChecksumFailedError:
    return ChecksumFailedError.build(Scheme.FIGI, "Luhn", "BBG000000019", "test.fn")


class TestProtocol:
    @pytest.mark.parametrize("cls", [LoggingObserver, NullObserver, RecordingObserver])
    def test_implements_protocol(self, cls: type) -> None:
        assert isinstance(cls(), ValidationObserver)


class TestLoggingObserver:
    def test_unverified_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        code = CanonicalCode("03783310", Scheme.CUSIP, Verification.MISSING_CHECK_DIGIT)
        with caplog.at_level(logging.WARNING, logger="secid"):
            LoggingObserver().accepted_unverified(code)
        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert "03783310" in record.getMessage()
        assert "missing_check_digit" in record.getMessage()

    def test_checksum_failure_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="secid"):
            LoggingObserver().checksum_failed(_failure())
        assert [r.levelno for r in caplog.records] == [logging.WARNING]
        assert "BBG000000019" in caplog.records[0].getMessage()

    def test_custom_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        log = logging.getLogger("tests.secid.custom")
        with caplog.at_level(logging.WARNING, logger="tests.secid.custom"):
            LoggingObserver(log).checksum_failed(_failure())
        assert caplog.records[0].name == "tests.secid.custom"

    def test_default_observer_logs_short_cusip(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="secid"):
            validate_cusip("03783310")
        assert len(caplog.records) == 1
        assert caplog.records[0].name == "secid"


class TestNullObserver:
    def test_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG):
            validate_cusip("03783310", observer=NullObserver())
            validate_cusip("037833101", observer=NullObserver())
        assert caplog.records == []


class TestDefaultThreshold:
    def test_cusip_checksum_failure_visible_at_warning(
        self, caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="secid"):
            validate_cusip("037833101")
        assert [r.levelno for r in caplog.records] == [logging.WARNING]
        assert "037833101" in caplog.records[0].getMessage()
