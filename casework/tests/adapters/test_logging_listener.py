"""Tests for the logging result listener adapter."""

import logging

import pytest

from casework.adapters.listener.log import LoggingResultListener
from casework.core.models import Case, CaseResult, CaseStatus, FixtureResult, MethodRef

LOGGER_NAME = "casework.adapters.listener.log"


class Sample:
    def check(self, value=None):
        pass


@pytest.fixture
def sample_case() -> Case:
    """Create a parameterized case."""
    method = MethodRef(owner=Sample, name="check", function=Sample.check)
    return Case(method=method, arguments=(7,))


class TestLoggingResultListener:
    """One log record per outcome."""

    def test_pass(self, sample_case: Case, caplog: pytest.LogCaptureFixture) -> None:
        """Passing cases log at INFO with their display name."""
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        LoggingResultListener().case_finished(
            CaseResult(case=sample_case, status=CaseStatus.PASSED, duration_seconds=0.25)
        )

        assert "PASS  Sample.check(7) (0.250s)" in caplog.text

    def test_fail(self, sample_case: Case, caplog: pytest.LogCaptureFixture) -> None:
        """Failing cases log at ERROR with the exception type and message."""
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        LoggingResultListener().case_finished(
            CaseResult(
                case=sample_case,
                status=CaseStatus.FAILED,
                error=ValueError("bad value"),
            )
        )

        (record,) = caplog.records
        assert record.levelno == logging.ERROR
        assert "FAIL  Sample.check(7): ValueError: bad value" in record.getMessage()

    def test_not_run(self, sample_case: Case, caplog: pytest.LogCaptureFixture) -> None:
        """NOT_RUN cases log at WARNING."""
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        LoggingResultListener().case_finished(
            CaseResult(case=sample_case, status=CaseStatus.NOT_RUN)
        )

        (record,) = caplog.records
        assert record.levelno == logging.WARNING

    def test_case_started_only_when_verbose(
        self, sample_case: Case, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Case starts are logged only in verbose mode."""
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        LoggingResultListener(verbose=False).case_started(sample_case)
        assert caplog.records == []

        LoggingResultListener(verbose=True).case_started(sample_case)
        assert "START Sample.check(7)" in caplog.text

    def test_fixture_summary(self, sample_case: Case, caplog: pytest.LogCaptureFixture) -> None:
        """Fixture results log a per-status summary."""
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)
        result = FixtureResult(
            fixture_type=Sample,
            case_results=(
                CaseResult(case=sample_case, status=CaseStatus.PASSED),
                CaseResult(case=sample_case, status=CaseStatus.FAILED, error=KeyError("k")),
            ),
        )

        LoggingResultListener().fixture_finished(result)

        assert "Fixture Sample: 1 passed, 1 failed, 0 not run" in caplog.text

    def test_fixture_error(self, caplog: pytest.LogCaptureFixture) -> None:
        """Fixture-level errors log at ERROR."""
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        LoggingResultListener().fixture_finished(
            FixtureResult(fixture_type=Sample, case_results=(), error=OSError("disk"))
        )

        (record,) = caplog.records
        assert record.levelno == logging.ERROR
        assert "OSError: disk" in record.getMessage()
