"""Integration tests for configuration and the composition root.

These tests verify that settings load and validate, that build_engine
wires the right adapters, and that a full run over a real module
behaves end to end.
"""

import os
from unittest.mock import patch

import pytest

from casework.adapters.invocation.dispatch import DispatchTable
from casework.adapters.invocation.reflective import ReflectiveInvoker
from casework.adapters.listener.log import LoggingResultListener
from casework.adapters.metadata.registry import TraitRegistry
from casework.config import Settings, load_settings
from casework.core.errors import AssertionFailure
from casework.core.models import CaseStatus
from casework.main import build_engine, run
from casework.tests.fakes import FakeResultListener
from casework.tests.fakes import sample_fixtures

SAMPLE_MODULE = "casework.tests.fakes.sample_fixtures"


@pytest.fixture(autouse=True)
def clear_journal() -> None:
    """Reset the sample module's journal before each test."""
    sample_fixtures.JOURNAL.clear()


class TestConfigurationLoading:
    """Test configuration loading and validation."""

    def test_load_settings_with_defaults(self) -> None:
        """Load settings with default values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings()
        assert settings.always_run_teardown is True
        assert settings.invocation_mode == "dispatch"
        assert settings.candidate_modules == []
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"

    def test_load_settings_from_env(self) -> None:
        """Load settings from prefixed environment variables."""
        with patch.dict(
            os.environ,
            {
                "CASEWORK_ALWAYS_RUN_TEARDOWN": "false",
                "CASEWORK_INVOCATION_MODE": "reflective",
                "CASEWORK_CANDIDATE_MODULES": '["pkg.tests_a", "pkg.tests_b"]',
                "CASEWORK_LOG_LEVEL": "DEBUG",
            },
        ):
            settings = load_settings()
            assert settings.always_run_teardown is False
            assert settings.invocation_mode == "reflective"
            assert settings.candidate_modules == ["pkg.tests_a", "pkg.tests_b"]
            assert settings.log_level == "DEBUG"

    def test_load_settings_from_env_file(self, tmp_path) -> None:
        """Load settings from an explicit .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("CASEWORK_LOG_FORMAT=json\n")

        settings = load_settings(str(env_file))

        assert settings.log_format == "json"

    def test_rejects_unknown_invocation_mode(self) -> None:
        """Invocation mode is restricted to known adapters."""
        with patch.dict(os.environ, {"CASEWORK_INVOCATION_MODE": "telepathy"}):
            with pytest.raises(Exception):  # ValidationError
                load_settings()

    def test_rejects_blank_module_names(self) -> None:
        """Blank candidate module names are rejected."""
        with pytest.raises(Exception):  # ValidationError
            Settings(candidate_modules=["pkg.tests", "  "])


class TestBuildEngine:
    """Adapter selection and wiring."""

    def test_dispatch_mode(self) -> None:
        """The default invocation mode uses the dispatch table."""
        engine = build_engine(Settings())

        assert isinstance(engine.substrate.invoker, DispatchTable)
        assert isinstance(engine.substrate.metadata, TraitRegistry)
        assert isinstance(engine.listener, LoggingResultListener)

    def test_reflective_mode(self) -> None:
        """Reflective mode uses the wrapping invoker."""
        engine = build_engine(Settings(invocation_mode="reflective"))

        assert isinstance(engine.substrate.invoker, ReflectiveInvoker)

    def test_custom_listener(self) -> None:
        """A supplied listener replaces the logging listener."""
        listener = FakeResultListener()

        engine = build_engine(Settings(), listener=listener)

        assert engine.listener is listener

    def test_teardown_policy_reaches_behaviors(self) -> None:
        """always_run_teardown is applied to the built-in behaviors."""
        engine = build_engine(Settings(always_run_teardown=False))

        assert engine.convention.case_behaviors[0].always_run_teardown is False


class TestRun:
    """End-to-end runs over the sample module."""

    @pytest.mark.parametrize("mode", ["dispatch", "reflective"])
    def test_full_run(self, mode: str) -> None:
        """Every fixture in the module runs with the expected lifecycle."""
        listener = FakeResultListener()

        result = run([SAMPLE_MODULE], settings=Settings(invocation_mode=mode), listener=listener)

        # ArithmeticFixture and DerivedArithmeticFixture: 3 cases each; BrokenFixture: 1.
        assert result.total == 7
        assert result.passed == 6
        assert result.failed == 1
        assert "not_collected" not in sample_fixtures.JOURNAL
        assert "factors_large_prime" not in sample_fixtures.JOURNAL

        failed = [r for r in result.case_results if r.status == CaseStatus.FAILED]
        assert isinstance(failed[0].error, AssertionFailure)
        assert str(failed[0].error) == "deliberate failure"

    def test_arithmetic_fixture_order(self) -> None:
        """Cases sort by name and setup/teardown bracket each expanded tuple."""
        run([SAMPLE_MODULE], settings=Settings(), listener=FakeResultListener())

        first_fixture = sample_fixtures.JOURNAL[: sample_fixtures.JOURNAL.index("fixture_teardown") + 1]
        assert first_fixture == [
            "fixture_setup",
            "setup", "adds1+1", "teardown",
            "setup", "adds2+3", "teardown",
            "setup", "subtracts", "teardown",
            "fixture_teardown",
        ]

    def test_modules_from_settings(self) -> None:
        """Without explicit module names, settings.candidate_modules is used."""
        result = run(
            settings=Settings(candidate_modules=[SAMPLE_MODULE]),
            listener=FakeResultListener(),
        )

        assert result.total == 7

    def test_supplied_settings_configure_logging(self) -> None:
        """Logging level and format come from the supplied settings."""
        with patch("casework.main.configure_logging") as configure:
            run(
                [SAMPLE_MODULE],
                settings=Settings(log_level="WARNING", log_format="json"),
                listener=FakeResultListener(),
            )

        configure.assert_called_once_with("WARNING", "json")
