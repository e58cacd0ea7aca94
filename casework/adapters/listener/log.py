"""Logging result listener.

Implements ResultListenerPort by writing one log record per case and
per fixture through the standard logging module.
"""

import logging

from casework.core.models import Case, CaseResult, CaseStatus, FixtureResult
from casework.core.ports import ResultListenerPort

logger = logging.getLogger(__name__)


class LoggingResultListener(ResultListenerPort):
    """Logs outcomes as they happen."""

    def __init__(self, verbose: bool = False):
        """Initialize logging listener.

        Args:
            verbose: If True, also log case starts and tracebacks of failures.
        """
        self.verbose = verbose

    def case_started(self, case: Case) -> None:
        if self.verbose:
            logger.info(f"START {case.display_name}")

    def case_finished(self, result: CaseResult) -> None:
        name = result.case.display_name
        if result.status == CaseStatus.PASSED:
            logger.info(f"PASS  {name} ({result.duration_seconds:.3f}s)")
        elif result.status == CaseStatus.FAILED:
            logger.error(
                f"FAIL  {name}: {self._describe(result.error)}",
                exc_info=result.error if self.verbose else None,
            )
        else:
            logger.warning(f"SKIP  {name}: fixture precondition not met")

    def fixture_finished(self, result: FixtureResult) -> None:
        name = result.fixture_type.__qualname__
        summary = (
            f"{result.count(CaseStatus.PASSED)} passed, "
            f"{result.count(CaseStatus.FAILED)} failed, "
            f"{result.count(CaseStatus.NOT_RUN)} not run"
        )
        if result.error is not None:
            logger.error(f"Fixture {name} errored ({summary}): {self._describe(result.error)}")
        else:
            logger.info(f"Fixture {name}: {summary}")

    @staticmethod
    def _describe(error: BaseException | None) -> str:
        if error is None:
            return "no error recorded"
        return f"{type(error).__name__}: {error}"
