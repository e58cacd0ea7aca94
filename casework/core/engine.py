"""Execution engine: discovery, expansion, ordering and wrapped execution.

Runs are strictly sequential. Each fixture type gets one instance that
lives for the whole pass over its cases.
"""

import logging
import time
from collections.abc import Iterable
from datetime import datetime, timezone

from .behaviors import BehaviorChain
from .convention import Convention
from .invocation import invoke_preserving_cause
from .models import (
    Case,
    CaseExecution,
    CaseResult,
    CaseStatus,
    Fixture,
    FixturePlan,
    FixtureResult,
    RunResult,
)
from .ordering import sort_cases
from .parameters import ParameterResolver
from .ports import ResultListenerPort, Substrate

logger = logging.getLogger(__name__)


class ExecutionEngine:
    """Selects fixtures and cases from a candidate pool and executes them.

    Failure policy:
    - A failing case is recorded and the remaining cases still run.
    - A failure constructing the fixture or in fixture setup marks every
      case of that fixture NOT_RUN; no case chain executes.
    - A fixture teardown failure is recorded on the FixtureResult after
      all case results are in.
    """

    def __init__(
        self,
        convention: Convention,
        substrate: Substrate,
        listener: ResultListenerPort | None = None,
    ):
        self.convention = convention
        self.substrate = substrate
        self.listener = listener
        self.resolver = ParameterResolver(convention.parameter_sources)
        self.fixture_chain: BehaviorChain[Fixture] = BehaviorChain(convention.fixture_behaviors)
        self.case_chain: BehaviorChain[CaseExecution] = BehaviorChain(convention.case_behaviors)

    def discover(self, candidates: Iterable[type]) -> list[FixturePlan]:
        """Select fixtures and build each one's ordered case list.

        Never raises for an empty selection; an empty list is a valid plan.
        """
        plans = []
        for fixture_type in self.convention.select_fixtures(candidates):
            methods = self.convention.select_cases(
                self.substrate.metadata.declared_methods(fixture_type)
            )
            cases = [case for method in methods for case in self.resolver.expand(method)]
            ordered = sort_cases(cases, self.convention.case_comparator)
            logger.debug(
                f"Discovered fixture {fixture_type.__qualname__} with {len(ordered)} cases"
            )
            plans.append(FixturePlan(fixture_type=fixture_type, cases=tuple(ordered)))
        return plans

    def run(self, candidates: Iterable[type]) -> RunResult:
        """Discover and execute every fixture in the candidate pool."""
        started_at = datetime.now(timezone.utc)
        plans = self.discover(candidates)
        if not plans:
            logger.warning("No fixtures found to execute")

        fixture_results = tuple(self.run_fixture(plan) for plan in plans)
        result = RunResult(
            fixture_results=fixture_results,
            started_at=started_at,
            finished_at=datetime.now(timezone.utc),
        )
        logger.info(
            f"Run complete: {result.total} cases, {result.passed} passed, "
            f"{result.failed} failed, {result.not_run} not run"
        )
        return result

    def run_fixture(self, plan: FixturePlan) -> FixtureResult:
        """Execute one fixture's cases inside the fixture chain."""
        logger.debug(f"Starting fixture {plan.fixture_type.__qualname__}")
        try:
            instance = plan.fixture_type()
        except Exception as e:
            logger.error(
                f"Could not construct fixture {plan.fixture_type.__qualname__}: {e}",
                exc_info=True,
            )
            return self._finish_fixture(plan, [], e)

        fixture = Fixture(type=plan.fixture_type, instance=instance, substrate=self.substrate)
        case_results: list[CaseResult] = []

        def run_cases() -> None:
            for case in plan.cases:
                case_results.append(self.run_case(fixture, case))

        error: Exception | None = None
        try:
            self.fixture_chain.execute(fixture, run_cases)
        except Exception as e:
            logger.error(
                f"Fixture {plan.fixture_type.__qualname__} failed: {e}",
                exc_info=True,
            )
            error = e

        return self._finish_fixture(plan, case_results, error)

    def run_case(self, fixture: Fixture, case: Case) -> CaseResult:
        """Execute one case inside the case chain and record its outcome."""
        if self.listener is not None:
            self.listener.case_started(case)

        execution = CaseExecution(case=case, fixture=fixture)

        def invoke_case() -> None:
            invoke_preserving_cause(
                self.substrate.invoker, case.method, fixture.instance, case.arguments
            )

        start = time.perf_counter()
        try:
            self.case_chain.execute(execution, invoke_case)
        except Exception as e:
            logger.warning(f"Case {case.display_name} failed: {type(e).__name__}: {e}")
            result = CaseResult(
                case=case,
                status=CaseStatus.FAILED,
                error=e,
                duration_seconds=time.perf_counter() - start,
            )
        else:
            result = CaseResult(
                case=case,
                status=CaseStatus.PASSED,
                duration_seconds=time.perf_counter() - start,
            )

        if self.listener is not None:
            self.listener.case_finished(result)
        return result

    def _finish_fixture(
        self,
        plan: FixturePlan,
        case_results: list[CaseResult],
        error: Exception | None,
    ) -> FixtureResult:
        # Cases the fixture chain never reached share the fixture's failure.
        for case in plan.cases[len(case_results):]:
            not_run = CaseResult(case=case, status=CaseStatus.NOT_RUN, error=error)
            if self.listener is not None:
                self.listener.case_finished(not_run)
            case_results.append(not_run)

        result = FixtureResult(
            fixture_type=plan.fixture_type,
            case_results=tuple(case_results),
            error=error,
        )
        if self.listener is not None:
            self.listener.fixture_finished(result)
        return result
