"""Domain models for the Casework execution engine.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .ports import Substrate


class Trait(Enum):
    """Named markers used to classify types and methods.

    Traits carry no behavior; conventions test for their presence.
    """

    IS_FIXTURE = "is_fixture"
    IS_CASE = "is_case"
    HAS_CASE_PARAMETERS = "has_case_parameters"
    IS_EXPLICITLY_SKIPPED = "is_explicitly_skipped"
    IS_FIXTURE_SETUP = "is_fixture_setup"
    IS_FIXTURE_TEARDOWN = "is_fixture_teardown"
    IS_SETUP = "is_setup"
    IS_TEARDOWN = "is_teardown"


@dataclass(frozen=True)
class MethodRef:
    """A public instance method as enumerated from a fixture type.

    ``owner`` is the type the method was enumerated from, which may be a
    subclass of the class that defines ``function``.
    """

    owner: type
    name: str
    function: Callable[..., Any]

    def __post_init__(self) -> None:
        """Validate method reference invariants on creation."""
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")

    @property
    def qualified_name(self) -> str:
        return f"{self.owner.__qualname__}.{self.name}"


@dataclass(frozen=True)
class Case:
    """One concrete invocation of a case method.

    A method with N declared argument tuples expands into N cases that
    share a name; ``display_name`` tells them apart in reports.
    """

    method: MethodRef
    arguments: tuple[Any, ...] = ()

    @property
    def name(self) -> str:
        return self.method.qualified_name

    @property
    def display_name(self) -> str:
        if not self.arguments:
            return self.name
        rendered = ", ".join(repr(argument) for argument in self.arguments)
        return f"{self.name}({rendered})"


@dataclass(frozen=True)
class FixturePlan:
    """A selected fixture type and its ordered cases."""

    fixture_type: type
    cases: tuple[Case, ...]


@dataclass(frozen=True)
class Fixture:
    """A live fixture instance, shared by every case of its type.

    Also the context handed to fixture-scoped behaviors.
    """

    type: type
    instance: Any
    substrate: "Substrate"


@dataclass(frozen=True)
class CaseExecution:
    """Context handed to case-scoped behaviors for one invocation."""

    case: Case
    fixture: Fixture


class CaseStatus(Enum):
    """Outcome of a single case.

    NOT_RUN marks cases whose fixture could not be constructed or whose
    fixture setup failed, so their shared precondition was never met.
    """

    PASSED = "passed"
    FAILED = "failed"
    NOT_RUN = "not_run"


@dataclass(frozen=True)
class CaseResult:
    """Outcome of one case invocation."""

    case: Case
    status: CaseStatus
    error: BaseException | None = None
    duration_seconds: float = 0.0

    def __post_init__(self) -> None:
        """Validate result invariants on creation."""
        if self.duration_seconds < 0:
            raise ValueError(
                f"duration_seconds must be non-negative, got {self.duration_seconds}"
            )
        if self.status == CaseStatus.FAILED and self.error is None:
            raise ValueError("a failed case must carry its error")


@dataclass(frozen=True)
class FixtureResult:
    """Outcome of one fixture pass.

    ``error`` holds a fixture-level failure: construction, fixture setup
    or fixture teardown. Case failures live on the case results.
    """

    fixture_type: type
    case_results: tuple[CaseResult, ...]
    error: BaseException | None = None

    def count(self, status: CaseStatus) -> int:
        return sum(1 for result in self.case_results if result.status == status)


@dataclass(frozen=True)
class RunResult:
    """Summary of a full engine run."""

    fixture_results: tuple[FixtureResult, ...]
    started_at: datetime
    finished_at: datetime

    def __post_init__(self) -> None:
        """Validate run invariants on creation."""
        if self.finished_at < self.started_at:
            raise ValueError(
                f"finished_at ({self.finished_at}) cannot be before "
                f"started_at ({self.started_at})"
            )

    @property
    def case_results(self) -> tuple[CaseResult, ...]:
        return tuple(
            result
            for fixture_result in self.fixture_results
            for result in fixture_result.case_results
        )

    @property
    def total(self) -> int:
        return len(self.case_results)

    @property
    def passed(self) -> int:
        return sum(f.count(CaseStatus.PASSED) for f in self.fixture_results)

    @property
    def failed(self) -> int:
        return sum(f.count(CaseStatus.FAILED) for f in self.fixture_results)

    @property
    def not_run(self) -> int:
        return sum(f.count(CaseStatus.NOT_RUN) for f in self.fixture_results)

    @property
    def success(self) -> bool:
        """True when every case passed and no fixture-level error occurred."""
        return (
            self.passed == self.total
            and all(f.error is None for f in self.fixture_results)
        )
