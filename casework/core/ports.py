"""Port interfaces for the Casework execution engine.

These abstract base classes define the boundaries between core
engine logic and the environment it runs in. Implementations live in
the adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - MetadataPort: Enumerate methods and test traits
   - InvocationPort: Call a method on an instance
   - ResultListenerPort: Observe case and fixture outcomes

2. **Convention Ports** (pluggable strategies the engine composes)
   - ParameterSource: Expand a case method into argument tuples
   - FixtureBehavior: Wrap every case of one fixture
   - CaseBehavior: Wrap one case invocation
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .models import (
    Case,
    CaseExecution,
    CaseResult,
    Fixture,
    FixtureResult,
    MethodRef,
    Trait,
)


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class MetadataPort(ABC):
    """Port for querying static metadata about candidate types.

    Implementations must resolve inheritance: a trait carried by a base
    class, or by a base definition of an overridden method, counts as
    carried by the subclass unless the caller asks for direct traits only.
    """

    @abstractmethod
    def declared_methods(self, cls: type) -> list[MethodRef]:
        """Enumerate the public instance methods of a type.

        Args:
            cls: Candidate type.

        Returns:
            MethodRef objects owned by ``cls``. The type's own methods come
            first in definition order, followed by inherited ones.
        """

    @abstractmethod
    def has_trait(self, cls: type, trait: Trait) -> bool:
        """Does the type carry the trait, directly or via any ancestor?"""

    @abstractmethod
    def method_has_trait(
        self, method: MethodRef, trait: Trait, inherited: bool = True
    ) -> bool:
        """Does the method carry the trait?

        Args:
            method: Method enumerated by declared_methods().
            trait: Trait to test for.
            inherited: When False, only the method's own definition is
                considered, not overridden base definitions.
        """

    @abstractmethod
    def case_parameters(self, method: MethodRef) -> tuple[tuple[Any, ...], ...]:
        """Literal argument tuples declared on the method.

        Returns:
            Tuples in declaration order. Empty when none are declared.
        """


class InvocationPort(ABC):
    """Port for invoking a method on a fixture instance.

    Implementations either return the method's result or raise. Adapters
    that call through a dynamic-dispatch boundary may wrap failures raised
    by the invoked code in InvocationTargetError; the core unwraps them.
    """

    @abstractmethod
    def invoke(
        self, method: MethodRef, instance: Any, arguments: tuple[Any, ...] = ()
    ) -> Any:
        """Call ``method`` on ``instance`` synchronously.

        Raises:
            InvocationError: If the method cannot be reached.
            InvocationTargetError: If a wrapping adapter caught a failure
                raised by the invoked code.
            Exception: Any failure raised by the invoked code, for adapters
                that do not wrap.
        """


class ResultListenerPort(ABC):
    """Port for observing execution as it happens."""

    @abstractmethod
    def case_started(self, case: Case) -> None:
        """Called before a case's behavior chain runs."""

    @abstractmethod
    def case_finished(self, result: CaseResult) -> None:
        """Called once per case with its outcome, including NOT_RUN cases."""

    @abstractmethod
    def fixture_finished(self, result: FixtureResult) -> None:
        """Called after a fixture pass completes, successfully or not."""


@dataclass(frozen=True)
class Substrate:
    """The metadata and invocation ports a run executes against."""

    metadata: MetadataPort
    invoker: InvocationPort


# ============================================================================
# CONVENTION PORTS (Strategies composed by the engine)
# ============================================================================


class ParameterSource(ABC):
    """Strategy that expands a case method into argument tuples.

    Must be pure: the same method always yields the same tuples, and each
    call returns a fresh sequence.
    """

    @abstractmethod
    def get_parameters(self, method: MethodRef) -> Iterable[tuple[Any, ...]]:
        """Argument tuples for ``method``; empty when it declares none."""


class FixtureBehavior(ABC):
    """Wrapping logic around all cases of one fixture."""

    @abstractmethod
    def execute(self, fixture: Fixture, next_: Callable[[], None]) -> None:
        """Run this behavior, calling ``next_`` to continue the chain."""


class CaseBehavior(ABC):
    """Wrapping logic around one case invocation."""

    @abstractmethod
    def execute(self, execution: CaseExecution, next_: Callable[[], None]) -> None:
        """Run this behavior, calling ``next_`` to continue the chain."""
