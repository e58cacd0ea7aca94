"""Behavior chains and the built-in setup/teardown behaviors.

A chain composes behaviors around an innermost action the way
middleware composes around a request handler: each behavior receives a
``next_`` callable that runs the rest of the chain.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from .invocation import invoke_all
from .models import CaseExecution, Fixture, Trait
from .ports import CaseBehavior, FixtureBehavior

logger = logging.getLogger(__name__)

C = TypeVar("C")


class BehaviorChain(Generic[C]):
    """Ordered composition of behaviors around an action.

    The first behavior is outermost. Behaviors that never call ``next_``
    short-circuit everything inside them.
    """

    def __init__(self, behaviors: Iterable[FixtureBehavior | CaseBehavior]):
        self.behaviors = tuple(behaviors)

    def execute(self, context: C, action: Callable[[], None]) -> None:
        """Run the chain for ``context``, ending in ``action``."""
        self._step(0, context, action)

    def _step(self, index: int, context: C, action: Callable[[], None]) -> None:
        if index == len(self.behaviors):
            action()
            return
        self.behaviors[index].execute(
            context, lambda: self._step(index + 1, context, action)
        )


class FixtureSetUpTearDown(FixtureBehavior):
    """Runs fixture setup methods before, and fixture teardown after, all cases.

    With ``always_run_teardown`` the teardown methods run even when the
    wrapped cases raise, as long as setup completed, and the wrapped
    failure is the one that propagates. Without it, a failure in the
    wrapped action skips teardown.
    """

    def __init__(self, always_run_teardown: bool = True):
        self.always_run_teardown = always_run_teardown

    def execute(self, fixture: Fixture, next_: Callable[[], None]) -> None:
        invoke_all(fixture.substrate, fixture.type, fixture.instance, Trait.IS_FIXTURE_SETUP)
        _run_then_tear_down(
            next_,
            lambda: invoke_all(
                fixture.substrate, fixture.type, fixture.instance, Trait.IS_FIXTURE_TEARDOWN
            ),
            self.always_run_teardown,
        )


class SetUpTearDown(CaseBehavior):
    """Runs setup methods before, and teardown methods after, each case.

    Teardown follows the same ``always_run_teardown`` rule as
    FixtureSetUpTearDown.
    """

    def __init__(self, always_run_teardown: bool = True):
        self.always_run_teardown = always_run_teardown

    def execute(self, execution: CaseExecution, next_: Callable[[], None]) -> None:
        fixture = execution.fixture
        invoke_all(fixture.substrate, fixture.type, fixture.instance, Trait.IS_SETUP)
        _run_then_tear_down(
            next_,
            lambda: invoke_all(
                fixture.substrate, fixture.type, fixture.instance, Trait.IS_TEARDOWN
            ),
            self.always_run_teardown,
        )


def _run_then_tear_down(
    next_: Callable[[], None],
    tear_down: Callable[[], None],
    always_run_teardown: bool,
) -> None:
    """Run ``next_`` then ``tear_down``.

    When ``next_`` fails and teardown is forced, a teardown failure is
    logged and the original failure is re-raised. A teardown failure
    propagates only when ``next_`` succeeded.
    """
    if not always_run_teardown:
        next_()
        tear_down()
        return
    try:
        next_()
    except BaseException:
        try:
            tear_down()
        except Exception as e:
            logger.error(
                f"Teardown failed after an earlier failure: {type(e).__name__}: {e}",
                exc_info=True,
            )
        raise
    tear_down()
