"""Trait markers for fixture classes and case methods.

Markers only tag their target; they carry no behavior. The trait
registry reads the tags back when it resolves a type.

Example:

    @fixture
    class ParserTests:
        @fixture_setup
        def open_corpus(self): ...

        @case
        def parses_empty_input(self): ...

        @case_params(1, "one")
        @case_params(2, "two")
        def parses_number(self, value, word): ...
"""

from collections.abc import Callable
from typing import Any, TypeVar

from .errors import AssertionFailure
from .models import Trait

T = TypeVar("T")

TRAITS_ATTR = "__casework_traits__"
CASE_PARAMETERS_ATTR = "__casework_case_parameters__"
EXPLICIT_REASON_ATTR = "__casework_explicit_reason__"


def declared_traits(target: Any) -> frozenset[Trait]:
    """Traits tagged directly on a class or function (not inherited)."""
    try:
        return vars(target).get(TRAITS_ATTR, frozenset())
    except TypeError:
        return frozenset()


def declared_case_parameters(target: Any) -> tuple[tuple[Any, ...], ...]:
    """Argument tuples declared with ``case_params``, in declaration order."""
    try:
        return vars(target).get(CASE_PARAMETERS_ATTR, ())
    except TypeError:
        return ()


def _tag(target: T, trait: Trait) -> T:
    setattr(target, TRAITS_ATTR, declared_traits(target) | {trait})
    return target


def fixture(cls: type[T]) -> type[T]:
    """Mark a class as a fixture. Subclasses inherit the trait."""
    return _tag(cls, Trait.IS_FIXTURE)


def case(func: Callable[..., Any]) -> Callable[..., Any]:
    """Mark a method as a case run once with no arguments."""
    return _tag(func, Trait.IS_CASE)


def case_params(*arguments: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Declare one literal argument tuple for a data-driven case.

    May be stacked; tuples are kept top to bottom as written.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        # Decorators apply bottom-up, so prepend to keep source order.
        setattr(func, CASE_PARAMETERS_ATTR, (tuple(arguments),) + declared_case_parameters(func))
        return _tag(func, Trait.HAS_CASE_PARAMETERS)

    return decorator


def explicit(
    func_or_reason: Callable[..., Any] | str | None = None,
    *,
    description: str | None = None,
) -> Any:
    """Exclude a case from normal runs.

    Three forms are accepted:

    - ``@explicit`` applied bare: the decorated function is the argument.
    - ``@explicit("slow")``: a string argument is the reason.
    - ``@explicit(description="slow")``: the reason as a keyword.

    Raises:
        TypeError: If the positional argument is neither a function nor a string.
    """
    if callable(func_or_reason):
        return _mark_explicit(func_or_reason, description)
    if func_or_reason is not None and not isinstance(func_or_reason, str):
        raise TypeError(
            f"explicit() takes a function or a reason string, "
            f"not {type(func_or_reason).__name__}"
        )

    reason = func_or_reason if func_or_reason is not None else description

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        return _mark_explicit(func, reason)

    return decorator


def _mark_explicit(func: Callable[..., Any], reason: str | None) -> Callable[..., Any]:
    setattr(func, EXPLICIT_REASON_ATTR, reason)
    return _tag(func, Trait.IS_EXPLICITLY_SKIPPED)


def explicit_reason(func: Callable[..., Any]) -> str | None:
    """Description given to ``explicit``, if any."""
    return vars(func).get(EXPLICIT_REASON_ATTR)


def fixture_setup(func: Callable[..., Any]) -> Callable[..., Any]:
    """Run once on the fixture instance before its first case."""
    return _tag(func, Trait.IS_FIXTURE_SETUP)


def fixture_teardown(func: Callable[..., Any]) -> Callable[..., Any]:
    """Run once on the fixture instance after its last case."""
    return _tag(func, Trait.IS_FIXTURE_TEARDOWN)


def setup(func: Callable[..., Any]) -> Callable[..., Any]:
    """Run before every individual case invocation."""
    return _tag(func, Trait.IS_SETUP)


def teardown(func: Callable[..., Any]) -> Callable[..., Any]:
    """Run after every individual case invocation."""
    return _tag(func, Trait.IS_TEARDOWN)


def fail(message: str) -> None:
    """Fail the current case unconditionally."""
    raise AssertionFailure(message)
