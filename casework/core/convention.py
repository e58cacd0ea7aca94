"""Conventions: how fixtures and cases are found, ordered and wrapped.

A Convention is the single configuration object the engine accepts.
``default_convention`` builds the one this project ships:

- Fixtures are types carrying IS_FIXTURE, directly or inherited.
- Cases are methods carrying IS_CASE or HAS_CASE_PARAMETERS, unless the
  method itself carries IS_EXPLICITLY_SKIPPED.
- Cases are ordered by ordinal name comparison.
- Fixture setup/teardown wraps each fixture; setup/teardown wraps each case.
- Arguments come from ``case_params`` declarations.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .behaviors import FixtureSetUpTearDown, SetUpTearDown
from .errors import ConventionError
from .models import MethodRef, Trait
from .ordering import CaseComparator, compare_case_names
from .parameters import FromCaseParameters
from .ports import CaseBehavior, FixtureBehavior, MetadataPort, ParameterSource
from .predicates import (
    MethodPredicate,
    TypePredicate,
    method_has,
    method_has_or_inherits,
    type_has_or_inherits,
)


@dataclass(frozen=True)
class Convention:
    """Discovery, ordering and wrapping rules for one engine."""

    fixture_predicate: TypePredicate
    case_predicate: MethodPredicate
    case_exclusion: MethodPredicate
    case_comparator: CaseComparator = compare_case_names
    fixture_behaviors: tuple[FixtureBehavior, ...] = field(default_factory=tuple)
    case_behaviors: tuple[CaseBehavior, ...] = field(default_factory=tuple)
    parameter_sources: tuple[ParameterSource, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate convention components on creation."""
        for name in ("fixture_predicate", "case_predicate", "case_exclusion", "case_comparator"):
            if not callable(getattr(self, name)):
                raise ConventionError(f"{name} must be callable")

        # Accept any iterable but store tuples so the convention stays immutable.
        for name, port in (
            ("fixture_behaviors", FixtureBehavior),
            ("case_behaviors", CaseBehavior),
            ("parameter_sources", ParameterSource),
        ):
            components = tuple(getattr(self, name))
            for component in components:
                if not isinstance(component, port):
                    raise ConventionError(
                        f"{name} entries must implement {port.__name__}, "
                        f"got {type(component).__name__}"
                    )
            object.__setattr__(self, name, components)

    def is_fixture(self, cls: type) -> bool:
        return bool(self.fixture_predicate(cls))

    def is_case(self, method: MethodRef) -> bool:
        return bool(self.case_predicate(method)) and not self.case_exclusion(method)

    def select_fixtures(self, candidates: Iterable[type]) -> list[type]:
        """Fixture types from the candidate pool, in pool order, without repeats."""
        selected: list[type] = []
        for candidate in candidates:
            if candidate not in selected and self.is_fixture(candidate):
                selected.append(candidate)
        return selected

    def select_cases(self, methods: Iterable[MethodRef]) -> list[MethodRef]:
        """Case methods among ``methods``, in enumeration order."""
        return [method for method in methods if self.is_case(method)]


def default_convention(
    metadata: MetadataPort, always_run_teardown: bool = True
) -> Convention:
    """Build the standard attribute-style convention."""
    return Convention(
        fixture_predicate=type_has_or_inherits(metadata, Trait.IS_FIXTURE),
        case_predicate=method_has_or_inherits(
            metadata, Trait.IS_CASE, Trait.HAS_CASE_PARAMETERS
        ),
        case_exclusion=method_has(metadata, Trait.IS_EXPLICITLY_SKIPPED),
        case_comparator=compare_case_names,
        fixture_behaviors=(FixtureSetUpTearDown(always_run_teardown),),
        case_behaviors=(SetUpTearDown(always_run_teardown),),
        parameter_sources=(FromCaseParameters(metadata),),
    )
