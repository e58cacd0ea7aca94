"""Parameter sources and case expansion.

A case method becomes one Case per argument tuple its parameter sources
produce, or a single argument-less Case when they produce none.
"""

from collections.abc import Iterable
from itertools import chain
from typing import Any

from .models import Case, MethodRef
from .ports import MetadataPort, ParameterSource


class FromCaseParameters(ParameterSource):
    """Yields the literal tuples declared with ``case_params``."""

    def __init__(self, metadata: MetadataPort):
        self.metadata = metadata

    def get_parameters(self, method: MethodRef) -> Iterable[tuple[Any, ...]]:
        return tuple(self.metadata.case_parameters(method))


class ParameterResolver:
    """Concatenates the output of every registered parameter source.

    Sources are consulted in registration order.
    """

    def __init__(self, sources: Iterable[ParameterSource]):
        self.sources = tuple(sources)

    def resolve(self, method: MethodRef) -> list[tuple[Any, ...]]:
        """All argument tuples for ``method``, consumed eagerly."""
        return [
            tuple(arguments)
            for arguments in chain.from_iterable(
                source.get_parameters(method) for source in self.sources
            )
        ]

    def expand(self, method: MethodRef) -> list[Case]:
        """Cases for ``method`` in expansion order."""
        parameter_sets = self.resolve(method)
        if not parameter_sets:
            return [Case(method=method)]
        return [Case(method=method, arguments=arguments) for arguments in parameter_sets]
