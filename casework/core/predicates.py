"""Trait predicates used to build conventions.

Each helper returns a pure boolean test bound to a metadata port.
"""

from collections.abc import Callable

from .models import MethodRef, Trait
from .ports import MetadataPort

TypePredicate = Callable[[type], bool]
MethodPredicate = Callable[[MethodRef], bool]


def type_has_or_inherits(metadata: MetadataPort, trait: Trait) -> TypePredicate:
    """Type carries ``trait`` itself or through any ancestor."""

    def predicate(cls: type) -> bool:
        return metadata.has_trait(cls, trait)

    return predicate


def method_has_or_inherits(metadata: MetadataPort, *traits: Trait) -> MethodPredicate:
    """Method carries any of ``traits``, including via overridden bases."""

    def predicate(method: MethodRef) -> bool:
        return any(metadata.method_has_trait(method, trait) for trait in traits)

    return predicate


def method_has(metadata: MetadataPort, trait: Trait) -> MethodPredicate:
    """Method's own definition carries ``trait``."""

    def predicate(method: MethodRef) -> bool:
        return metadata.method_has_trait(method, trait, inherited=False)

    return predicate

