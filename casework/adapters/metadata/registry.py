"""Trait registry metadata adapter.

Implements MetadataPort by reading marker tags once per type, walking
the type's MRO and caching the union of what it finds. Queries after
registration are set-membership tests.
"""

import inspect
import logging
from typing import Any

from casework.core.markers import declared_case_parameters, declared_traits
from casework.core.models import MethodRef, Trait
from casework.core.ports import MetadataPort

logger = logging.getLogger(__name__)

_NOT_INHERITED = frozenset({Trait.HAS_CASE_PARAMETERS})


class TraitRegistry(MetadataPort):
    """Cached trait lookups for registered types.

    Types are registered eagerly through the constructor or ``register``,
    or lazily the first time they are queried.
    """

    def __init__(self, types: list[type] | None = None):
        """Initialize the registry.

        Args:
            types: Types to resolve up front (optional).
        """
        self._type_traits: dict[type, frozenset[Trait]] = {}
        self._methods: dict[type, tuple[MethodRef, ...]] = {}
        self._method_traits: dict[tuple[type, str], frozenset[Trait]] = {}
        for cls in types or []:
            self.register(cls)

    def register(self, cls: type) -> None:
        """Resolve and cache the traits of ``cls`` and its methods."""
        if cls in self._type_traits:
            return

        type_traits: set[Trait] = set()
        for klass in cls.__mro__:
            type_traits |= declared_traits(klass)

        methods: list[MethodRef] = []
        seen: set[str] = set()
        for klass in cls.__mro__:
            if klass is object:
                continue
            for name, member in vars(klass).items():
                if name.startswith("_"):
                    continue
                key = (cls, name)
                if name in seen:
                    # Overridden base definition: its traits are inherited,
                    # except case parameters, which belong to the definition.
                    if key in self._method_traits and inspect.isfunction(member):
                        self._method_traits[key] |= (
                            declared_traits(member) - _NOT_INHERITED
                        )
                    continue
                # Non-function overrides shadow base methods of the same name.
                seen.add(name)
                if not inspect.isfunction(member):
                    continue
                methods.append(MethodRef(owner=cls, name=name, function=member))
                self._method_traits[key] = declared_traits(member)

        self._type_traits[cls] = frozenset(type_traits)
        self._methods[cls] = tuple(methods)
        logger.debug(
            f"Registered {cls.__qualname__}: traits={sorted(t.value for t in type_traits)}, "
            f"methods={len(methods)}"
        )

    def declared_methods(self, cls: type) -> list[MethodRef]:
        self.register(cls)
        return list(self._methods[cls])

    def has_trait(self, cls: type, trait: Trait) -> bool:
        self.register(cls)
        return trait in self._type_traits[cls]

    def method_has_trait(
        self, method: MethodRef, trait: Trait, inherited: bool = True
    ) -> bool:
        if not inherited:
            return trait in declared_traits(method.function)
        self.register(method.owner)
        traits = self._method_traits.get((method.owner, method.name))
        if traits is None:
            return trait in declared_traits(method.function)
        return trait in traits

    def case_parameters(self, method: MethodRef) -> tuple[tuple[Any, ...], ...]:
        return declared_case_parameters(method.function)
