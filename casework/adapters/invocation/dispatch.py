"""Dispatch-table invocation adapter.

Implements InvocationPort with a mapping from MethodRef to a directly
callable function, bound when the owning type is first registered.
Failures raised by the called code propagate unwrapped.
"""

import logging
from collections.abc import Callable
from typing import Any

from casework.core.errors import InvocationError
from casework.core.models import MethodRef
from casework.core.ports import InvocationPort, MetadataPort

logger = logging.getLogger(__name__)


class DispatchTable(InvocationPort):
    """Direct calls through functions bound at registration time."""

    def __init__(self, metadata: MetadataPort):
        """Initialize an empty dispatch table.

        Args:
            metadata: Used to enumerate a type's methods when it is bound.
        """
        self.metadata = metadata
        self._table: dict[MethodRef, Callable[..., Any]] = {}
        self._bound_types: set[type] = set()

    def bind_type(self, cls: type) -> None:
        """Bind every declared method of ``cls``."""
        if cls in self._bound_types:
            return
        for method in self.metadata.declared_methods(cls):
            self._table[method] = method.function
        self._bound_types.add(cls)
        logger.debug(f"Bound {cls.__qualname__} into dispatch table")

    def invoke(
        self, method: MethodRef, instance: Any, arguments: tuple[Any, ...] = ()
    ) -> Any:
        self.bind_type(method.owner)
        function = self._table.get(method)
        if function is None:
            raise InvocationError(
                f"No dispatch entry for {method.qualified_name}; "
                f"it is not a declared method of {method.owner.__qualname__}"
            )
        return function(instance, *arguments)
