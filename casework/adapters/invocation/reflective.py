"""Reflective invocation adapter.

Implements InvocationPort by looking the method up by name on the
instance. Like any dynamic-call boundary, it wraps failures raised by
the invoked code in InvocationTargetError; the core unwraps them.
"""

from typing import Any

from casework.core.errors import InvocationError, InvocationTargetError
from casework.core.models import MethodRef
from casework.core.ports import InvocationPort


class ReflectiveInvoker(InvocationPort):
    """Name-based invocation with wrapped failures."""

    def invoke(
        self, method: MethodRef, instance: Any, arguments: tuple[Any, ...] = ()
    ) -> Any:
        try:
            target = getattr(instance, method.name)
        except AttributeError as e:
            raise InvocationError(
                f"{type(instance).__qualname__} has no method {method.name!r}"
            ) from e

        if not callable(target):
            raise InvocationError(
                f"{type(instance).__qualname__}.{method.name} is not callable"
            )

        try:
            return target(*arguments)
        except Exception as e:
            raise InvocationTargetError(e) from e
