"""Method invocation with failure-cause preservation."""

import logging
from typing import Any

from .errors import InvocationTargetError
from .models import MethodRef, Trait
from .ports import InvocationPort, Substrate

logger = logging.getLogger(__name__)


def invoke_preserving_cause(
    invoker: InvocationPort,
    method: MethodRef,
    instance: Any,
    arguments: tuple[Any, ...] = (),
) -> Any:
    """Invoke a method, re-raising the original failure if it was wrapped.

    An InvocationTargetError from the invoker is discarded and its inner
    exception raised as-is, so the caller sees the same object, type and
    message that the invoked code raised. Any other exception propagates
    unchanged.
    """
    try:
        return invoker.invoke(method, instance, arguments)
    except InvocationTargetError as wrapper:
        cause = wrapper.inner
    # Raised outside the except block so the wrapper is not chained as context.
    raise cause


def invoke_all(substrate: Substrate, cls: type, instance: Any, trait: Trait) -> None:
    """Call every method of ``cls`` carrying ``trait``, without arguments.

    Methods run in the order the metadata port enumerates them. The first
    failure stops the loop and propagates.
    """
    for method in substrate.metadata.declared_methods(cls):
        if substrate.metadata.method_has_trait(method, trait):
            logger.debug(f"Invoking {trait.value} method {method.qualified_name}")
            invoke_preserving_cause(substrate.invoker, method, instance)
