"""Invocation adapters for calling fixture methods.

Implementations:
- DispatchTable (direct calls bound at registration, failures unwrapped)
- ReflectiveInvoker (name lookup, failures wrapped in InvocationTargetError)
"""

from .dispatch import DispatchTable
from .reflective import ReflectiveInvoker

__all__ = ["DispatchTable", "ReflectiveInvoker"]
