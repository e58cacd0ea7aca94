"""Core engine logic for the Casework test-execution engine.

This package contains zero external dependencies and represents
the pure execution pipeline. Metadata and invocation substrates are
handled by the adapters package.
"""

from .convention import Convention, default_convention
from .engine import ExecutionEngine
from .errors import (
    AssertionFailure,
    CaseworkError,
    ConventionError,
    InvocationError,
    InvocationTargetError,
)
from .models import (
    Case,
    CaseExecution,
    CaseResult,
    CaseStatus,
    Fixture,
    FixturePlan,
    FixtureResult,
    MethodRef,
    RunResult,
    Trait,
)

__all__ = [
    "AssertionFailure",
    "Case",
    "CaseExecution",
    "CaseResult",
    "CaseStatus",
    "CaseworkError",
    "Convention",
    "ConventionError",
    "ExecutionEngine",
    "Fixture",
    "FixturePlan",
    "FixtureResult",
    "InvocationError",
    "InvocationTargetError",
    "MethodRef",
    "RunResult",
    "Trait",
    "default_convention",
]
