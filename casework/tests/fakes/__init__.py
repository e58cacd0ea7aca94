"""Fake implementations of core ports for testing.

These in-memory implementations allow core engine logic to be tested
without the real adapters:

- RecordingInvoker: Calls methods directly and records every invocation
- FakeResultListener: Captured case and fixture outcomes for assertion
"""

from .invocation import RecordingInvoker
from .listener import FakeResultListener

__all__ = [
    "FakeResultListener",
    "RecordingInvoker",
]
