"""Exception types raised by the Casework execution engine.

Case and fixture failures are never converted into these types: whatever
the code under test raises is what the caller sees. These classes only
cover the engine's own failure modes and the substrate's invocation
wrapper.
"""


class CaseworkError(Exception):
    """Base class for errors raised by the engine itself."""


class ConventionError(CaseworkError):
    """A convention was configured with an unusable component."""


class InvocationError(CaseworkError):
    """The invocation substrate could not reach the target method.

    Raised for lookup problems (missing attribute, unbound method), never
    for failures raised by the invoked code.
    """


class InvocationTargetError(CaseworkError):
    """Wrapper for a failure raised by code behind a dynamic-call boundary.

    The original exception is kept on ``inner``; the engine unwraps it
    before propagating so callers observe the root cause.
    """

    def __init__(self, inner: BaseException):
        super().__init__(f"Invoked method raised {type(inner).__name__}: {inner}")
        self.inner = inner


class AssertionFailure(AssertionError):
    """Raised by :func:`casework.core.markers.fail`."""
