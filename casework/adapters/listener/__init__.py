"""Result listener adapters for observing case and fixture outcomes."""

from .log import LoggingResultListener

__all__ = ["LoggingResultListener"]
