"""Exceptions raised while loading and cleaning traces."""

from typing import Any


class TraceCleanerError(Exception):
    """Base class for all trace cleaner errors."""


class MalformedEnvelopeError(TraceCleanerError, ValueError):
    """The input has no accessible ``traceEvents`` sequence."""


class NoFrameDataError(TraceCleanerError):
    """
    No event in the trace carried frame information.

    The best-effort cleaning result is attached as ``result`` so callers
    that accept frameless traces can still use it.
    """

    def __init__(self, message: str, result: Any = None):
        super().__init__(message)
        self.result = result
