from .trace_events import (
    TraceEvent,
    TraceEnvelope,
    EventPhase,
    InstantScope,
    TRACE_START_PREFIX,
    TRACING_STARTED_IN_PAGE,
    TRACING_STARTED_IN_BROWSER,
    DEVTOOLS_TIMELINE_CATEGORY,
)
from .errors import TraceCleanerError, MalformedEnvelopeError, NoFrameDataError

__all__ = [
    "TraceEvent",
    "TraceEnvelope",
    "EventPhase",
    "InstantScope",
    "TRACE_START_PREFIX",
    "TRACING_STARTED_IN_PAGE",
    "TRACING_STARTED_IN_BROWSER",
    "DEVTOOLS_TIMELINE_CATEGORY",
    "TraceCleanerError",
    "MalformedEnvelopeError",
    "NoFrameDataError",
]
