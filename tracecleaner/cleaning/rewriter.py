"""
Trace rewriting.

Replaces all start markers of a trace with a single synthesized
TracingStartedInPage event placed at the front.
"""

from tracecleaner.schema import (
    TraceEvent,
    TraceEnvelope,
    EventPhase,
    InstantScope,
    TRACING_STARTED_IN_PAGE,
    DEVTOOLS_TIMELINE_CATEGORY,
)

from .frames import FrameContext
from .markers import StartMarkerScan


def make_start_marker(context: FrameContext | None, timestamp: int | float) -> TraceEvent:
    """Build the canonical page-scoped start marker for a context."""
    data = {}
    if context is not None:
        data["page"] = context.frame

    return TraceEvent(
        pid=context.process_id if context else None,
        tid=context.thread_id if context else None,
        ts=timestamp,
        ph=EventPhase.INSTANT.value,
        cat=DEVTOOLS_TIMELINE_CATEGORY,
        name=TRACING_STARTED_IN_PAGE,
        s=InstantScope.THREAD.value,
        args={"data": data},
    )


def rewrite_trace(
    envelope: TraceEnvelope,
    scan: StartMarkerScan,
    context: FrameContext | None,
) -> TraceEnvelope:
    """
    Drop the scanned markers and prepend one synthesized marker.

    Returns a new envelope; the input envelope and its event list are left
    as they were.
    """
    removed = set(scan.indices)
    kept = [
        event for i, event in enumerate(envelope.traceEvents)
        if i not in removed
    ]

    marker = make_start_marker(context, scan.captured_timestamp)
    return envelope.with_events([marker] + kept)
