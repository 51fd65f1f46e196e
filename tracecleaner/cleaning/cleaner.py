"""
Trace cleaner.

Normalizes a trace so that it holds exactly one canonical start marker,
and provides summary and validation helpers built on the same analysis.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from tracecleaner.schema import TraceEnvelope, NoFrameDataError

from .frames import FrameActivityTally, FrameContext, select_dominant_context
from .markers import locate_start_markers
from .rewriter import rewrite_trace


logger = logging.getLogger(__name__)


@dataclass
class CleanResult:
    """Outcome of cleaning one trace."""
    trace: TraceEnvelope
    dominant_context: FrameContext | None = None
    markers_removed: int = 0
    issues: list[str] = field(default_factory=list)


class TraceCleaner:
    """Utilities for cleaning and inspecting trace event logs."""

    @staticmethod
    def clean(envelope: TraceEnvelope, strict: bool = False) -> CleanResult:
        """
        Clean a trace by:
        - Removing every TracingStartedIn* event
        - Prepending one TracingStartedInPage event on the most active
          (pid, tid, frame) context, stamped with the first marker's ts

        If no event carries frame data the marker is still emitted, without
        pid/tid/page. That is reported in ``issues``, or raised as
        NoFrameDataError when ``strict`` is set.
        """
        events = envelope.traceEvents

        tally = FrameActivityTally.from_events(events)
        context = select_dominant_context(tally)
        scan = locate_start_markers(events)

        if not scan.found:
            logger.debug("No start marker found, using ts=%s", scan.captured_timestamp)

        result = CleanResult(
            trace=rewrite_trace(envelope, scan, context),
            dominant_context=context,
            markers_removed=len(scan.indices),
        )

        logger.debug(
            "Removed %d start marker(s) from %d events, dominant context %s",
            result.markers_removed, len(events), context,
        )

        if context is None:
            message = "No event carries frame data; start marker has no pid/tid/page"
            if strict:
                raise NoFrameDataError(message, result=result)
            logger.warning(message)
            result.issues.append(message)

        return result

    @staticmethod
    def get_summary(envelope: TraceEnvelope) -> dict[str, Any]:
        """Get a human-readable summary of the trace."""
        events = envelope.traceEvents
        tally = FrameActivityTally.from_events(events)
        context = select_dominant_context(tally)
        scan = locate_start_markers(events)

        return {
            "total_events": len(events),
            "start_markers": len(scan.indices),
            "start_marker_names": sorted({events[i].name for i in scan.indices}),
            "start_timestamp": scan.captured_timestamp,
            "frame_contexts": len(tally.order),
            "dominant_pid": context.process_id if context else None,
            "dominant_tid": context.thread_id if context else None,
            "dominant_frame": context.frame if context else None,
            "dominant_count": tally.count(context) if context else 0,
        }

    @staticmethod
    def validate(envelope: TraceEnvelope) -> list[str]:
        """
        Check a trace for conditions that cleaning will have to repair.

        Returns:
            List of issue messages (empty if the trace is already clean)
        """
        issues = []
        events = envelope.traceEvents

        if not events:
            issues.append("No events in trace")
            return issues

        scan = locate_start_markers(events)
        if not scan.found:
            issues.append("No TracingStartedIn* event")
        elif len(scan.indices) > 1:
            issues.append(f"{len(scan.indices)} TracingStartedIn* events (expected 1)")
        elif scan.indices[0] != 0:
            issues.append(f"Start marker at index {scan.indices[0]} instead of 0")

        if FrameActivityTally.from_events(events).is_empty():
            issues.append("No event carries frame data")

        return issues
