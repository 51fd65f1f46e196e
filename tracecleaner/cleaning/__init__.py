from .frames import (
    FrameContext,
    FrameActivityTally,
    get_event_frame,
    select_dominant_context,
)
from .markers import StartMarkerScan, locate_start_markers
from .rewriter import make_start_marker, rewrite_trace
from .cleaner import TraceCleaner, CleanResult

__all__ = [
    "FrameContext",
    "FrameActivityTally",
    "get_event_frame",
    "select_dominant_context",
    "StartMarkerScan",
    "locate_start_markers",
    "make_start_marker",
    "rewrite_trace",
    "TraceCleaner",
    "CleanResult",
]
