"""
Trace Cleaner - normalize start markers in Chrome DevTools trace logs.

Capture tools emit zero, one or several TracingStartedIn* events across
recording threads. Cleaning replaces them with a single
TracingStartedInPage event bound to the most active (pid, tid, frame).
"""

from tracecleaner.cleaning import TraceCleaner, CleanResult
from tracecleaner.io import coerce_envelope, load_trace_file, save_trace_file
from tracecleaner.schema import TraceEvent, TraceEnvelope

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "TraceCleaner",
    "CleanResult",
    "coerce_envelope",
    "load_trace_file",
    "save_trace_file",
    "TraceEvent",
    "TraceEnvelope",
]
