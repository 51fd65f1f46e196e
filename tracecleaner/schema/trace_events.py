"""
Pydantic models for Chrome DevTools trace event logs.

A trace is an envelope holding an ordered ``traceEvents`` list. Events
and the envelope both keep unknown keys so that a cleaned trace can be
written back without losing fields this package does not interpret.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


TRACE_START_PREFIX = "TracingStartedIn"
TRACING_STARTED_IN_PAGE = "TracingStartedInPage"
TRACING_STARTED_IN_BROWSER = "TracingStartedInBrowser"
DEVTOOLS_TIMELINE_CATEGORY = "disabled-by-default-devtools.timeline"


class EventPhase(str, Enum):
    """Trace event phase codes (the ``ph`` field)."""
    INSTANT = "I"
    INSTANT_LEGACY = "i"
    BEGIN = "B"
    END = "E"
    COMPLETE = "X"
    COUNTER = "C"
    METADATA = "M"


class InstantScope(str, Enum):
    """Scope of an instant event (the ``s`` field)."""
    GLOBAL = "g"
    PROCESS = "p"
    THREAD = "t"


class TraceEvent(BaseModel):
    """
    A single trace event.

    Attribute names are descriptive; the Chrome trace keys (pid, tid, ts,
    ph, cat, s) are used as aliases on the wire.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    process_id: int | str | None = Field(default=None, alias="pid")
    thread_id: int | str | None = Field(default=None, alias="tid")
    timestamp: int | float | None = Field(default=None, alias="ts")
    phase: str | None = Field(default=None, alias="ph")
    category: str | None = Field(default=None, alias="cat")
    name: str = ""
    scope: str | None = Field(default=None, alias="s")
    args: dict[str, Any] | None = None

    def is_start_marker(self) -> bool:
        """Check if this event is a TracingStartedIn* marker."""
        return self.name.startswith(TRACE_START_PREFIX)

    def to_json(self) -> dict[str, Any]:
        """Serialize using the Chrome trace keys, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class TraceEnvelope(BaseModel):
    """
    The outer trace structure.

    Only ``traceEvents`` is interpreted; fields such as ``metadata`` are
    carried through untouched.
    """
    model_config = ConfigDict(extra="allow")

    traceEvents: list[TraceEvent] = Field(default_factory=list)

    def get_start_markers(self) -> list[TraceEvent]:
        """Get all TracingStartedIn* events."""
        return [e for e in self.traceEvents if e.is_start_marker()]

    def with_events(self, events: list[TraceEvent]) -> "TraceEnvelope":
        """Return a copy of this envelope holding a different event list."""
        return self.model_copy(update={"traceEvents": events})

    def to_json(self) -> dict[str, Any]:
        """Serialize the envelope, keeping extra fields as they were loaded."""
        data = self.model_dump(exclude={"traceEvents"})
        data["traceEvents"] = [e.to_json() for e in self.traceEvents]
        return data
