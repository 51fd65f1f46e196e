"""Location of TracingStartedIn* marker events."""

from dataclasses import dataclass, field
from typing import Sequence

from tracecleaner.schema import TraceEvent


DEFAULT_START_TIMESTAMP = 0


@dataclass
class StartMarkerScan:
    """Indices of start markers and the timestamp of the first one."""
    indices: list[int] = field(default_factory=list)
    captured_timestamp: int | float = DEFAULT_START_TIMESTAMP

    @property
    def found(self) -> bool:
        return bool(self.indices)


def locate_start_markers(events: Sequence[TraceEvent]) -> StartMarkerScan:
    """
    Find every browser- or page-scoped start marker.

    The captured timestamp is that of the earliest-indexed marker, falling
    back to zero when there are no markers or the first one has no ``ts``.
    """
    indices = [i for i, event in enumerate(events) if event.is_start_marker()]
    if not indices:
        return StartMarkerScan()

    first_ts = events[indices[0]].timestamp
    return StartMarkerScan(
        indices=indices,
        captured_timestamp=first_ts if first_ts is not None else DEFAULT_START_TIMESTAMP,
    )
