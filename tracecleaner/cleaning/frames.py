"""
Frame activity analysis.

Resolves the frame each event belongs to, counts events per
(process, thread, frame) context and picks the most active one.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, NamedTuple

from tracecleaner.schema import TraceEvent


# Sub-records that may carry the frame, in lookup order.
_DATA_KEYS = ("data", "beginData", "counters")


class FrameContext(NamedTuple):
    """A (process, thread, frame) triple."""
    process_id: int | str | None
    thread_id: int | str | None
    frame: Any

    def key(self) -> Hashable:
        """Hashable form of the context; object and array frames are keyed by their JSON."""
        frame = self.frame
        if isinstance(frame, (dict, list)):
            frame = ("json", json.dumps(frame, sort_keys=True))
        return (self.process_id, self.thread_id, frame)


def get_event_frame(event: TraceEvent) -> Any | None:
    """
    Get the frame identifier of an event, or None.

    Lookup order: ``args.frame``, then the first non-empty of
    ``args.data`` / ``args.beginData`` / ``args.counters``, checked for
    ``frame`` and then ``page``.

    An empty record counts as missing: with ``{"data": {}, "beginData":
    {...}}`` the frame is read from ``beginData``.
    """
    args = event.args
    if not isinstance(args, dict):
        return None

    if args.get("frame"):
        return args["frame"]

    data = next((args[key] for key in _DATA_KEYS if args.get(key)), None)
    if not isinstance(data, dict):
        return None

    return data.get("frame") or data.get("page") or None


@dataclass
class FrameActivityTally:
    """Event counts per frame context, with contexts kept in first-seen order."""
    counts: dict[Hashable, int] = field(default_factory=dict)
    order: list[FrameContext] = field(default_factory=list)

    def add(self, context: FrameContext) -> None:
        key = context.key()
        if key not in self.counts:
            self.counts[key] = 0
            self.order.append(context)
        self.counts[key] += 1

    def count(self, context: FrameContext) -> int:
        return self.counts.get(context.key(), 0)

    def is_empty(self) -> bool:
        return not self.order

    def ranked(self) -> list[tuple[FrameContext, int]]:
        """
        Contexts ordered by descending count.

        ``sorted`` is stable, so contexts with equal counts keep their
        first-seen order.
        """
        return sorted(
            ((context, self.count(context)) for context in self.order),
            key=lambda item: -item[1],
        )

    @classmethod
    def from_events(cls, events: Iterable[TraceEvent]) -> "FrameActivityTally":
        tally = cls()
        for event in events:
            frame = get_event_frame(event)
            if frame is None:
                continue
            tally.add(FrameContext(event.process_id, event.thread_id, frame))
        return tally


def select_dominant_context(tally: FrameActivityTally) -> FrameContext | None:
    """Pick the most active context; ties go to the one seen first."""
    if tally.is_empty():
        return None
    return tally.ranked()[0][0]
