"""Tests for the schema module."""

import pytest

from tracecleaner.schema import (
    TraceEvent,
    TraceEnvelope,
    EventPhase,
    InstantScope,
    TraceCleanerError,
    MalformedEnvelopeError,
    NoFrameDataError,
)


class TestTraceEvent:
    """Tests for TraceEvent model."""

    def test_create_from_chrome_keys(self):
        """Test creating an event with the wire keys."""
        event = TraceEvent(pid=1, tid=2, ts=5, ph="X", cat="devtools.timeline", name="Layout")
        assert event.process_id == 1
        assert event.thread_id == 2
        assert event.timestamp == 5
        assert event.phase == EventPhase.COMPLETE.value
        assert event.category == "devtools.timeline"
        assert event.args is None

    def test_create_from_field_names(self):
        """Test creating an event with the attribute names."""
        event = TraceEvent(process_id=3, thread_id=4, timestamp=1.5, scope="t")
        assert event.process_id == 3
        assert event.scope == InstantScope.THREAD.value
        assert event.name == ""

    def test_is_start_marker(self):
        """Test start marker detection for both variants."""
        assert TraceEvent(name="TracingStartedInPage").is_start_marker()
        assert TraceEvent(name="TracingStartedInBrowser").is_start_marker()
        assert not TraceEvent(name="TracingStarted").is_start_marker()
        assert not TraceEvent(name="Layout").is_start_marker()
        assert not TraceEvent().is_start_marker()

    def test_unknown_fields_round_trip(self):
        """Test that fields like dur and id survive serialization."""
        raw = {"pid": 1, "tid": 1, "ts": 10, "ph": "X", "name": "Paint", "dur": 3, "id": "0x2"}
        event = TraceEvent.model_validate(raw)
        assert event.to_json() == raw

    def test_to_json_omits_unset_fields(self):
        """Test that absent optional fields are not written."""
        event = TraceEvent(name="RunTask", ts=1)
        assert event.to_json() == {"name": "RunTask", "ts": 1}

    def test_integer_timestamp_stays_integer(self):
        """Test that integral timestamps are not turned into floats."""
        event = TraceEvent.model_validate({"ts": 12})
        assert isinstance(event.timestamp, int)


class TestTraceEnvelope:
    """Tests for TraceEnvelope model."""

    def test_extra_fields_preserved(self):
        """Test that envelope metadata passes through."""
        envelope = TraceEnvelope.model_validate({
            "traceEvents": [{"name": "A"}],
            "metadata": {"cpu-family": 6},
        })
        data = envelope.to_json()
        assert data["metadata"] == {"cpu-family": 6}
        assert data["traceEvents"] == [{"name": "A"}]

    def test_with_events_leaves_original_untouched(self):
        """Test that with_events returns a copy."""
        envelope = TraceEnvelope(traceEvents=[TraceEvent(name="A")])
        copy = envelope.with_events([])
        assert len(envelope.traceEvents) == 1
        assert copy.traceEvents == []

    def test_get_start_markers(self):
        """Test listing start markers."""
        envelope = TraceEnvelope(traceEvents=[
            TraceEvent(name="TracingStartedInBrowser"),
            TraceEvent(name="Layout"),
            TraceEvent(name="TracingStartedInPage"),
        ])
        names = [e.name for e in envelope.get_start_markers()]
        assert names == ["TracingStartedInBrowser", "TracingStartedInPage"]


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_malformed_envelope_is_value_error(self):
        assert issubclass(MalformedEnvelopeError, TraceCleanerError)
        assert issubclass(MalformedEnvelopeError, ValueError)

    def test_no_frame_data_carries_result(self):
        with pytest.raises(NoFrameDataError) as exc_info:
            raise NoFrameDataError("no frames", result="partial")
        assert exc_info.value.result == "partial"
        assert str(exc_info.value) == "no frames"
