"""
Trace file loading and saving.

Chrome traces come in two shapes: an object with a ``traceEvents`` list
(current format) or a bare list of events (traces recorded before Chrome
54). Both are read into a TraceEnvelope.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tracecleaner.schema import TraceEnvelope, MalformedEnvelopeError


logger = logging.getLogger(__name__)


def coerce_envelope(data: Any) -> TraceEnvelope:
    """
    Wrap raw trace data into a TraceEnvelope.

    Args:
        data: An envelope dict, a bare list of events, or a TraceEnvelope

    Raises:
        MalformedEnvelopeError: If no ``traceEvents`` list can be found or
            the events cannot be parsed
    """
    if isinstance(data, TraceEnvelope):
        return data

    if isinstance(data, list):
        logger.debug("Wrapping legacy bare-array trace of %d events", len(data))
        data = {"traceEvents": data}

    if not isinstance(data, dict):
        raise MalformedEnvelopeError(
            f"Expected a trace object or event list, got {type(data).__name__}"
        )

    if not isinstance(data.get("traceEvents"), list):
        raise MalformedEnvelopeError("Trace has no traceEvents list")

    try:
        return TraceEnvelope.model_validate(data)
    except ValidationError as e:
        raise MalformedEnvelopeError(f"Invalid trace events: {e}") from e


def load_trace_file(file_path: str | Path) -> TraceEnvelope:
    """
    Load a trace JSON file.

    Args:
        file_path: Path to the trace JSON file

    Returns:
        The trace envelope, with legacy traces already wrapped
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"Trace file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedEnvelopeError(f"{path} is not valid JSON: {e}") from e

    return coerce_envelope(data)


def save_trace_file(file_path: str | Path, envelope: TraceEnvelope) -> Path:
    """Write a trace envelope as JSON, creating parent directories."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(envelope.to_json(), f, ensure_ascii=False)
    return path
