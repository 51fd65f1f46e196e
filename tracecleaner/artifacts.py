"""
Artifact expansion.

Saved run artifacts reference their traces by file path, keyed by pass
name. Expanding them loads every trace and cleans it so that audits see
one canonical start marker per trace.
"""

import logging
from pathlib import Path
from typing import Any

from tracecleaner.cleaning import TraceCleaner
from tracecleaner.io import load_trace_file


logger = logging.getLogger(__name__)


def expand_artifacts(
    artifacts: dict[str, Any] | None,
    base_dir: str | Path | None = None,
    strict: bool = False,
) -> dict[str, Any] | None:
    """
    Load and clean the traces listed under ``artifacts["traces"]``.

    Args:
        artifacts: Artifact mapping; ``traces`` maps pass names to paths
        base_dir: Directory that relative trace paths are resolved against
        strict: Raise NoFrameDataError for traces without frame data

    Returns:
        A new mapping where each trace path is replaced by the cleaned
        TraceEnvelope; other keys are copied as-is
    """
    if artifacts is None:
        return None

    expanded = dict(artifacts)
    traces = artifacts.get("traces")
    if not traces:
        return expanded

    cleaned = {}
    for pass_name, trace_path in traces.items():
        logger.info("Normalizing trace contents into expected state...")
        path = Path(trace_path)
        if base_dir is not None and not path.is_absolute():
            path = Path(base_dir) / path

        result = TraceCleaner.clean(load_trace_file(path), strict=strict)
        for issue in result.issues:
            logger.warning("%s (%s): %s", pass_name, path, issue)
        cleaned[pass_name] = result.trace

    expanded["traces"] = cleaned
    return expanded
