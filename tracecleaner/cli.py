"""
CLI interface for Trace Cleaner.

Provides commands for cleaning, summarizing and validating trace files.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tracecleaner.cleaning import TraceCleaner
from tracecleaner.io import load_trace_file, save_trace_file
from tracecleaner.schema import TraceCleanerError
from tracecleaner.utils import get_config, setup_logging

app = typer.Typer(
    name="tracecleaner",
    help="Trace Cleaner - Normalize start markers in DevTools trace logs",
    add_completion=False,
)
console = Console()


def _load_or_exit(trace_file: Path):
    try:
        return load_trace_file(trace_file)
    except (TraceCleanerError, OSError) as e:
        console.print(f"[red]Error loading trace:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def clean(
    trace_file: Path = typer.Argument(
        ...,
        help="Path to the trace JSON file",
        exists=True,
        readable=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "-o", "--output",
        help="Output path for the cleaned trace (default: <output_dir>/<name>.clean.json)",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail if no event carries frame data",
    ),
    verbose: bool = typer.Option(
        False,
        "-v", "--verbose",
        help="Show debug logging",
    ),
):
    """
    Replace all TracingStartedIn* events with one canonical start marker.

    Example:
        tracecleaner clean ./traces/page_load.json
        tracecleaner clean ./traces/page_load.json -o clean.json --strict
    """
    config = get_config()
    setup_logging(debug_mode=verbose or config.debug, log_file_path=config.log_file)

    trace = _load_or_exit(trace_file)

    try:
        result = TraceCleaner.clean(trace, strict=strict or config.strict)
    except TraceCleanerError as e:
        console.print(f"[red]Error cleaning trace:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if output is None:
        output = config.output_dir / f"{trace_file.stem}.clean.json"
    saved_path = save_trace_file(output, result.trace)

    context = result.dominant_context
    table = Table(title="Cleaning Result", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Input Events", str(len(trace.traceEvents)))
    table.add_row("Output Events", str(len(result.trace.traceEvents)))
    table.add_row("Markers Removed", str(result.markers_removed))
    table.add_row("Start ts", str(result.trace.traceEvents[0].timestamp))
    table.add_row("Dominant pid/tid", f"{context.process_id}/{context.thread_id}" if context else "N/A")
    table.add_row("Dominant Frame", str(context.frame) if context else "N/A")
    console.print(table)

    for issue in result.issues:
        console.print(f"[yellow]Warning:[/yellow] {escape(issue)}")

    console.print(f"\n[green]Cleaned trace saved to:[/green] {saved_path}")


@app.command()
def summary(
    trace_file: Path = typer.Argument(
        ...,
        help="Path to the trace JSON file",
        exists=True,
        readable=True,
    ),
):
    """
    Show start markers and frame activity of a trace without changing it.

    Example:
        tracecleaner summary ./traces/page_load.json
    """
    trace = _load_or_exit(trace_file)
    _print_trace_summary(TraceCleaner.get_summary(trace))


@app.command()
def validate(
    trace_file: Path = typer.Argument(
        ...,
        help="Path to the trace JSON file",
        exists=True,
        readable=True,
    ),
):
    """
    Check whether a trace already has a single canonical start marker.

    Example:
        tracecleaner validate ./traces/page_load.json
    """
    trace = _load_or_exit(trace_file)
    issues = TraceCleaner.validate(trace)

    if issues:
        console.print("[yellow]Validation issues found:[/yellow]")
        for issue in issues:
            console.print(f"  - {issue}")
    else:
        console.print("[green]Trace is clean![/green]")

    console.print(f"\nEvents: {len(trace.traceEvents)}")


@app.command()
def config():
    """
    Show current configuration.
    """
    cfg = get_config()

    table = Table(title="Trace Cleaner Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for key, value in cfg.to_dict().items():
        table.add_row(key, str(value))

    console.print(table)


def _or_na(value) -> str:
    return "N/A" if value is None else str(value)


def _print_trace_summary(summary: dict):
    """Print trace summary table."""
    table = Table(title="Trace Summary", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Total Events", str(summary.get("total_events", 0)))
    table.add_row("Start Markers", str(summary.get("start_markers", 0)))
    table.add_row("Marker Names", ", ".join(summary.get("start_marker_names", [])) or "N/A")
    table.add_row("Start ts", str(summary.get("start_timestamp")))
    table.add_row("Frame Contexts", str(summary.get("frame_contexts", 0)))
    table.add_row("Dominant pid", _or_na(summary.get("dominant_pid")))
    table.add_row("Dominant tid", _or_na(summary.get("dominant_tid")))
    table.add_row("Dominant Frame", _or_na(summary.get("dominant_frame")))
    table.add_row("Dominant Events", str(summary.get("dominant_count", 0)))

    console.print(table)

    markers = summary.get("start_markers", 0)
    clean = markers == 1
    console.print(Panel.fit(
        f"Start markers: {markers}\n"
        f"Status: {'[green]CLEAN[/green]' if clean else '[yellow]NEEDS CLEANING[/yellow]'}",
        title="Start Marker Check",
        border_style="green" if clean else "yellow",
    ))


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
