"""Command-line interface for timeslicr."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from timeslicr.core.config.loader import configure_logging, load_app_config
from timeslicr.core.events import load_event_script
from timeslicr.core.export.clipboard import FileWriter
from timeslicr.core.session import TimelineSession
from timeslicr.core.timeline.derived import (
    format_seconds,
    section_duration_seconds,
    section_seconds,
    segment_seconds,
)
from timeslicr.core.timeline.store import TimelineStore

console = Console()
logger = logging.getLogger(__name__)


def render_timeline(store: TimelineStore) -> Table:
    """Build a rich table of sections and their segments."""
    labels = store.labels
    table = Table(title=f"Timeline ({format_seconds(store.total_duration_s)}s)")
    table.add_column("#", justify="right")
    table.add_column(f"{labels.parent} / {labels.child}")
    table.add_column("Range")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Duration", justify="right")

    for i, section in enumerate(store.sections, start=1):
        secs = section_seconds(section, store.total_duration_s)
        table.add_row(
            str(i),
            f"[bold]{section.name}[/bold]",
            f"{section.start:.4f}-{section.end:.4f}",
            f"{format_seconds(secs.start_s)}s",
            f"{format_seconds(secs.end_s)}s",
            f"{format_seconds(secs.duration_s)}s",
        )
        if section.collapsed:
            if section.segments:
                table.add_row("", f"  [dim]({len(section.segments)} hidden)[/dim]", "", "", "", "")
            continue

        section_s = section_duration_seconds(section, store.total_duration_s)
        for segment in section.segments:
            seg = segment_seconds(segment, section_s)
            table.add_row(
                "",
                f"  - {segment.name}",
                f"{segment.start:.4f}-{segment.end:.4f}",
                f"{format_seconds(seg.start_s)}s",
                f"{format_seconds(seg.end_s)}s",
                f"{format_seconds(seg.duration_s)}s",
            )

    return table


def _build_session(args: argparse.Namespace, *, seed_demo: bool) -> TimelineSession:
    if args.config is not None and not Path(args.config).exists():
        raise FileNotFoundError(f"Config file does not exist: {args.config}")

    app_config = load_app_config(args.config)
    if args.log_level:
        app_config = app_config.model_copy(
            update={"logging": app_config.logging.model_copy(update={"level": args.log_level})}
        )
    configure_logging(app_config)

    session = TimelineSession(app_config=app_config)
    if seed_demo and not app_config.timeline.seed_demo:
        session.store.seed_demo()
    return session


def _report(session: TimelineSession, out: str | None) -> None:
    console.print(render_timeline(session.store))
    console.print()
    console.print(session.summary(), markup=False, highlight=False, end="")

    if out:
        if session.copy_summary(FileWriter(out)):
            console.print(f"[green]Summary written to {out}[/green]")
        else:
            error = session.exporter.last_error
            console.print(f"[red]ERROR: Could not write summary: {error}[/red]")


def run_demo(args: argparse.Namespace) -> int:
    """Print the demo timeline."""
    try:
        session = _build_session(args, seed_demo=True)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    _report(session, args.out)
    return 1 if session.exporter.copy_failed else 0


def run_replay(args: argparse.Namespace) -> int:
    """Replay an event script and print the resulting timeline."""
    try:
        session = _build_session(args, seed_demo=args.demo)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    try:
        script = load_event_script(args.events)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load events: {e}[/red]")
        return 1

    changed = session.replay(script.events)
    console.print(
        f"[bold]Applied {len(script.events)} events[/bold] ({changed} changed the timeline)"
    )
    _report(session, args.out)
    return 1 if session.exporter.copy_failed else 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="timeslicr",
        description="timeslicr - nested timeline section planner",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to app config JSON/YAML (default: config.json if present)",
    )
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override the configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    demo = sub.add_parser("demo", help="Show the demo timeline and its summary")
    demo.add_argument("--out", default=None, help="Also write the summary to this file")

    replay = sub.add_parser("replay", help="Apply an event script and show the result")
    replay.add_argument("events", help="Path to event script (.json, .yaml, or .yml)")
    replay.add_argument("--demo", action="store_true", help="Start from the demo timeline")
    replay.add_argument("--out", default=None, help="Also write the summary to this file")

    return p


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "demo":
        return run_demo(args)
    if args.cmd == "replay":
        return run_replay(args)
    return 1
