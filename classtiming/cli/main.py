from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from ..data.loader import load_config, load_schedule, write_schedule
from ..errors import TimingError
from ..models.schedule import ScheduleSet
from ..render.csv_out import timeline_csv, write_timeline_csv
from ..render.html_ui import write_html_ui
from ..render.timeline import timeline
from ..scheduler import (
    add_break,
    add_period,
    generate,
    new_break,
    new_period,
    remove_break,
    remove_period,
)
from ..validate.checks import validate_schedule
from ..validate.report import format_validation_report, write_validation_report


def _setup_logging(project_root: Path) -> None:
    logs_dir = project_root / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / "classtiming.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def _schedule_path(project_root: Path) -> Path:
    return project_root / "outputs" / "json" / "schedule.json"


def write_outputs(schedule: ScheduleSet, project_root: Path, school_window=None) -> tuple[str, str]:
    outputs_dir = project_root / "outputs"
    report = validate_schedule(schedule, school_window)
    write_validation_report(report, outputs_dir)
    entries = timeline(schedule)
    csv = timeline_csv(entries)
    write_timeline_csv(csv, outputs_dir)
    write_html_ui(entries, outputs_dir)
    write_schedule(schedule, _schedule_path(project_root))
    return csv, format_validation_report(report)


def run_pipeline(
    project_root: Path,
    *,
    log_level: int | None = None,
    start_time: str | None = None,
    periods_count: int | None = None,
    period_duration: int | None = None,
    short_break_duration: int | None = None,
    short_break_after: List[int] | None = None,
    lunch_duration: int | None = None,
    lunch_after_period: int | None = None,
) -> tuple[str, str, str]:
    _setup_logging(project_root)
    if log_level is not None:
        logging.getLogger().setLevel(log_level)
    config = load_config(project_root)
    params = config.params(
        startTime=start_time,
        periodsCount=periods_count,
        periodDuration=period_duration,
        shortBreakDuration=short_break_duration,
        shortBreakAfter=short_break_after,
        lunchDuration=lunch_duration,
        lunchAfterPeriod=lunch_after_period,
    )
    schedule = generate(params)
    csv, validation = write_outputs(schedule, project_root, config.school_window())

    audit_lines = ["Parameters:", json.dumps(params.to_dict(), sort_keys=True), "", "Timeline:"]
    audit_lines += [f"{e.start_time}-{e.end_time} {e.kind} {e.label}" for e in timeline(schedule)]
    audit_text = "\n".join(audit_lines)
    with (project_root / "outputs" / "audit.txt").open("w", encoding="utf-8") as f:
        f.write(audit_text)

    return csv, validation, audit_text


def _parse_numbers(text: str | None) -> List[int] | None:
    if text is None:
        return None
    return [int(s) for s in text.split(",") if s.strip()]


app = typer.Typer(add_completion=False, help="Class timing generator")


@app.command("generate")
def cli_generate(
    root: Path = typer.Option(Path("."), help="Project root holding data/timing.json"),
    log_level: str = typer.Option("INFO", help="Log level"),
    start_time: Optional[str] = typer.Option(None, help="First period start (HH:MM)"),
    periods_count: Optional[int] = typer.Option(None, help="Number of teaching periods"),
    period_duration: Optional[int] = typer.Option(None, help="Period length in minutes"),
    short_break_duration: Optional[int] = typer.Option(None, help="Short break length in minutes"),
    short_break_after: Optional[str] = typer.Option(
        None, help="Periods followed by a short break (comma-separated)"
    ),
    lunch_duration: Optional[int] = typer.Option(None, help="Lunch length in minutes"),
    lunch_after_period: Optional[int] = typer.Option(None, help="Period followed by lunch"),
) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)
    try:
        csv, validation, _ = run_pipeline(
            root,
            log_level=level,
            start_time=start_time,
            periods_count=periods_count,
            period_duration=period_duration,
            short_break_duration=short_break_duration,
            short_break_after=_parse_numbers(short_break_after),
            lunch_duration=lunch_duration,
            lunch_after_period=lunch_after_period,
        )
    except TimingError as e:
        typer.echo(f"Cannot generate: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(csv)
    typer.echo(validation)


@app.command("validate")
def cli_validate(
    path: Optional[Path] = typer.Argument(None, help="Schedule JSON (default: outputs/json/schedule.json)"),
    root: Path = typer.Option(Path("."), help="Project root"),
) -> None:
    schedule = load_schedule(path or _schedule_path(root))
    window = load_config(root).school_window() if (root / "data" / "timing.json").exists() else None
    try:
        report = validate_schedule(schedule, window)
    except TimingError as e:
        typer.echo(f"Cannot validate: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(format_validation_report(report))
    if not report["valid"]:
        raise typer.Exit(code=1)


@app.command("timeline")
def cli_timeline(
    path: Optional[Path] = typer.Argument(None, help="Schedule JSON (default: outputs/json/schedule.json)"),
    root: Path = typer.Option(Path("."), help="Project root"),
) -> None:
    schedule = load_schedule(path or _schedule_path(root))
    try:
        csv = timeline_csv(timeline(schedule))
    except TimingError as e:
        typer.echo(f"Cannot build timeline: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(csv)


def _apply_edit(root: Path, edit) -> None:
    logger = logging.getLogger(__name__)
    _setup_logging(root)
    schedule = load_schedule(_schedule_path(root))
    window = load_config(root).school_window() if (root / "data" / "timing.json").exists() else None
    try:
        updated = edit(schedule)
        csv, _ = write_outputs(updated, root, window)
    except (TimingError, IndexError) as e:
        logger.warning(f"Edit rejected: {e}")
        typer.echo(f"Rejected: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(csv)


@app.command("add-period")
def cli_add_period(
    name: str = typer.Option(..., help="Display name"),
    start_time: str = typer.Option(..., help="Start (HH:MM)"),
    end_time: str = typer.Option(..., help="End (HH:MM)"),
    period_number: int = typer.Option(1, help="Period number"),
    short_name: str = typer.Option("", help="Short label"),
    period_type: str = typer.Option("regular", help="regular, lab, activity, assembly or sports"),
    root: Path = typer.Option(Path("."), help="Project root"),
) -> None:
    candidate = new_period(
        period_number, name, start_time, end_time, short_name=short_name, period_type=period_type
    )
    _apply_edit(root, lambda s: add_period(s, candidate))


@app.command("add-break")
def cli_add_break(
    name: str = typer.Option(..., help="Display name"),
    start_time: str = typer.Option(..., help="Start (HH:MM)"),
    end_time: str = typer.Option(..., help="End (HH:MM)"),
    short_name: str = typer.Option("", help="Short label"),
    break_type: str = typer.Option("short_break", help="short_break, lunch, assembly or prayer"),
    after_period: int = typer.Option(1, help="Period this break follows"),
    root: Path = typer.Option(Path("."), help="Project root"),
) -> None:
    candidate = new_break(
        name, start_time, end_time, short_name=short_name, break_type=break_type, after_period=after_period
    )
    _apply_edit(root, lambda s: add_break(s, candidate))


@app.command("remove-period")
def cli_remove_period(
    index: int = typer.Argument(..., help="Zero-based position in the period list"),
    root: Path = typer.Option(Path("."), help="Project root"),
) -> None:
    _apply_edit(root, lambda s: remove_period(s, index))


@app.command("remove-break")
def cli_remove_break(
    index: int = typer.Argument(..., help="Zero-based position in the break list"),
    root: Path = typer.Option(Path("."), help="Project root"),
) -> None:
    _apply_edit(root, lambda s: remove_break(s, index))


if __name__ == "__main__":  # pragma: no cover
    app()
