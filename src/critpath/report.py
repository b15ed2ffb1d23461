"""Plain-text and CSV rendering of computed schedules."""

from __future__ import annotations

import csv
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

from .unified_config import DEFAULT_DATE_FORMAT

if TYPE_CHECKING:
    from .models import Task
    from .scheduler import Scheduler

CSV_HEADER = [
    "task",
    "duration",
    "early_start",
    "early_finish",
    "late_start",
    "late_finish",
    "slack",
    "critical",
    "predecessors",
    "successors",
]


def format_date(day: date | None, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Format a date for display; unset dates render as '-'."""
    if day is None:
        return "-"
    return day.strftime(date_format)


def _days(duration: int) -> str:
    return "1 day" if duration == 1 else f"{duration} days"


def describe_early(task: Task, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """One-line summary of a task's early dates."""
    return (
        f"Task {task.name} lasts {_days(task.duration)}, "
        f"starts on {format_date(task.early_start, date_format)} "
        f"and finishes on {format_date(task.early_finish, date_format)}"
    )


def describe_late(task: Task, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """One-line summary of a task's late dates."""
    return (
        f"Task {task.name} lasts {_days(task.duration)}, "
        f"starts at the latest on {format_date(task.late_start, date_format)} "
        f"and finishes at the latest on {format_date(task.late_finish, date_format)}"
    )


def schedule_rows(
    scheduler: Scheduler,
    date_format: str = DEFAULT_DATE_FORMAT,
    *,
    show_late_dates: bool = True,
) -> list[list[str]]:
    """Build table rows (header first) for every task in insertion order."""
    header = ["Task", "Days", "Early start", "Early finish"]
    if show_late_dates:
        header += ["Late start", "Late finish", "Slack"]
    rows = [header]

    for task in scheduler.list_tasks():
        row = [
            task.name,
            str(task.duration),
            format_date(task.early_start, date_format),
            format_date(task.early_finish, date_format),
        ]
        if show_late_dates:
            slack = task.slack
            row += [
                format_date(task.late_start, date_format),
                format_date(task.late_finish, date_format),
                "-" if slack is None else str(slack),
            ]
        rows.append(row)

    return rows


def render_table(rows: list[list[str]]) -> str:
    """Render rows as left-aligned columns separated by two spaces."""
    if not rows:
        return ""
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    lines = [
        "  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip() for row in rows
    ]
    lines.insert(1, "  ".join("-" * width for width in widths))
    return "\n".join(lines)


def export_schedule_csv(scheduler: Scheduler, output_path: Path) -> None:
    """Export computed dates to CSV (ISO dates, one row per task)."""
    with output_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)

        for task in scheduler.list_tasks():
            writer.writerow(
                [
                    task.name,
                    task.duration,
                    task.early_start.isoformat() if task.early_start else "",
                    task.early_finish.isoformat() if task.early_finish else "",
                    task.late_start.isoformat() if task.late_start else "",
                    task.late_finish.isoformat() if task.late_finish else "",
                    "" if task.slack is None else task.slack,
                    "yes" if task.is_critical else "no",
                    " ".join(task.predecessor_names),
                    " ".join(task.successor_names),
                ]
            )
