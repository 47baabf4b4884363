"""Plan statistics: completion progress and study hours per subject."""

from datetime import datetime, time
from typing import Optional

from planner.schemas import GeneratedPlan, TimetableTask


def parse_clock(value: str) -> Optional[time]:
    """Parse "hh:mm AM/PM"; returns None for "N/A" or anything unparseable."""
    try:
        return datetime.strptime(value.strip().upper(), "%I:%M %p").time()
    except (ValueError, AttributeError):
        return None


def _duration_hours(start: time, end: time) -> float:
    return ((end.hour * 60 + end.minute) - (start.hour * 60 + start.minute)) / 60


def subject_time_allocation(tasks: list[TimetableTask]) -> dict[str, float]:
    """Total study hours per subject label, in order of first appearance.

    Only study tasks with valid times count; blocks whose end is not after
    their start are skipped.
    """
    allocation: dict[str, float] = {}
    for task in tasks:
        if task.category != "study" or not task.subject_label:
            continue
        start = parse_clock(task.start_time)
        end = parse_clock(task.end_time)
        if start is None or end is None:
            continue
        hours = _duration_hours(start, end)
        if hours <= 0:
            continue
        allocation[task.subject_label] = allocation.get(task.subject_label, 0.0) + hours
    return allocation


def plan_progress(plan: GeneratedPlan) -> dict:
    total = len(plan.tasks)
    completed = sum(1 for t in plan.tasks if t.is_completed)
    return {
        "completed": completed,
        "total": total,
        "percentage": (completed / total) * 100 if total else 0.0,
    }
