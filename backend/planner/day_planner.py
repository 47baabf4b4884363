"""
Daily template: fourteen fixed slots from wake-up to sleep.

Four of the slots are study blocks filled by the allocator; the rest are fixed
activities. Times use the "hh:mm AM/PM" format shown to the user.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from planner.allocator import partition_subjects, pick_subject
from planner.schemas import Subject, TimetableTask

logger = logging.getLogger(__name__)

GENERAL_REVISION = "General Revision"

# Study slots (activity None) are filled by the allocator; every other slot is fixed.
DAILY_TEMPLATE = [
    ("07:00 AM", "07:30 AM", "Wake Up & Hydrate", "other"),
    ("07:30 AM", "08:30 AM", "Breakfast & Morning Routine", "meal"),
    ("08:30 AM", "10:30 AM", None, "study"),
    ("10:30 AM", "11:00 AM", "Short Break / Quick Revision", "break"),
    ("11:00 AM", "01:00 PM", None, "study"),
    ("01:00 PM", "02:00 PM", "Lunch Break", "meal"),
    ("02:00 PM", "04:00 PM", None, "study"),
    ("04:00 PM", "04:30 PM", "Revision of Morning Topics", "revision"),
    ("04:30 PM", "06:00 PM", None, "study"),
    ("06:00 PM", "07:00 PM", "Exercise / Free Time", "other"),
    ("07:00 PM", "08:00 PM", "Dinner", "meal"),
    ("08:00 PM", "09:30 PM", "Light Study / Problem Solving / Review Day", "revision"),
    ("09:30 PM", "10:30 PM", "Plan for Next Day / Wind Down", "other"),
    ("10:30 PM", "07:00 AM", "Sleep", "sleep"),  # ends the next morning
]


def _day_id(day: date) -> str:
    return f"day{day.strftime('%Y%m%d')}"


def study_task_id(day: date, start_time: str) -> str:
    """Id of an allocator-driven study block, e.g. ``day20240101-study-0830AM``."""
    return f"{_day_id(day)}-study-{start_time.replace(':', '').replace(' ', '')}"


def build_day(
    day: date,
    catalog: Sequence[Subject],
    focus_keys,
    day_index: int,
    counter: int,
) -> tuple[list[TimetableTask], int]:
    """Build the fourteen tasks of one day.

    ``day_index`` is 1-based within the plan. Returns the tasks in template
    order together with the counter value after the day's four study slots.
    """
    focus, other = partition_subjects(catalog, focus_keys)
    tasks: list[TimetableTask] = []
    slot_index = 0

    for position, (start, end, activity, category) in enumerate(DAILY_TEMPLATE, start=1):
        if activity is None:
            subject, counter = pick_subject(focus, other, day_index, slot_index, counter, catalog)
            label = subject.label if subject else GENERAL_REVISION
            tasks.append(TimetableTask(
                id=study_task_id(day, start),
                date=day,
                start_time=start,
                end_time=end,
                activity=f"Study: {label}",
                category="study",
                subject_label=label,
            ))
            slot_index += 1
            continue

        tasks.append(TimetableTask(
            id=f"{_day_id(day)}-task{position}",
            date=day,
            start_time=start,
            end_time=end,
            activity=activity,
            category=category,
        ))

    logger.debug(
        f"Built day {day_index} ({day.isoformat()}): "
        f"{[t.subject_label for t in tasks if t.category == 'study']}"
    )
    return tasks, counter
