"""
Multi-day plan builder.

Generates one daily template per calendar date from today through the exam
date (inclusive), threading a single allocation counter across all days so
the subject rotation continues smoothly over day boundaries. No randomness:
the same request, catalog and "today" always give the same tasks.
"""
from __future__ import annotations

import logging
import secrets
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Sequence

from planner.day_planner import build_day
from planner.schemas import GeneratedPlan, ScheduleRequest, Subject, TimetableTask

logger = logging.getLogger(__name__)

STUDY_TIPS = [
    "Stay hydrated throughout the day.",
    "Take short breaks every 60-90 minutes of study.",
    "Aim for 7-8 hours of quality sleep.",
    "Review notes from the previous day before starting new topics.",
    "Practice past papers regularly.",
]


class InvalidRequestError(ValueError):
    """The request cannot be turned into a plan (e.g. exam date in the past)."""


def count_total_days(today: date, exam_date: date) -> int:
    """Days from today through the exam date inclusive, never less than 1."""
    return max(0, (exam_date - today).days) + 1


def validate_request(request: ScheduleRequest, today: date) -> None:
    if request.exam_date < today:
        raise InvalidRequestError("Exam date must be today or in the future.")


def new_plan_id(now: datetime) -> str:
    return f"plan-{int(now.timestamp() * 1000)}-{secrets.token_hex(3)}"


def build_plan(
    request: ScheduleRequest,
    catalog: Sequence[Subject],
    today: Optional[date] = None,
    now: Optional[datetime] = None,
) -> GeneratedPlan:
    """Generate the full study plan for ``request``.

    Raises InvalidRequestError when the exam date is before ``today``; no
    plan is produced in that case.
    """
    today = today or date.today()
    now = now or datetime.now(timezone.utc)
    validate_request(request, today)

    total_days = count_total_days(today, request.exam_date)
    tasks: list[TimetableTask] = []
    counter = 0

    for day_index in range(1, total_days + 1):
        day = today + timedelta(days=day_index - 1)
        day_tasks, counter = build_day(
            day, catalog, request.focus_subject_keys, day_index, counter
        )
        tasks.extend(day_tasks)

    plan = GeneratedPlan(
        id=new_plan_id(now),
        exam_type=request.exam_type,
        exam_date=request.exam_date,
        focus_subject_keys=list(request.focus_subject_keys),
        tasks=tasks,
        created_at=now,
        tips=list(STUDY_TIPS),
    )
    logger.info(
        f"Generated plan {plan.id} for {request.exam_type}: "
        f"{total_days} day(s), {len(tasks)} tasks, {counter} study slots"
    )
    return plan
