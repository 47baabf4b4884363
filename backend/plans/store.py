"""
Plan persistence + caller-side task edits.

Plans are written once by the generator and then only changed through the
four task mutations below (toggle, edit activity, add custom, delete); none
of them re-run the generator.
"""

import json
import logging
import secrets
from datetime import date, datetime
from typing import Optional

from planner.plan_builder import InvalidRequestError
from planner.schemas import GeneratedPlan, TimetableTask

logger = logging.getLogger(__name__)

CUSTOM_TASK_ACTIVITY = "New custom task"
CUSTOM_STUDY_SUBJECT = "General Revision"


class PlanNotFoundError(LookupError):
    pass


class TaskNotFoundError(LookupError):
    pass


def _task_from_row(row) -> TimetableTask:
    return TimetableTask(
        id=row["task_id"],
        date=date.fromisoformat(row["day_date"]),
        start_time=row["start_time"],
        end_time=row["end_time"],
        activity=row["activity"],
        category=row["category"],
        subject_label=row["subject_label"],
        is_completed=bool(row["is_completed"]),
    )


def _insert_task(db, plan_id: str, task: TimetableTask, sort_order: int, is_custom: bool = False):
    db.execute(
        """INSERT INTO plan_tasks (plan_id, task_id, day_date, start_time, end_time, activity,
                                   category, subject_label, is_completed, is_custom, sort_order)
           VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
        (plan_id, task.id, task.date.isoformat(), task.start_time, task.end_time, task.activity,
         task.category, task.subject_label, 1 if task.is_completed else 0,
         1 if is_custom else 0, sort_order)
    )


def _get_task_row(db, plan_id: str, task_id: str):
    _require_plan(db, plan_id)
    row = db.execute(
        "SELECT * FROM plan_tasks WHERE plan_id = ? AND task_id = ?",
        (plan_id, task_id)
    ).fetchone()
    if not row:
        raise TaskNotFoundError(f"Task {task_id} not found in plan {plan_id}")
    return row


def _require_plan(db, plan_id: str):
    row = db.execute("SELECT * FROM study_plans WHERE id = ?", (plan_id,)).fetchone()
    if not row:
        raise PlanNotFoundError(f"Plan {plan_id} not found")
    return row


def save_plan(db, plan: GeneratedPlan) -> None:
    db.execute(
        """INSERT INTO study_plans (id, exam_type, exam_date, focus_subject_keys, tips, created_at)
           VALUES (?, ?, ?, ?, ?, ?)""",
        (plan.id, plan.exam_type, plan.exam_date.isoformat(),
         json.dumps(plan.focus_subject_keys), json.dumps(plan.tips),
         plan.created_at.isoformat())
    )
    for i, task in enumerate(plan.tasks):
        _insert_task(db, plan.id, task, i)
    db.commit()
    logger.info(f"Saved plan {plan.id} with {len(plan.tasks)} tasks")


def load_plan(db, plan_id: str) -> GeneratedPlan:
    row = _require_plan(db, plan_id)
    task_rows = db.execute(
        "SELECT * FROM plan_tasks WHERE plan_id = ? ORDER BY sort_order, row_id",
        (plan_id,)
    ).fetchall()
    return GeneratedPlan(
        id=row["id"],
        exam_type=row["exam_type"],
        exam_date=date.fromisoformat(row["exam_date"]),
        focus_subject_keys=json.loads(row["focus_subject_keys"] or "[]"),
        tasks=[_task_from_row(r) for r in task_rows],
        created_at=datetime.fromisoformat(row["created_at"]),
        tips=json.loads(row["tips"] or "[]"),
    )


def list_plans(db) -> list[dict]:
    """Plan summaries, newest first."""
    rows = db.execute("""
        SELECT p.id, p.exam_type, p.exam_date, p.created_at,
               COUNT(t.row_id) AS task_count,
               COALESCE(SUM(t.is_completed), 0) AS done_count
        FROM study_plans p
        LEFT JOIN plan_tasks t ON t.plan_id = p.id
        GROUP BY p.id
        ORDER BY p.created_at DESC
    """).fetchall()
    return [dict(r) for r in rows]


def delete_plan(db, plan_id: str) -> None:
    _require_plan(db, plan_id)
    db.execute("DELETE FROM study_plans WHERE id = ?", (plan_id,))
    db.commit()
    logger.info(f"Deleted plan {plan_id}")


def toggle_task(db, plan_id: str, task_id: str) -> TimetableTask:
    _get_task_row(db, plan_id, task_id)
    db.execute(
        "UPDATE plan_tasks SET is_completed = 1 - is_completed WHERE plan_id = ? AND task_id = ?",
        (plan_id, task_id)
    )
    db.commit()
    task = _task_from_row(_get_task_row(db, plan_id, task_id))
    logger.info(f"Task {task_id} in plan {plan_id} completed={task.is_completed}")
    return task


def edit_task_activity(db, plan_id: str, task_id: str, activity: str) -> TimetableTask:
    _get_task_row(db, plan_id, task_id)
    db.execute(
        "UPDATE plan_tasks SET activity = ? WHERE plan_id = ? AND task_id = ?",
        (activity, plan_id, task_id)
    )
    db.commit()
    logger.info(f"Task {task_id} in plan {plan_id} renamed")
    return _task_from_row(_get_task_row(db, plan_id, task_id))


def add_custom_task(
    db,
    plan_id: str,
    activity: Optional[str] = None,
    day: Optional[date] = None,
    start_time: str = "N/A",
    end_time: str = "N/A",
    category: str = "other",
    subject_label: Optional[str] = None,
) -> TimetableTask:
    """Append a user-defined task to a plan.

    Defaults to the plan's earliest date with "N/A" times. Plans without any
    task cannot take custom tasks (there is no date to attach them to).
    """
    _require_plan(db, plan_id)
    bounds = db.execute(
        "SELECT MIN(day_date) AS first_day, MAX(sort_order) AS last_order FROM plan_tasks WHERE plan_id = ?",
        (plan_id,)
    ).fetchone()
    if bounds["first_day"] is None:
        raise InvalidRequestError("Generate a timetable first.")

    if category == "study":
        subject_label = subject_label or CUSTOM_STUDY_SUBJECT
    else:
        subject_label = None

    task = TimetableTask(
        id=f"task-custom-{secrets.token_hex(8)}",
        date=day or date.fromisoformat(bounds["first_day"]),
        start_time=start_time,
        end_time=end_time,
        activity=activity or CUSTOM_TASK_ACTIVITY,
        category=category,
        subject_label=subject_label,
    )
    _insert_task(db, plan_id, task, bounds["last_order"] + 1, is_custom=True)
    db.commit()
    logger.info(f"Added custom task {task.id} to plan {plan_id} on {task.date.isoformat()}")
    return task


def delete_task(db, plan_id: str, task_id: str) -> None:
    _get_task_row(db, plan_id, task_id)
    db.execute(
        "DELETE FROM plan_tasks WHERE plan_id = ? AND task_id = ?",
        (plan_id, task_id)
    )
    db.commit()
    logger.info(f"Deleted task {task_id} from plan {plan_id}")
