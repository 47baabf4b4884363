"""Plan routes: generate a study plan, read it back, edit its tasks."""

import logging
from fastapi import APIRouter, HTTPException
from typing import List

from server.database import get_db
from planner.catalog import get_exam_subjects, get_exam_type
from planner.plan_builder import InvalidRequestError, build_plan
from planner.schemas import GeneratedPlan, ScheduleRequest, TimetableTask
from planner.stats import plan_progress, subject_time_allocation
from plans import store
from plans.schemas import PlanCreate, PlanStats, PlanSummary, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found(e: LookupError):
    return HTTPException(status_code=404, detail=str(e))


@router.post("/plans", response_model=GeneratedPlan)
def create_plan(body: PlanCreate):
    if get_exam_type(body.exam_type) is None:
        raise HTTPException(status_code=404, detail="Exam type not found")

    subjects = get_exam_subjects(body.exam_type)
    known_keys = {s.key for s in subjects}
    unknown = [k for k in body.focus_subject_keys if k not in known_keys]
    if unknown:
        logger.warning(f"Rejected plan request with unknown focus subjects: {unknown}")
        raise HTTPException(
            status_code=400,
            detail=f"Unknown subjects for {body.exam_type}: {', '.join(unknown)}",
        )

    request = ScheduleRequest(**body.model_dump())
    try:
        plan = build_plan(request, subjects)
    except InvalidRequestError as e:
        logger.warning(f"Rejected plan request for {body.exam_type}: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    db = get_db()
    try:
        store.save_plan(db, plan)
    finally:
        db.close()
    return plan


@router.get("/plans", response_model=List[PlanSummary])
def get_plans():
    db = get_db()
    try:
        rows = store.list_plans(db)
    finally:
        db.close()
    return [PlanSummary(**r) for r in rows]


@router.get("/plans/{plan_id}", response_model=GeneratedPlan)
def get_plan(plan_id: str):
    db = get_db()
    try:
        return store.load_plan(db, plan_id)
    except store.PlanNotFoundError as e:
        raise _not_found(e)
    finally:
        db.close()


@router.delete("/plans/{plan_id}")
def delete_plan(plan_id: str):
    db = get_db()
    try:
        store.delete_plan(db, plan_id)
    except store.PlanNotFoundError as e:
        raise _not_found(e)
    finally:
        db.close()
    return {"message": "Plan deleted"}


@router.get("/plans/{plan_id}/stats", response_model=PlanStats)
def get_plan_stats(plan_id: str):
    db = get_db()
    try:
        plan = store.load_plan(db, plan_id)
    except store.PlanNotFoundError as e:
        raise _not_found(e)
    finally:
        db.close()
    return PlanStats(
        progress=plan_progress(plan),
        subject_hours=subject_time_allocation(plan.tasks),
    )


@router.patch("/plans/{plan_id}/tasks/{task_id}/toggle", response_model=TimetableTask)
def toggle_task(plan_id: str, task_id: str):
    db = get_db()
    try:
        return store.toggle_task(db, plan_id, task_id)
    except LookupError as e:
        raise _not_found(e)
    finally:
        db.close()


@router.patch("/plans/{plan_id}/tasks/{task_id}", response_model=TimetableTask)
def update_task(plan_id: str, task_id: str, body: TaskUpdate):
    db = get_db()
    try:
        return store.edit_task_activity(db, plan_id, task_id, body.activity)
    except LookupError as e:
        raise _not_found(e)
    finally:
        db.close()


@router.post("/plans/{plan_id}/tasks", response_model=TimetableTask)
def add_task(plan_id: str, body: TaskCreate):
    db = get_db()
    try:
        return store.add_custom_task(
            db, plan_id,
            activity=body.activity,
            day=body.date,
            start_time=body.start_time,
            end_time=body.end_time,
            category=body.category,
            subject_label=body.subject_label,
        )
    except store.PlanNotFoundError as e:
        raise _not_found(e)
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    finally:
        db.close()


@router.delete("/plans/{plan_id}/tasks/{task_id}")
def delete_task(plan_id: str, task_id: str):
    db = get_db()
    try:
        store.delete_task(db, plan_id, task_id)
    except LookupError as e:
        raise _not_found(e)
    finally:
        db.close()
    return {"message": "Task deleted"}
