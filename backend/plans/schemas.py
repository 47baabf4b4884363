"""Plan API schemas."""

from datetime import date as date_type
from pydantic import BaseModel, Field
from typing import Optional

from planner.schemas import TaskCategory


class PlanCreate(BaseModel):
    exam_type: str
    exam_date: date_type
    focus_subject_keys: list[str] = Field(default_factory=list)


class PlanSummary(BaseModel):
    id: str
    exam_type: str
    exam_date: date_type
    created_at: str
    task_count: int = 0
    done_count: int = 0


class TaskUpdate(BaseModel):
    activity: str = Field(min_length=1)


class TaskCreate(BaseModel):
    activity: Optional[str] = None
    date: Optional[date_type] = None
    start_time: str = "N/A"
    end_time: str = "N/A"
    category: TaskCategory = "other"
    subject_label: Optional[str] = None


class PlanProgress(BaseModel):
    completed: int
    total: int
    percentage: float


class PlanStats(BaseModel):
    progress: PlanProgress
    subject_hours: dict[str, float]
