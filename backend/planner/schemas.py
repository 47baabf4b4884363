"""Planner schemas: subjects, requests, tasks and generated plans."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

TaskCategory = Literal["study", "meal", "break", "sleep", "revision", "other"]


class Subject(BaseModel):
    key: str
    label: str

    model_config = {"frozen": True}


class ScheduleRequest(BaseModel):
    exam_type: str
    exam_date: date
    focus_subject_keys: list[str] = Field(default_factory=list)

    @field_validator("focus_subject_keys")
    @classmethod
    def _dedupe_keys(cls, keys: list[str]) -> list[str]:
        # Set semantics with a stable order
        return list(dict.fromkeys(keys))


class TimetableTask(BaseModel):
    id: str
    date: date
    start_time: str
    end_time: str
    activity: str
    category: TaskCategory
    subject_label: Optional[str] = None
    is_completed: bool = False

    @model_validator(mode="after")
    def _subject_only_for_study(self):
        if self.category == "study" and not self.subject_label:
            raise ValueError("study tasks need a subject_label")
        if self.category != "study" and self.subject_label is not None:
            raise ValueError(f"{self.category} tasks cannot carry a subject_label")
        return self


class GeneratedPlan(BaseModel):
    id: str
    exam_type: str
    exam_date: date
    focus_subject_keys: list[str]
    tasks: list[TimetableTask]
    created_at: datetime
    tips: list[str]
