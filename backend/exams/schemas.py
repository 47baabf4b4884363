"""Exam catalog schemas."""

from pydantic import BaseModel


class ExamTypeResponse(BaseModel):
    key: str
    label: str
    subject_count: int = 0


class SubjectResponse(BaseModel):
    key: str
    label: str
