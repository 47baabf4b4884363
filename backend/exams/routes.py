"""Exam catalog routes (read-only)."""

from fastapi import APIRouter, HTTPException
from typing import List

from planner.catalog import EXAM_TYPES, get_exam_subjects, get_exam_type
from exams.schemas import ExamTypeResponse, SubjectResponse

router = APIRouter()


@router.get("/exams", response_model=List[ExamTypeResponse])
def get_exams():
    return [
        ExamTypeResponse(key=e.key, label=e.label, subject_count=len(get_exam_subjects(e.key)))
        for e in EXAM_TYPES
    ]


@router.get("/exams/{exam_type}/subjects", response_model=List[SubjectResponse])
def get_subjects(exam_type: str):
    if get_exam_type(exam_type) is None:
        raise HTTPException(status_code=404, detail="Exam type not found")
    return [SubjectResponse(**s.model_dump()) for s in get_exam_subjects(exam_type)]
