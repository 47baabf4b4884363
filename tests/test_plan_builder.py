"""Tests for planner.plan_builder."""
from collections import Counter
from datetime import date, datetime, timedelta, timezone

import pytest

from planner.plan_builder import (
    STUDY_TIPS,
    InvalidRequestError,
    build_plan,
    count_total_days,
)
from planner.schemas import ScheduleRequest, Subject

TODAY = date(2024, 1, 1)
NOW = datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)


def _request(exam_date, focus=(), exam_type="neet"):
    return ScheduleRequest(exam_type=exam_type, exam_date=exam_date, focus_subject_keys=list(focus))


def _study_labels(plan):
    return [t.subject_label for t in plan.tasks if t.category == "study"]


def test_count_total_days() -> None:
    assert count_total_days(TODAY, TODAY) == 1
    assert count_total_days(TODAY, date(2024, 1, 3)) == 3


def test_three_day_plan_has_42_tasks(neet_subjects) -> None:
    plan = build_plan(_request(date(2024, 1, 3), ["physics"]), neet_subjects, today=TODAY, now=NOW)
    assert len(plan.tasks) == 42
    assert sorted({t.date for t in plan.tasks}) == [TODAY + timedelta(days=i) for i in range(3)]


def test_same_day_exam_gives_one_day(neet_subjects) -> None:
    plan = build_plan(_request(TODAY), neet_subjects, today=TODAY, now=NOW)
    assert len(plan.tasks) == 14
    assert {t.date for t in plan.tasks} == {TODAY}


def test_past_exam_date_is_rejected(neet_subjects) -> None:
    with pytest.raises(InvalidRequestError):
        build_plan(_request(TODAY - timedelta(days=1)), neet_subjects, today=TODAY, now=NOW)


def test_regeneration_is_deterministic(neet_subjects) -> None:
    request = _request(date(2024, 1, 7), ["chemistry"])
    first = build_plan(request, neet_subjects, today=TODAY, now=NOW)
    second = build_plan(request, neet_subjects, today=TODAY, now=NOW)
    assert [t.model_dump() for t in first.tasks] == [t.model_dump() for t in second.tasks]
    assert [t.id for t in first.tasks] == [t.id for t in second.tasks]


def test_task_ids_unique_across_plan(neet_subjects) -> None:
    plan = build_plan(_request(date(2024, 1, 20)), neet_subjects, today=TODAY, now=NOW)
    ids = [t.id for t in plan.tasks]
    assert len(ids) == len(set(ids))


def test_focus_subjects_get_majority(neet_subjects) -> None:
    plan = build_plan(_request(date(2024, 1, 10), ["physics", "chemistry"]), neet_subjects, today=TODAY, now=NOW)
    labels = _study_labels(plan)
    assert len(labels) == 40
    counts = Counter(labels)
    assert counts["Physics"] + counts["Chemistry"] >= 24
    assert counts["Biology"] > 0


def test_every_subject_appears() -> None:
    catalog = [Subject(key=k, label=k.title()) for k in ("algebra", "geometry", "calculus", "history", "poetry")]
    plan = build_plan(
        _request(date(2024, 1, 5), ["algebra", "geometry", "calculus"], exam_type="custom"),
        catalog, today=TODAY, now=NOW,
    )
    labels = _study_labels(plan)
    assert len(labels) == 20
    assert set(labels) == {s.label for s in catalog}


def test_rotation_continues_across_days(neet_subjects) -> None:
    plan = build_plan(_request(date(2024, 1, 2), ["physics", "chemistry"]), neet_subjects, today=TODAY, now=NOW)
    labels = _study_labels(plan)
    # Day 2 morning picks rotation indexes 4 and 5, not 0 and 1 again
    assert labels[4:6] == ["Physics", "Chemistry"]
    assert labels[3] == "Biology" and labels[7] in ("Physics", "Chemistry")


def test_empty_catalog_falls_back_to_general_revision() -> None:
    plan = build_plan(_request(date(2024, 1, 2), exam_type="unknown"), [], today=TODAY, now=NOW)
    study = [t for t in plan.tasks if t.category == "study"]
    assert len(study) == 8
    assert all(t.subject_label == "General Revision" for t in study)
    assert all(t.activity.startswith("Study: General Revision") for t in study)


def test_plan_metadata(neet_subjects) -> None:
    request = _request(date(2024, 1, 2), ["physics", "physics", "biology"])
    plan = build_plan(request, neet_subjects, today=TODAY, now=NOW)
    assert plan.exam_type == "neet"
    assert plan.exam_date == date(2024, 1, 2)
    assert plan.focus_subject_keys == ["physics", "biology"]
    assert plan.created_at == NOW
    assert plan.tips == STUDY_TIPS
    assert len(plan.tips) == 5
    assert plan.id.startswith("plan-")
