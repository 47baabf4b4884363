"""Tests for planner.allocator."""
from planner.allocator import partition_subjects, pick_subject, rotation_index
from planner.schemas import Subject

P = Subject(key="physics", label="Physics")
C = Subject(key="chemistry", label="Chemistry")
B = Subject(key="biology", label="Biology")


def test_rotation_index() -> None:
    assert rotation_index(1, 0) == 0
    assert rotation_index(1, 3) == 3
    assert rotation_index(3, 2) == 10


def test_partition_keeps_catalog_order() -> None:
    focus, other = partition_subjects([P, C, B], {"biology", "physics"})
    assert focus == [P, B]
    assert other == [C]


def test_morning_slots_prefer_focus() -> None:
    assert pick_subject([P, C], [B], 1, 0, 0) == (P, 1)
    assert pick_subject([P, C], [B], 1, 1, 1) == (C, 2)


def test_third_slot_prefers_other() -> None:
    assert pick_subject([P, C], [B], 1, 2, 2) == (B, 3)


def test_fourth_slot_follows_counter_parity() -> None:
    subject, _ = pick_subject([P, C], [B], 1, 3, 0)
    assert subject == C  # rotation index 3 over two focus subjects
    subject, _ = pick_subject([P, C], [B], 1, 3, 1)
    assert subject == B


def test_fourth_slot_alternates_between_days() -> None:
    # Within a plan the fourth slot is always reached with counter 4n + 3
    day1, _ = pick_subject([P, C], [B], 1, 3, 3)
    day2, _ = pick_subject([P, C], [B], 2, 3, 7)
    day3, _ = pick_subject([P, C], [B], 3, 3, 11)
    assert day1 == B
    assert day2 in (P, C)
    assert day3 == B


def test_falls_back_to_the_other_partition() -> None:
    assert pick_subject([], [B, C], 1, 0, 0) == (B, 1)
    assert pick_subject([P, C], [], 1, 2, 2) == (P, 3)


def test_falls_back_to_catalog_when_partitions_empty() -> None:
    assert pick_subject([], [], 1, 1, 0, catalog=[P, C]) == (C, 1)


def test_returns_none_and_still_advances_counter() -> None:
    assert pick_subject([], [], 2, 3, 5) == (None, 6)
    assert pick_subject([], [], 1, 0, 0, catalog=[]) == (None, 1)
