"""
Study-slot allocator.

Picks the subject for each of the four daily study slots. Focus subjects
(the ones the user asked to prioritise) get the two morning slots, the
afternoon slot goes to the remaining subjects and the late-afternoon slot
alternates between the two groups. That is roughly a 60/40 focus/other split
without tracking cumulative study time per subject.

The rotation counter is threaded explicitly: every call returns the next
counter value, which is always ``counter + 1``.
"""
from __future__ import annotations

from typing import Optional, Sequence

from planner.schemas import Subject

STUDY_SLOTS_PER_DAY = 4


def rotation_index(day_index: int, slot_index: int) -> int:
    """Position of a study slot in the whole plan (day_index is 1-based)."""
    return (day_index - 1) * STUDY_SLOTS_PER_DAY + slot_index


def partition_subjects(
    catalog: Sequence[Subject],
    focus_keys,
) -> tuple[list[Subject], list[Subject]]:
    """Split a catalog into (focus, other), both in catalog order."""
    focus_keys = set(focus_keys)
    focus = [s for s in catalog if s.key in focus_keys]
    other = [s for s in catalog if s.key not in focus_keys]
    return focus, other


def _prefers_focus(slot_index: int, counter: int) -> bool:
    if slot_index < 2:
        return True
    if slot_index == 2:
        return False
    # Fourth slot: counter parity, shifted by one for every completed day so
    # the preference flips from one day to the next.
    return (counter + counter // STUDY_SLOTS_PER_DAY) % 2 == 0


def pick_subject(
    focus_subjects: Sequence[Subject],
    other_subjects: Sequence[Subject],
    day_index: int,
    slot_index: int,
    counter: int,
    catalog: Optional[Sequence[Subject]] = None,
) -> tuple[Optional[Subject], int]:
    """Choose the subject for one study slot.

    Returns ``(subject, next_counter)``. ``subject`` is None only when both
    partitions and the fallback catalog are empty; the counter advances
    either way.
    """
    idx = rotation_index(day_index, slot_index)
    next_counter = counter + 1

    if _prefers_focus(slot_index, counter):
        preferred, fallback = focus_subjects, other_subjects
    else:
        preferred, fallback = other_subjects, focus_subjects

    for subjects in (preferred, fallback, catalog or ()):
        if subjects:
            return subjects[idx % len(subjects)], next_counter

    return None, next_counter
