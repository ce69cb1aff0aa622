from __future__ import annotations

from typing import Optional, Sequence, TypeVar, Union

from ..clock import from_clock
from ..errors import ConflictError, OrderError
from ..models.schedule import Interval, ScheduleSet

# Minute offsets or zero-padded HH:MM strings; both order the same way.
T = TypeVar("T", int, str)


def validate_order(start: Union[int, str], end: Union[int, str]) -> bool:
    if isinstance(start, str):
        start = from_clock(start)
    if isinstance(end, str):
        end = from_clock(end)
    return start < end


def overlaps(start1: T, end1: T, start2: T, end2: T) -> bool:
    # Half-open: back-to-back intervals only touch.
    return start1 < end2 and end1 > start2


def conflict_index(
    start: str,
    end: str,
    existing: Sequence[Interval],
    exclude_index: Optional[int] = None,
) -> Optional[int]:
    for idx, (s, e, _) in enumerate(existing):
        if idx == exclude_index:
            continue
        if overlaps(start, end, s, e):
            return idx
    return None


def find_conflict(
    start: str,
    end: str,
    existing: Sequence[Interval],
    exclude_index: Optional[int] = None,
) -> Optional[str]:
    """Return the label of the first entry of ``existing`` overlapping ``[start, end)``.

    ``exclude_index`` skips the entry being edited in place so it does not
    collide with its own previous position.
    """
    idx = conflict_index(start, end, existing, exclude_index)
    return None if idx is None else existing[idx][2]


def check_candidate(
    schedule: ScheduleSet,
    start: str,
    end: str,
    exclude_index: Optional[int] = None,
) -> None:
    if not validate_order(start, end):
        raise OrderError(start, end)
    existing = schedule.intervals()
    idx = conflict_index(start, end, existing, exclude_index)
    if idx is not None:
        s, e, label = existing[idx]
        raise ConflictError(label, s, e)
