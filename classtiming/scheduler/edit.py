from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import List

from ..errors import ValidationError
from ..models.period import Break, Period
from ..models.schedule import ScheduleSet
from ..validate.intervals import check_candidate


def _temp_id() -> str:
    return f"temp-{uuid.uuid4().hex}"


def new_period(
    period_number: int,
    name: str,
    start_time: str,
    end_time: str,
    *,
    short_name: str = "",
    period_type: str = "regular",
    id: str | None = None,
) -> Period:
    return Period(
        id=id or _temp_id(),
        period_number=period_number,
        name=name,
        short_name=short_name,
        start_time=start_time,
        end_time=end_time,
        period_type=period_type,
    )


def new_break(
    name: str,
    start_time: str,
    end_time: str,
    *,
    short_name: str = "",
    break_type: str = "short_break",
    after_period: int = 1,
    id: str | None = None,
) -> Break:
    return Break(
        id=id or _temp_id(),
        name=name,
        short_name=short_name,
        start_time=start_time,
        end_time=end_time,
        break_type=break_type,
        after_period=after_period,
    )


def _require_name(candidate) -> None:
    if not candidate.name.strip():
        raise ValidationError("Fill all required fields: name is empty")


def _by_start(items: List) -> List:
    # stable; equal starts keep their current order
    return sorted(items, key=lambda x: x.start_time)


def add_period(schedule: ScheduleSet, candidate: Period) -> ScheduleSet:
    logger = logging.getLogger(__name__)
    _require_name(candidate)
    check_candidate(schedule, candidate.start_time, candidate.end_time)
    added = replace(candidate, order_index=len(schedule.periods))
    logger.info(f"Added {added.label} {added.start_time}-{added.end_time}")
    return schedule.with_periods(_by_start([*schedule.periods, added]))


def add_break(schedule: ScheduleSet, candidate: Break) -> ScheduleSet:
    logger = logging.getLogger(__name__)
    _require_name(candidate)
    check_candidate(schedule, candidate.start_time, candidate.end_time)
    added = replace(candidate, order_index=len(schedule.breaks))
    logger.info(f"Added {added.label} {added.start_time}-{added.end_time}")
    return schedule.with_breaks(_by_start([*schedule.breaks, added]))


def update_period(schedule: ScheduleSet, index: int, candidate: Period) -> ScheduleSet:
    if not 0 <= index < len(schedule.periods):
        raise IndexError(f"No period at position {index}")
    _require_name(candidate)
    # periods come first in intervals(), so the position is the same
    check_candidate(schedule, candidate.start_time, candidate.end_time, exclude_index=index)
    periods = list(schedule.periods)
    periods[index] = replace(candidate, order_index=periods[index].order_index)
    return schedule.with_periods(_by_start(periods))


def update_break(schedule: ScheduleSet, index: int, candidate: Break) -> ScheduleSet:
    if not 0 <= index < len(schedule.breaks):
        raise IndexError(f"No break at position {index}")
    _require_name(candidate)
    check_candidate(
        schedule,
        candidate.start_time,
        candidate.end_time,
        exclude_index=len(schedule.periods) + index,
    )
    breaks = list(schedule.breaks)
    breaks[index] = replace(candidate, order_index=breaks[index].order_index)
    return schedule.with_breaks(_by_start(breaks))


def remove_period(schedule: ScheduleSet, index: int) -> ScheduleSet:
    if not 0 <= index < len(schedule.periods):
        raise IndexError(f"No period at position {index}")
    return schedule.with_periods(p for i, p in enumerate(schedule.periods) if i != index)


def remove_break(schedule: ScheduleSet, index: int) -> ScheduleSet:
    if not 0 <= index < len(schedule.breaks):
        raise IndexError(f"No break at position {index}")
    return schedule.with_breaks(b for i, b in enumerate(schedule.breaks) if i != index)
