from __future__ import annotations

import logging
from typing import List

from ..clock import MINUTES_PER_DAY, from_clock, to_clock
from ..errors import ValidationError
from ..models.params import GenerationParams
from ..models.period import Break, Period
from ..models.schedule import ScheduleSet


def check_params(params: GenerationParams) -> None:
    n = params.periods_count
    if n < 1:
        raise ValidationError(f"periods_count must be at least 1, got {n}")
    for field_name in ("period_duration", "short_break_duration", "lunch_duration"):
        value = getattr(params, field_name)
        if value <= 0:
            raise ValidationError(f"{field_name} must be positive, got {value}")
    if not 1 <= params.lunch_after_period <= n:
        raise ValidationError(
            f"lunch_after_period {params.lunch_after_period} outside 1..{n}"
        )
    bad = sorted(p for p in params.short_break_after if not 1 <= p <= n)
    if bad:
        raise ValidationError(f"short_break_after {bad} outside 1..{n}")


def _advance(cursor: int, minutes: int) -> int:
    cursor += minutes
    if cursor >= MINUTES_PER_DAY:
        raise ValidationError(f"Schedule runs past 23:59 (cursor at minute {cursor})")
    return cursor


def generate(params: GenerationParams) -> ScheduleSet:
    """Build the day's periods and breaks from compact parameters.

    A single cursor walks forward from ``start_time``; each period is
    followed by at most one break. Lunch wins over a short break requested
    for the same period, and nothing is placed after the last period.
    """
    logger = logging.getLogger(__name__)
    check_params(params)

    cursor = from_clock(params.start_time)
    periods: List[Period] = []
    breaks: List[Break] = []
    last = params.periods_count

    for i in range(1, last + 1):
        start = to_clock(cursor)
        cursor = _advance(cursor, params.period_duration)
        periods.append(
            Period(
                id=f"gen-period-{i}",
                period_number=i,
                name=f"Period {i}",
                short_name=f"P{i}",
                start_time=start,
                end_time=to_clock(cursor),
                period_type="regular",
                order_index=i - 1,
            )
        )

        if i == params.lunch_after_period and i < last:
            start = to_clock(cursor)
            cursor = _advance(cursor, params.lunch_duration)
            breaks.append(
                Break(
                    id=f"gen-lunch-{i}",
                    name="Lunch Break",
                    short_name="Lunch",
                    start_time=start,
                    end_time=to_clock(cursor),
                    break_type="lunch",
                    after_period=i,
                    order_index=len(breaks),
                )
            )
        elif i in params.short_break_after and i < last and i != params.lunch_after_period:
            start = to_clock(cursor)
            cursor = _advance(cursor, params.short_break_duration)
            breaks.append(
                Break(
                    id=f"gen-break-{i}",
                    name="Short Break",
                    short_name="Break",
                    start_time=start,
                    end_time=to_clock(cursor),
                    break_type="short_break",
                    after_period=i,
                    order_index=len(breaks),
                )
            )

    logger.info(f"Generated {len(periods)} periods and {len(breaks)} breaks")
    return ScheduleSet(periods=tuple(periods), breaks=tuple(breaks))
