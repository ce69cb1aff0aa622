"""Daily class-timing generation and interval-conflict validation."""

from .clock import from_clock, to_12h, to_clock
from .errors import ConflictError, FormatError, OrderError, TimingError, ValidationError
from .models import BREAK_TYPES, PERIOD_TYPES, Break, GenerationParams, Period, ScheduleSet
from .render.timeline import TimelineEntry, assemble, timeline
from .scheduler import (
    add_break,
    add_period,
    generate,
    new_break,
    new_period,
    remove_break,
    remove_period,
    update_break,
    update_period,
)
from .validate import find_conflict, overlaps, validate_order, validate_schedule

__all__ = [
    "to_clock",
    "from_clock",
    "to_12h",
    "TimingError",
    "ValidationError",
    "OrderError",
    "ConflictError",
    "FormatError",
    "Period",
    "Break",
    "ScheduleSet",
    "GenerationParams",
    "PERIOD_TYPES",
    "BREAK_TYPES",
    "generate",
    "add_period",
    "add_break",
    "update_period",
    "update_break",
    "remove_period",
    "remove_break",
    "new_period",
    "new_break",
    "timeline",
    "assemble",
    "TimelineEntry",
    "validate_order",
    "overlaps",
    "find_conflict",
    "validate_schedule",
]
