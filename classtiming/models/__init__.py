# Re-export common types
from .params import GenerationParams
from .period import BREAK_TYPES, PERIOD_TYPES, Break, Period
from .schedule import ScheduleSet

__all__ = [
    "Period",
    "Break",
    "ScheduleSet",
    "GenerationParams",
    "PERIOD_TYPES",
    "BREAK_TYPES",
]
