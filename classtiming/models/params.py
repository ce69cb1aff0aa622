from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet


@dataclass(frozen=True)
class GenerationParams:
    start_time: str
    periods_count: int
    period_duration: int
    short_break_duration: int
    short_break_after: FrozenSet[int]
    lunch_duration: int
    lunch_after_period: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationParams":
        # Keys follow the persisted form (camelCase)
        return cls(
            start_time=str(data["startTime"]),
            periods_count=int(data["periodsCount"]),
            period_duration=int(data["periodDuration"]),
            short_break_duration=int(data["shortBreakDuration"]),
            short_break_after=frozenset(int(p) for p in data.get("shortBreakAfter", [])),
            lunch_duration=int(data["lunchDuration"]),
            lunch_after_period=int(data["lunchAfterPeriod"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startTime": self.start_time,
            "periodsCount": self.periods_count,
            "periodDuration": self.period_duration,
            "shortBreakDuration": self.short_break_duration,
            "shortBreakAfter": sorted(self.short_break_after),
            "lunchDuration": self.lunch_duration,
            "lunchAfterPeriod": self.lunch_after_period,
        }
