from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Tuple

from .period import Break, Period

Interval = Tuple[str, str, str]  # (start, end, label)


@dataclass(frozen=True)
class ScheduleSet:
    periods: Tuple[Period, ...] = field(default_factory=tuple)
    breaks: Tuple[Break, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "ScheduleSet":
        return cls()

    def intervals(self) -> List[Interval]:
        """Periods first, then breaks; positions are what ``exclude_index`` refers to."""
        out: List[Interval] = [(p.start_time, p.end_time, p.label) for p in self.periods]
        out.extend((b.start_time, b.end_time, b.label) for b in self.breaks)
        return out

    def with_periods(self, periods: Iterable[Period]) -> "ScheduleSet":
        return replace(self, periods=tuple(periods))

    def with_breaks(self, breaks: Iterable[Break]) -> "ScheduleSet":
        return replace(self, breaks=tuple(breaks))
