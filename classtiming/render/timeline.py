from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Union

from ..models.period import Break, Period
from ..models.schedule import ScheduleSet

KIND_RANK = {"period": 0, "break": 1}


@dataclass(frozen=True)
class TimelineEntry:
    kind: str  # period, break
    item: Union[Period, Break]

    @property
    def start_time(self) -> str:
        return self.item.start_time

    @property
    def end_time(self) -> str:
        return self.item.end_time

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def label(self) -> str:
        return self.item.label

    @property
    def type(self) -> str:
        if isinstance(self.item, Period):
            return self.item.period_type
        return self.item.break_type


def assemble(periods: Iterable[Period], breaks: Iterable[Break]) -> List[TimelineEntry]:
    entries = [TimelineEntry("period", p) for p in periods]
    entries.extend(TimelineEntry("break", b) for b in breaks)
    # Equal start times: periods before breaks, then input order (sorted() is stable).
    return sorted(entries, key=lambda e: (e.start_time, KIND_RANK[e.kind]))


def timeline(schedule: ScheduleSet) -> List[TimelineEntry]:
    return assemble(schedule.periods, schedule.breaks)
