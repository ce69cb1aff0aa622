from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ..models.params import GenerationParams
from ..models.period import Break, Period
from ..models.schedule import ScheduleSet


@dataclass
class LoadedConfig:
    generation: Dict[str, Any]
    school: Dict[str, Any]

    def params(self, **overrides: Any) -> GenerationParams:
        data = dict(self.generation)
        data.update({k: v for k, v in overrides.items() if v is not None})
        return GenerationParams.from_dict(data)

    def school_window(self) -> Optional[Tuple[str, str]]:
        start = self.school.get("schoolStartTime")
        end = self.school.get("schoolEndTime")
        if start and end:
            return (start, end)
        return None


def load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_config(root: Path) -> LoadedConfig:
    data = load_json(root / "data" / "timing.json")
    return LoadedConfig(
        generation=data.get("generation", {}),
        school=data.get("school", {}),
    )


def period_to_dict(p: Period) -> Dict[str, Any]:
    return {
        "id": p.id,
        "periodNumber": p.period_number,
        "name": p.name,
        "shortName": p.short_name,
        "startTime": p.start_time,
        "endTime": p.end_time,
        "periodType": p.period_type,
        "orderIndex": p.order_index,
    }


def break_to_dict(b: Break) -> Dict[str, Any]:
    return {
        "id": b.id,
        "name": b.name,
        "shortName": b.short_name,
        "startTime": b.start_time,
        "endTime": b.end_time,
        "breakType": b.break_type,
        "afterPeriod": b.after_period,
        "orderIndex": b.order_index,
    }


def schedule_to_dict(schedule: ScheduleSet) -> Dict[str, Any]:
    return {
        "periods": [period_to_dict(p) for p in schedule.periods],
        "breaks": [break_to_dict(b) for b in schedule.breaks],
    }


def schedule_from_dict(data: Dict[str, Any]) -> ScheduleSet:
    periods = [
        Period(
            id=str(p.get("id", "")),
            period_number=int(p.get("periodNumber", idx + 1)),
            name=p.get("name", ""),
            short_name=p.get("shortName", ""),
            start_time=p["startTime"],
            end_time=p["endTime"],
            period_type=p.get("periodType", "regular"),
            order_index=int(p.get("orderIndex", idx)),
        )
        for idx, p in enumerate(data.get("periods", []))
    ]
    breaks = [
        Break(
            id=str(b.get("id", "")),
            name=b.get("name", ""),
            short_name=b.get("shortName", ""),
            start_time=b["startTime"],
            end_time=b["endTime"],
            break_type=b.get("breakType", "short_break"),
            after_period=int(b.get("afterPeriod", 1)),
            order_index=int(b.get("orderIndex", idx)),
        )
        for idx, b in enumerate(data.get("breaks", []))
    ]
    return ScheduleSet(periods=tuple(periods), breaks=tuple(breaks))


def load_schedule(path: Path) -> ScheduleSet:
    return schedule_from_dict(load_json(path))


def write_schedule(schedule: ScheduleSet, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(schedule_to_dict(schedule), f, indent=2)
    return path
