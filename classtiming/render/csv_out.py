from __future__ import annotations

from pathlib import Path
from typing import List

from ..clock import duration
from .timeline import TimelineEntry

HEADER = "Kind,Name,ShortName,Start,End,Type,Minutes"


def timeline_csv(entries: List[TimelineEntry]) -> str:
    lines: List[str] = [HEADER]
    for e in entries:
        mins = duration(e.start_time, e.end_time)
        lines.append(
            f"{e.kind},{e.name},{e.item.short_name},{e.start_time},{e.end_time},{e.type},{mins}"
        )
    return "\n".join(lines)


def write_timeline_csv(text: str, outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / "timeline.csv"
    with out_path.open("w", encoding="utf-8") as f:
        f.write(text)
    return out_path
