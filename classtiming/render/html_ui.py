from __future__ import annotations

from html import escape
from pathlib import Path
from typing import List

from ..clock import duration, to_12h
from ..models.period import BREAK_TYPES, PERIOD_TYPES
from .timeline import TimelineEntry

TYPE_COLORS = {
    "regular": "#3b82f6",
    "lab": "#a855f7",
    "activity": "#22c55e",
    "assembly": "#f59e0b",
    "sports": "#f97316",
    "short_break": "#fbbf24",
    "lunch": "#f97316",
    "prayer": "#a855f7",
}


def type_label(entry: TimelineEntry) -> str:
    labels = PERIOD_TYPES if entry.kind == "period" else BREAK_TYPES
    return labels.get(entry.type, entry.type)


def build_html(entries: List[TimelineEntry], title: str = "Class Timings") -> str:
    def row_html(e: TimelineEntry) -> str:
        clr = TYPE_COLORS.get(e.type, "#9ca3af")
        return (
            f"<tr class='{e.kind}'>"
            f"<td><span class='swatch' style='background:{clr}'></span></td>"
            f"<td class='time'>{to_12h(e.start_time)} – {to_12h(e.end_time)}</td>"
            f"<td><strong>{escape(e.name)}</strong>"
            f"<br/><span class='short'>{escape(e.item.short_name)}</span></td>"
            f"<td>{escape(type_label(e))}</td>"
            f"<td class='mins'>{duration(e.start_time, e.end_time)} min</td>"
            f"</tr>"
        )

    if entries:
        span = f"{to_12h(entries[0].start_time)} – {to_12h(entries[-1].end_time)}"
    else:
        span = "No periods or breaks"
    n_periods = sum(1 for e in entries if e.kind == "period")
    n_breaks = len(entries) - n_periods

    style = """
    <style>
    body { font-family: system-ui, Arial, sans-serif; margin: 20px; color: #222; }
    h1 { margin-bottom: 4px; }
    .summary { color: #555; margin-bottom: 16px; }
    .tl { border-collapse: collapse; width: 100%; max-width: 720px; }
    .tl td { border-bottom: 1px solid #eee; padding: 8px; vertical-align: middle; }
    .tl .break { background: #fffbeb; }
    .swatch { width: 12px; height: 12px; display: inline-block; border-radius: 6px; }
    .time { font-variant-numeric: tabular-nums; white-space: nowrap; }
    .short { font-size: 12px; color: #666; }
    .mins { text-align: right; color: #444; }
    </style>
    """

    html = (
        f"<html><head><meta charset='utf-8'><title>{escape(title)}</title>" + style + "</head><body>"
        f"<h1>{escape(title)}</h1>"
        f"<div class='summary'>{span} · {n_periods} periods, {n_breaks} breaks</div>"
        "<table class='tl'><tbody>"
        + "".join(row_html(e) for e in entries)
        + "</tbody></table></body></html>"
    )
    return html


def write_html_ui(entries: List[TimelineEntry], outputs_dir: Path, title: str = "Class Timings") -> Path:
    ui_dir = outputs_dir / "ui"
    ui_dir.mkdir(parents=True, exist_ok=True)
    out_path = ui_dir / "index.html"
    out_path.write_text(build_html(entries, title), encoding="utf-8")
    return out_path
