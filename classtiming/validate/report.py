from __future__ import annotations

import json
from pathlib import Path
from typing import Dict


def write_validation_report(report: Dict[str, object], outputs_dir: Path) -> None:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    with (outputs_dir / "validation.json").open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)


def format_validation_report(report: Dict[str, object]) -> str:
    lines: list[str] = []
    lines.append(f"valid: {report.get('valid')}")
    lines.append(f"periods: {report.get('period_count')}, breaks: {report.get('break_count')}")
    lines.append(f"day: {report.get('first_start')} - {report.get('last_end')}")
    if report.get("empty_periods"):
        lines.append("no periods defined")
    for key in ("format_violations", "order_violations", "overlaps", "school_day_violations"):
        found = report.get(key, [])
        lines.append(f"{key}: {len(found)}")
        if isinstance(found, list):
            for item in found:
                lines.append(f"  - {item}")
    return "\n".join(lines)
