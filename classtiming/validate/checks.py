from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..clock import from_clock
from ..errors import FormatError
from ..models.schedule import ScheduleSet
from .intervals import overlaps


def validate_schedule(
    schedule: ScheduleSet,
    school_window: Optional[Tuple[str, str]] = None,
) -> Dict[str, object]:
    """Audit a whole set, e.g. one loaded from storage and edited elsewhere.

    Entries whose times do not parse are listed under ``format_violations``
    and left out of the other checks.
    """
    report: Dict[str, object] = {}

    report["period_count"] = len(schedule.periods)
    report["break_count"] = len(schedule.breaks)
    # A template without periods cannot be saved
    report["empty_periods"] = not schedule.periods

    items: List[Tuple[str, str, str]] = []
    malformed: List[str] = []
    for s, e, label in schedule.intervals():
        try:
            from_clock(s)
            from_clock(e)
        except FormatError:
            malformed.append(f"{label} {s}-{e}")
            continue
        items.append((s, e, label))
    report["format_violations"] = malformed

    # Parsed times are zero-padded, so string order is time order
    report["order_violations"] = [f"{label} {s}-{e}" for s, e, label in items if not s < e]

    # Pairwise scan; a day holds a few dozen entries at most
    pairs: List[str] = []
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            s1, e1, l1 = items[i]
            s2, e2, l2 = items[j]
            if overlaps(s1, e1, s2, e2):
                pairs.append(f"{l1} ({s1}-{e1}) x {l2} ({s2}-{e2})")
    report["overlaps"] = pairs

    if items:
        report["first_start"] = min(s for s, _, _ in items)
        report["last_end"] = max(e for _, e, _ in items)
    else:
        report["first_start"] = None
        report["last_end"] = None

    outside: List[str] = []
    if school_window is not None:
        open_at, close_at = school_window
        for s, e, label in items:
            if s < open_at or e > close_at:
                outside.append(f"{label} {s}-{e}")
    report["school_day_violations"] = outside

    report["valid"] = not (malformed or report["order_violations"] or pairs)
    return report
