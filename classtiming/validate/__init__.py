from .checks import validate_schedule
from .intervals import check_candidate, find_conflict, overlaps, validate_order

__all__ = [
    "validate_order",
    "overlaps",
    "find_conflict",
    "check_candidate",
    "validate_schedule",
]
