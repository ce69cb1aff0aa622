from .edit import (
    add_break,
    add_period,
    new_break,
    new_period,
    remove_break,
    remove_period,
    update_break,
    update_period,
)
from .generate import check_params, generate

__all__ = [
    "generate",
    "check_params",
    "add_period",
    "add_break",
    "update_period",
    "update_break",
    "remove_period",
    "remove_break",
    "new_period",
    "new_break",
]
