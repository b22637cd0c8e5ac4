"""Level editing session."""

from .operations import (
    start_level,
    add_table,
    place_attribute,
    remove_attribute,
    toggle_key,
    delete_table,
    validate,
)
from .progress import LevelAdvance, SessionTimer, next_level, format_time

__all__ = [
    "start_level",
    "add_table",
    "place_attribute",
    "remove_attribute",
    "toggle_key",
    "delete_table",
    "validate",
    "LevelAdvance",
    "SessionTimer",
    "next_level",
    "format_time",
]
