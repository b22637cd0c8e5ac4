"""Schema validation engine."""

from .snapshot import TableRecord, Snapshot, build_snapshot
from .matcher import has_enough_tables, find_match
from .keys import check_keys
from .diagnostics import AnomalyPicker, compose_verdict, random_anomaly_picker

__all__ = [
    "TableRecord",
    "Snapshot",
    "build_snapshot",
    "has_enough_tables",
    "find_match",
    "check_keys",
    "AnomalyPicker",
    "compose_verdict",
    "random_anomaly_picker",
]
