"""Validation result types."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
from pydantic import BaseModel, Field


class Outcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class ReasonCode(str, Enum):
    """Closed set of reasons a schema can fail validation."""

    INSUFFICIENT_TABLES = "INSUFFICIENT_TABLES"
    MISSING_GROUPING = "MISSING_GROUPING"
    PRIMARY_KEY_MISMATCH = "PRIMARY_KEY_MISMATCH"
    FOREIGN_KEY_MISSING = "FOREIGN_KEY_MISSING"


@dataclass(frozen=True)
class KeyVerdict:
    """Outcome of checking the keys of one matched table against one rule."""

    ok: bool
    reason: Optional[ReasonCode] = None
    expected: Tuple[str, ...] = ()  # in rule order
    found: Tuple[str, ...] = ()  # sorted
    missing: Tuple[str, ...] = ()


class ValidationVerdict(BaseModel):
    """Single answer returned to the UI for one validation request."""

    outcome: Outcome
    headline: str
    detail: str
    reason_code: Optional[ReasonCode] = None
    group: List[str] = Field(default_factory=list)  # the failing rule's grouping
    expected: List[str] = Field(default_factory=list)  # expected key names
    table_count: Optional[int] = None
    required_tables: Optional[int] = None
    anomaly: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.outcome == Outcome.SUCCESS
