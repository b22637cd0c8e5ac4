"""Grouping matcher: locate the table that holds a rule's attributes."""

from typing import Optional, Sequence
from schemabuilder.ir.scenario import GroupingRule
from schemabuilder.config.logging import get_logger
from .snapshot import Snapshot, TableRecord

logger = get_logger(__name__)


def has_enough_tables(snapshot: Snapshot, rules: Sequence[GroupingRule]) -> bool:
    """Necessary condition: at least one table per rule."""
    return len(snapshot) >= len(rules)


def find_match(rule: GroupingRule, snapshot: Snapshot) -> Optional[TableRecord]:
    """
    Find the first table whose attribute names include all of ``rule.must_contain``.

    The earliest table in snapshot order wins even when a later table would
    also match. The same table may be returned for several rules.

    Args:
        rule: Grouping rule to satisfy
        snapshot: Snapshot of the user's tables

    Returns:
        The matching TableRecord, or None if no table contains the grouping
    """
    required = rule.required
    for index, record in enumerate(snapshot):
        if required <= record.names:
            logger.debug(f"Rule {sorted(required)} matched table #{index}")
            return record
    logger.debug(f"Rule {sorted(required)} matched no table")
    return None
