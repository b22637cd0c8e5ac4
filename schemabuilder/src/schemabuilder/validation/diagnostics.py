"""Diagnostic composer: turn match and key results into one verdict."""

import random
from typing import Callable, Mapping, Optional, Sequence
from schemabuilder.ir.scenario import GroupingRule, Scenario
from schemabuilder.ir.verdict import Outcome, ReasonCode, ValidationVerdict
from schemabuilder.config.settings import get_settings
from schemabuilder.config.logging import get_logger
from .snapshot import Snapshot
from .matcher import has_enough_tables, find_match
from .keys import check_keys

logger = get_logger(__name__)

# Given the scenario's anomaly mapping, return one narrative (or None if empty)
AnomalyPicker = Callable[[Mapping[str, str]], Optional[str]]

SUCCESS_HEADLINE = "Normalization Complete!"
FAILURE_HEADLINE = "Validation Failed"
INSUFFICIENT_TABLES_HEADLINE = "Not enough tables."

MESSAGES = {
    ReasonCode.INSUFFICIENT_TABLES: (
        "You have {count} tables, but the normalized form typically requires at least {required}."
    ),
    ReasonCode.MISSING_GROUPING: (
        "Could not find a table containing the group: [{group}]. "
        "This grouping is essential for {title}."
    ),
    ReasonCode.PRIMARY_KEY_MISMATCH: (
        "A table has the right data [{group}], but the Primary Key is incorrect. "
        "Expected PK: {expected}."
    ),
    ReasonCode.FOREIGN_KEY_MISSING: (
        "A table [{group}] is missing Foreign Key markings. Expected FKs: {expected}."
    ),
}
SUCCESS_MESSAGE = "Great job! You successfully transformed the schema to {title}."
CONSEQUENCE_SUFFIX = "\n\nRemember the consequence: {anomaly}"


def random_anomaly_picker(seed: Optional[int] = None) -> AnomalyPicker:
    """
    Build a picker choosing uniformly among anomaly kinds.

    Args:
        seed: Seed for a private random generator; None seeds from the OS

    Returns:
        Picker function
    """
    rng = random.Random(seed)

    def pick(anomalies: Mapping[str, str]) -> Optional[str]:
        if not anomalies:
            return None
        kind = rng.choice(sorted(anomalies))
        return anomalies[kind]

    return pick


def _join(names: Sequence[str]) -> str:
    return ", ".join(names)


def _failure(
    scenario: Scenario,
    reason: ReasonCode,
    rule: GroupingRule,
    expected: Sequence[str],
    pick_anomaly: AnomalyPicker,
) -> ValidationVerdict:
    message = MESSAGES[reason].format(
        group=_join(rule.must_contain),
        title=scenario.title,
        expected=_join(expected),
    )
    anomaly = pick_anomaly(scenario.anomalies)
    detail = message + CONSEQUENCE_SUFFIX.format(anomaly=anomaly) if anomaly else message
    logger.info(f"Validation failed for '{scenario.title}': {reason.value}")
    return ValidationVerdict(
        outcome=Outcome.FAILURE,
        headline=FAILURE_HEADLINE,
        detail=detail,
        reason_code=reason,
        group=list(rule.must_contain),
        expected=list(expected),
        anomaly=anomaly,
    )


def compose_verdict(
    rules: Sequence[GroupingRule],
    snapshot: Snapshot,
    scenario: Scenario,
    pick_anomaly: Optional[AnomalyPicker] = None,
) -> ValidationVerdict:
    """
    Validate a snapshot against a solution and describe the result.

    Checks the table count first, then each rule in order, stopping at the
    first failing rule. Extra tables and unplaced pool attributes are not
    checked. Only the anomaly narrative appended to a failure is random.

    Args:
        rules: Grouping rules of the solution
        snapshot: Snapshot of the user's tables
        scenario: Scenario supplying the title and anomaly narratives
        pick_anomaly: Narrative selector; defaults to a random picker seeded
            from the ``anomaly_seed`` setting

    Returns:
        ValidationVerdict
    """
    if pick_anomaly is None:
        pick_anomaly = random_anomaly_picker(get_settings().anomaly_seed)

    if not has_enough_tables(snapshot, rules):
        logger.info(
            f"Validation failed for '{scenario.title}': "
            f"{len(snapshot)} tables for {len(rules)} rules"
        )
        return ValidationVerdict(
            outcome=Outcome.FAILURE,
            headline=INSUFFICIENT_TABLES_HEADLINE,
            detail=MESSAGES[ReasonCode.INSUFFICIENT_TABLES].format(
                count=len(snapshot), required=len(rules)
            ),
            reason_code=ReasonCode.INSUFFICIENT_TABLES,
            table_count=len(snapshot),
            required_tables=len(rules),
        )

    for rule in rules:
        match = find_match(rule, snapshot)
        if match is None:
            return _failure(
                scenario, ReasonCode.MISSING_GROUPING, rule, rule.must_contain, pick_anomaly
            )

        key_verdict = check_keys(rule, match)
        if not key_verdict.ok:
            return _failure(
                scenario, key_verdict.reason, rule, key_verdict.expected, pick_anomaly
            )

    logger.info(f"Validation passed for '{scenario.title}'")
    return ValidationVerdict(
        outcome=Outcome.SUCCESS,
        headline=SUCCESS_HEADLINE,
        detail=SUCCESS_MESSAGE.format(title=scenario.title),
    )
