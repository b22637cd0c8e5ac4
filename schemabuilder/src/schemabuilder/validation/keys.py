"""Key conformance checks for a matched table."""

from schemabuilder.ir.scenario import GroupingRule
from schemabuilder.ir.verdict import KeyVerdict, ReasonCode
from .snapshot import TableRecord


def check_keys(rule: GroupingRule, table: TableRecord) -> KeyVerdict:
    """
    Compare a matched table's key flags with what the rule expects.

    Primary keys must equal the expected set exactly. Foreign keys only
    need to include the expected set; extra foreign keys are accepted.
    A primary key failure is reported before a foreign key failure.

    Args:
        rule: Rule the table was matched against
        table: The matched table

    Returns:
        KeyVerdict with ok=True, or the first failing condition
    """
    if table.pks != rule.expected_pks:
        return KeyVerdict(
            ok=False,
            reason=ReasonCode.PRIMARY_KEY_MISMATCH,
            expected=rule.pks,
            found=tuple(sorted(table.pks)),
            missing=tuple(pk for pk in rule.pks if pk not in table.pks),
        )

    missing_fks = tuple(fk for fk in rule.fks if fk not in table.fks)
    if missing_fks:
        return KeyVerdict(
            ok=False,
            reason=ReasonCode.FOREIGN_KEY_MISSING,
            expected=rule.fks,
            found=tuple(sorted(table.fks)),
            missing=missing_fks,
        )

    return KeyVerdict(ok=True)
