"""Order-preserving, identity-free view of the user's tables."""

from dataclasses import dataclass
from typing import FrozenSet, Sequence, Tuple
from schemabuilder.ir.workspace import TableInstance


@dataclass(frozen=True)
class TableRecord:
    """Attribute names and key-flagged names of one table."""

    names: FrozenSet[str] = frozenset()
    pks: FrozenSet[str] = frozenset()
    fks: FrozenSet[str] = frozenset()


Snapshot = Tuple[TableRecord, ...]


def build_snapshot(tables: Sequence[TableInstance]) -> Snapshot:
    """
    Reduce tables to name sets for matching.

    Table order is kept and table ids are dropped. Duplicate names inside a
    table collapse into one entry; a name counts as a key if any of its
    placements in that table is flagged.

    Args:
        tables: Current tables of the workspace

    Returns:
        One TableRecord per table, in input order
    """
    return tuple(
        TableRecord(
            names=frozenset(a.name for a in table.attributes),
            pks=frozenset(a.name for a in table.attributes if a.is_primary_key),
            fks=frozenset(a.name for a in table.attributes if a.is_foreign_key),
        )
        for table in tables
    )
