"""Editing operations on a level's workspace.

Every operation takes the current WorkspaceState and returns a new one;
the input is never mutated. An attribute instance is always in exactly one
place: the pool or one table. Unknown table or instance ids leave the state
unchanged.
"""

from typing import Callable, Optional
from uuid import uuid4
from schemabuilder.ir.scenario import AttributeSpec, Scenario
from schemabuilder.ir.verdict import ValidationVerdict
from schemabuilder.ir.workspace import KeyKind, PlacedAttribute, TableInstance, WorkspaceState
from schemabuilder.validation import AnomalyPicker, build_snapshot, compose_verdict
from schemabuilder.config.logging import get_logger

logger = get_logger(__name__)

InstanceIdFactory = Callable[[AttributeSpec], str]


def _random_instance_id(attribute: AttributeSpec) -> str:
    return f"{attribute.id}-{uuid4().hex[:9]}"


def start_level(
    scenario: Scenario, instance_id: Optional[InstanceIdFactory] = None
) -> WorkspaceState:
    """
    Seed the pool from the scenario and create one empty table.

    Args:
        scenario: Level being started
        instance_id: Builds the instance id of each pool entry; random by default

    Returns:
        Fresh WorkspaceState
    """
    make_id = instance_id or _random_instance_id
    pool = [
        PlacedAttribute(
            instance_id=make_id(attr),
            attribute_id=attr.id,
            name=attr.name,
            type=attr.type,
        )
        for attr in scenario.initial_attributes
    ]
    logger.debug(f"Started level {scenario.level} with {len(pool)} pool attributes")
    return WorkspaceState(pool=pool, tables=[TableInstance(id=1)])


def add_table(state: WorkspaceState) -> WorkspaceState:
    """Append an empty table with the next sequential id."""
    next_id = max((t.id for t in state.tables), default=0) + 1
    return WorkspaceState(
        pool=list(state.pool),
        tables=[*state.tables, TableInstance(id=next_id)],
    )


def place_attribute(state: WorkspaceState, table_id: int, attribute_ref: str) -> WorkspaceState:
    """
    Move one pool attribute into a table with both key flags cleared.

    Args:
        state: Current workspace
        table_id: Target table
        attribute_ref: Instance id or attribute id; the first matching pool
            entry is moved

    Returns:
        Updated workspace, or ``state`` itself if the attribute isn't in the
        pool or the table doesn't exist
    """
    index = next((i for i, a in enumerate(state.pool) if a.matches_ref(attribute_ref)), None)
    if index is None or state.find_table(table_id) is None:
        return state

    moved = state.pool[index].cleared()
    pool = state.pool[:index] + state.pool[index + 1:]
    tables = [
        t.model_copy(update={"attributes": [*t.attributes, moved]}) if t.id == table_id else t
        for t in state.tables
    ]
    return WorkspaceState(pool=pool, tables=tables)


def remove_attribute(state: WorkspaceState, table_id: int, instance_id: str) -> WorkspaceState:
    """Return a placed attribute to the pool with both key flags cleared."""
    table = state.find_table(table_id)
    if table is None:
        return state
    attr = next((a for a in table.attributes if a.instance_id == instance_id), None)
    if attr is None:
        return state

    tables = [
        t.model_copy(
            update={"attributes": [a for a in t.attributes if a.instance_id != instance_id]}
        )
        if t.id == table_id
        else t
        for t in state.tables
    ]
    return WorkspaceState(pool=[*state.pool, attr.cleared()], tables=tables)


def toggle_key(
    state: WorkspaceState, table_id: int, instance_id: str, key_kind: KeyKind
) -> WorkspaceState:
    """
    Flip the PK or FK flag of one placed attribute.

    Key counts aren't checked here; a table may hold any number of flagged
    attributes until it is validated.
    """
    field = "is_primary_key" if KeyKind(key_kind) == KeyKind.PK else "is_foreign_key"

    def flip(attr: PlacedAttribute) -> PlacedAttribute:
        if attr.instance_id != instance_id:
            return attr
        return attr.model_copy(update={field: not getattr(attr, field)})

    tables = [
        t.model_copy(update={"attributes": [flip(a) for a in t.attributes]})
        if t.id == table_id
        else t
        for t in state.tables
    ]
    return WorkspaceState(pool=list(state.pool), tables=tables)


def delete_table(state: WorkspaceState, table_id: int) -> WorkspaceState:
    """Remove a table, returning its attributes to the pool with flags cleared."""
    table = state.find_table(table_id)
    if table is None:
        return state
    restored = [a.cleared() for a in table.attributes]
    return WorkspaceState(
        pool=[*state.pool, *restored],
        tables=[t for t in state.tables if t.id != table_id],
    )


def validate(
    state: WorkspaceState,
    scenario: Scenario,
    pick_anomaly: Optional[AnomalyPicker] = None,
) -> ValidationVerdict:
    """Validate the workspace's tables against the scenario's solution."""
    snapshot = build_snapshot(state.tables)
    return compose_verdict(scenario.solution, snapshot, scenario, pick_anomaly)
