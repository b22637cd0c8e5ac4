"""Tests for the editing operations."""

from collections import Counter

import pytest
from schemabuilder.ir.workspace import KeyKind, WorkspaceState
from schemabuilder.scenarios.repository import get_scenario
from schemabuilder.session.operations import (
    add_table,
    delete_table,
    place_attribute,
    remove_attribute,
    start_level,
    toggle_key,
    validate,
)


@pytest.fixture
def scenario():
    return get_scenario("university", 1)


@pytest.fixture
def state(scenario):
    """Level start with instance ids equal to attribute ids."""
    return start_level(scenario, instance_id=lambda attr: attr.id)


def locations(state: WorkspaceState) -> Counter:
    """Count where every instance id currently lives."""
    ids = Counter(a.instance_id for a in state.pool)
    for table in state.tables:
        ids.update(a.instance_id for a in table.attributes)
    return ids


def test_start_level(scenario, state):
    """Test the pool is seeded and exactly one empty table exists."""
    assert [a.attribute_id for a in state.pool] == ["s1", "s2", "c1", "g1", "s1_ref"]
    assert all(not a.is_primary_key and not a.is_foreign_key for a in state.pool)
    assert len(state.tables) == 1
    assert state.tables[0].id == 1 and state.tables[0].attributes == []


def test_start_level_random_instance_ids_are_unique(scenario):
    """Test default instance ids differ even for duplicate attributes."""
    fresh = start_level(scenario)
    ids = [a.instance_id for a in fresh.pool]
    assert len(set(ids)) == len(ids)
    assert fresh.pool[0].instance_id.startswith("s1-")


def test_add_table_ids(state):
    """Test new tables get max id + 1, or 1 when none exist."""
    state = add_table(add_table(state))
    assert [t.id for t in state.tables] == [1, 2, 3]
    state = delete_table(state, 2)
    assert add_table(state).tables[-1].id == 4
    assert add_table(WorkspaceState()).tables[0].id == 1


def test_place_attribute(state):
    """Test placing moves the attribute out of the pool."""
    placed = place_attribute(state, 1, "s2")
    assert [a.name for a in placed.tables[0].attributes] == ["StudentName"]
    assert "s2" not in [a.instance_id for a in placed.pool]
    assert len(state.pool) == 5  # input untouched
    assert locations(placed) == locations(state)


def test_place_attribute_by_attribute_id():
    """Test the attribute id also works as a reference."""
    scenario = get_scenario("retail", 1)
    state = start_level(scenario)
    placed = place_attribute(state, 1, "r1_ref")
    assert placed.tables[0].attributes[0].attribute_id == "r1_ref"


def test_place_attribute_unknown_ref_is_noop(state):
    """Test unknown attributes and unknown tables leave the state unchanged."""
    assert place_attribute(state, 1, "missing") is state
    assert place_attribute(state, 99, "s1") is state


def test_place_attribute_already_placed_is_noop(state):
    """Test an attribute can't be placed twice."""
    placed = place_attribute(state, 1, "s1")
    assert place_attribute(placed, 1, "s1") is placed


def test_remove_attribute_clears_flags(state):
    """Test removal returns the attribute to the pool unflagged."""
    placed = place_attribute(state, 1, "s1")
    flagged = toggle_key(toggle_key(placed, 1, "s1", KeyKind.PK), 1, "s1", KeyKind.FK)
    removed = remove_attribute(flagged, 1, "s1")
    assert removed.tables[0].attributes == []
    back = removed.pool[-1]
    assert back.instance_id == "s1"
    assert not back.is_primary_key and not back.is_foreign_key
    assert locations(removed) == locations(state)


def test_remove_attribute_unknown_is_noop(state):
    """Test removing something not in the table changes nothing."""
    assert remove_attribute(state, 1, "s1") is state
    assert remove_attribute(state, 5, "s1") is state


def test_toggle_key_flips_one_attribute(state):
    """Test toggles are independent per placement and per flag."""
    state = place_attribute(place_attribute(state, 1, "s1"), 1, "c1")
    state = toggle_key(state, 1, "s1", "PK")
    attrs = {a.instance_id: a for a in state.tables[0].attributes}
    assert attrs["s1"].is_primary_key and not attrs["s1"].is_foreign_key
    assert not attrs["c1"].is_primary_key

    state = toggle_key(state, 1, "s1", KeyKind.PK)
    assert not state.tables[0].attributes[0].is_primary_key


def test_toggle_key_allows_many_primary_keys(state):
    """Test edit time doesn't restrict the number of PK flags."""
    for ref in ("s1", "s2", "c1"):
        state = place_attribute(state, 1, ref)
        state = toggle_key(state, 1, ref, KeyKind.PK)
    assert all(a.is_primary_key for a in state.tables[0].attributes)


def test_same_attribute_pk_in_one_table_fk_in_another(state):
    """Test key flags belong to the placement, not the attribute name."""
    state = add_table(state)
    state = place_attribute(state, 1, "s1")
    state = place_attribute(state, 2, "s1_ref")
    state = toggle_key(state, 1, "s1", KeyKind.PK)
    state = toggle_key(state, 2, "s1_ref", KeyKind.FK)
    assert state.tables[0].attributes[0].is_primary_key
    assert not state.tables[0].attributes[0].is_foreign_key
    assert state.tables[1].attributes[0].is_foreign_key
    assert not state.tables[1].attributes[0].is_primary_key


def test_delete_table_returns_attributes(state):
    """Test deleting a table sends its attributes back to the pool."""
    state = add_table(state)
    state = place_attribute(state, 2, "g1")
    state = toggle_key(state, 2, "g1", KeyKind.PK)
    after = delete_table(state, 2)
    assert [t.id for t in after.tables] == [1]
    assert after.pool[-1].instance_id == "g1"
    assert not after.pool[-1].is_primary_key
    assert locations(after) == locations(state)
    assert delete_table(after, 2) is after


def test_play_through_to_success(scenario, state):
    """Test building the 1NF solution with the editing operations."""
    state = place_attribute(state, 1, "s1")
    state = place_attribute(state, 1, "s2")
    state = add_table(state)
    for ref in ("s1_ref", "c1", "g1"):
        state = place_attribute(state, 2, ref)
    state = toggle_key(state, 1, "s1", KeyKind.PK)
    state = toggle_key(state, 2, "s1_ref", KeyKind.PK)
    state = toggle_key(state, 2, "c1", KeyKind.PK)
    state = toggle_key(state, 2, "s1_ref", KeyKind.FK)

    assert state.pool == []
    verdict = validate(state, scenario)
    assert verdict.passed, verdict.detail
