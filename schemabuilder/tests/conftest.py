"""Shared fixtures for Schema Builder tests."""

import pytest
from schemabuilder.config.settings import reset_settings
from schemabuilder.ir.workspace import PlacedAttribute, TableInstance


def _make_table(table_id, names, pks=(), fks=()):
    return TableInstance(
        id=table_id,
        attributes=[
            PlacedAttribute(name=n, is_primary_key=n in pks, is_foreign_key=n in fks)
            for n in names
        ],
    )


@pytest.fixture
def make_table():
    """Factory building a TableInstance from names and key name lists."""
    return _make_table


@pytest.fixture
def first_anomaly():
    """Deterministic picker: the narrative of the alphabetically first kind."""
    return lambda anomalies: anomalies[sorted(anomalies)[0]] if anomalies else None


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make each test read settings from its own environment."""
    reset_settings()
    yield
    reset_settings()
