"""Packaged scenario catalog and lookups."""

from .repository import (
    UnknownScenarioError,
    load_catalog,
    get_catalog,
    list_problem_sets,
    get_problem_set,
    get_scenario,
)

__all__ = [
    "UnknownScenarioError",
    "load_catalog",
    "get_catalog",
    "list_problem_sets",
    "get_problem_set",
    "get_scenario",
]
