"""Scenario models: attribute pools and the grouping rules of a normalized solution."""

from typing import Dict, FrozenSet, Tuple
from pydantic import BaseModel, ConfigDict, Field


class AttributeSpec(BaseModel):
    """An attribute offered in a level's pool.

    ``name`` is not unique: a second attribute with the same name and a
    different ``id`` is the copy meant to be placed as a foreign key.
    ``type`` is a display tag only.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: str = "varchar"


class GroupingRule(BaseModel):
    """Attributes that must share one table, with the keys that table must carry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    must_contain: Tuple[str, ...] = Field(alias="mustContain")
    pks: Tuple[str, ...] = ()
    fks: Tuple[str, ...] = ()

    @property
    def required(self) -> FrozenSet[str]:
        return frozenset(self.must_contain)

    @property
    def expected_pks(self) -> FrozenSet[str]:
        return frozenset(self.pks)

    @property
    def expected_fks(self) -> FrozenSet[str]:
        return frozenset(self.fks)


class Scenario(BaseModel):
    """One level of a problem set."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    level: int
    title: str
    description: str = ""
    hint: str = ""
    initial_attributes: Tuple[AttributeSpec, ...] = Field(alias="initialAttributes")
    solution: Tuple[GroupingRule, ...]
    anomalies: Dict[str, str] = Field(default_factory=dict)  # kind -> narrative


class ProblemSet(BaseModel):
    """A themed sequence of levels (e.g. university, retail)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    levels: Tuple[Scenario, ...]
