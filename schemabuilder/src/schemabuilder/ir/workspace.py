"""Editing state models: the attribute pool and the user's tables."""

from enum import Enum
from typing import List, Optional
from uuid import uuid4
from pydantic import BaseModel, Field


class KeyKind(str, Enum):
    """Which key flag a toggle addresses."""

    PK = "PK"
    FK = "FK"


class PlacedAttribute(BaseModel):
    """An attribute instance, either waiting in the pool or placed in a table.

    Key flags belong to the placement, so two copies of the same attribute
    can be a primary key in one table and a foreign key in another. Pool
    entries always have both flags cleared.
    """

    instance_id: str = Field(default_factory=lambda: uuid4().hex[:9])
    attribute_id: Optional[str] = None
    name: str
    type: str = "varchar"
    is_primary_key: bool = False
    is_foreign_key: bool = False

    def cleared(self) -> "PlacedAttribute":
        """Return a copy with both key flags reset."""
        return self.model_copy(update={"is_primary_key": False, "is_foreign_key": False})

    def matches_ref(self, ref: str) -> bool:
        """True if ``ref`` names this instance or its underlying attribute."""
        return ref == self.instance_id or ref == self.attribute_id


class TableInstance(BaseModel):
    """A user-created table."""

    id: int
    attributes: List[PlacedAttribute] = Field(default_factory=list)


class WorkspaceState(BaseModel):
    """The whole editing state of one level: pool plus tables."""

    pool: List[PlacedAttribute] = Field(default_factory=list)
    tables: List[TableInstance] = Field(default_factory=list)

    def find_table(self, table_id: int) -> Optional[TableInstance]:
        return next((t for t in self.tables if t.id == table_id), None)
