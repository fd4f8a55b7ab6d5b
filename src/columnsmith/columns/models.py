"""Data models for the column layer."""

import uuid
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..tabular.models import ParsedTable

NEW_COLUMN_NAME = "New Column"
COPY_SUFFIX = " (Copy)"
SYNTHETIC_INDEX = -1


def new_column_id() -> str:
    """Return a fresh opaque column identifier."""
    return f"col-{uuid.uuid4().hex}"


class Column(BaseModel):
    """One logical column of the working table."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    original_index: int  # -1 for columns with no backing data
    original_name: str
    new_name: str
    width: Optional[int] = None

    @property
    def is_synthetic(self) -> bool:
        return self.original_index < 0


@dataclass(frozen=True)
class Snapshot:
    """Point-in-time copy of a column list.

    Columns are copied by value; the table is shared since column edits never
    touch it.
    """

    columns: tuple[Column, ...]
    table: Optional[ParsedTable]


class InvalidSessionError(ValueError):
    """Exception raised when a saved (table, columns) pair breaks model invariants."""

    pass


def resolve_cell(row: list[str], column: Column) -> str:
    """Read the cell a column points at, or an empty string."""
    if column.is_synthetic or column.original_index >= len(row):
        return ""
    return row[column.original_index]
