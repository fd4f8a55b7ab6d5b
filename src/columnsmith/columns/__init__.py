"""Column model with reversible structural edits."""

from .models import (
    Column,
    Snapshot,
    InvalidSessionError,
    resolve_cell,
    new_column_id,
    NEW_COLUMN_NAME,
    COPY_SUFFIX,
    SYNTHETIC_INDEX,
)
from .model import ColumnModel

__all__ = [
    "Column",
    "Snapshot",
    "InvalidSessionError",
    "resolve_cell",
    "new_column_id",
    "NEW_COLUMN_NAME",
    "COPY_SUFFIX",
    "SYNTHETIC_INDEX",
    "ColumnModel",
]
