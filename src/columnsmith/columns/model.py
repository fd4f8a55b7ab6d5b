"""Column list with snapshot-based undo."""

import logging
from typing import Optional

from ..config import settings
from ..tabular.models import ParsedTable
from .models import (
    COPY_SUFFIX,
    NEW_COLUMN_NAME,
    SYNTHETIC_INDEX,
    Column,
    InvalidSessionError,
    Snapshot,
    new_column_id,
    resolve_cell,
)

logger = logging.getLogger(__name__)


class ColumnModel:
    """
    Owns the ordered column list of one loaded table and its undo history.

    Add, clone and delete push a snapshot before mutating. Rename, reorder and
    width changes mutate in place and cannot be undone. A read-only model
    ignores every mutating call.
    """

    def __init__(
        self,
        table: Optional[ParsedTable] = None,
        columns: Optional[list[Column]] = None,
        read_only: bool = False,
        default_width: Optional[int] = None,
        min_width: Optional[int] = None,
    ):
        self.read_only = read_only
        self.default_width = default_width or settings.default_column_width
        self.min_width = min_width if min_width is not None else settings.min_column_width
        self._table = table
        self._columns: list[Column] = [c.model_copy() for c in columns or []]
        self._history: list[Snapshot] = []

    @classmethod
    def from_table(cls, table: ParsedTable, **kwargs) -> "ColumnModel":
        """Create a model with one column per header."""
        model = cls(**kwargs)
        model.load(table)
        return model

    @classmethod
    def restore(
        cls, table: ParsedTable, columns: list[Column], **kwargs
    ) -> "ColumnModel":
        """
        Rebuild a model from a previously saved (table, columns) pair.

        Raises:
            InvalidSessionError: If headers are empty, a row has no non-blank
                cell, ids repeat, or a column points outside the header range
        """
        if not table.headers:
            raise InvalidSessionError("Saved table has no headers")
        for number, row in enumerate(table.rows):
            if not any(cell.strip() for cell in row):
                raise InvalidSessionError(f"Saved table row {number} is blank")

        seen: set[str] = set()
        for column in columns:
            if column.id in seen:
                raise InvalidSessionError(f"Duplicate column id '{column.id}'")
            seen.add(column.id)
            if column.original_index < SYNTHETIC_INDEX or column.original_index >= len(
                table.headers
            ):
                raise InvalidSessionError(
                    f"Column '{column.id}' has original index {column.original_index} "
                    f"outside 0..{len(table.headers) - 1}"
                )

        return cls(table=table, columns=columns, **kwargs)

    # State

    @property
    def table(self) -> Optional[ParsedTable]:
        return self._table

    @property
    def columns(self) -> list[Column]:
        """Copies of the current columns in display order."""
        return [c.model_copy() for c in self._columns]

    @property
    def has_table(self) -> bool:
        return self._table is not None

    @property
    def can_undo(self) -> bool:
        return not self.read_only and bool(self._history)

    @property
    def history_depth(self) -> int:
        return len(self._history)

    def column_names(self) -> list[str]:
        return [c.new_name for c in self._columns]

    def get_column(self, column_id: str) -> Optional[Column]:
        index = self._index_of(column_id)
        if index is None:
            return None
        return self._columns[index].model_copy()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            columns=tuple(c.model_copy() for c in self._columns),
            table=self._table,
        )

    def preview(self, limit: Optional[int] = None) -> list[list[str]]:
        """Return the first rows as seen through the current columns."""
        if self._table is None:
            return []
        limit = limit if limit is not None else settings.preview_row_limit
        return [
            [resolve_cell(row, column) for column in self._columns]
            for row in self._table.rows[:limit]
        ]

    def column_sample(self, column: Column, size: int) -> list[str]:
        """Return the first cells a column would show."""
        if self._table is None:
            return []
        return [resolve_cell(row, column) for row in self._table.rows[:size]]

    # Lifecycle

    def load(self, table: ParsedTable):
        """Replace everything with a freshly parsed table."""
        self._table = table
        self._columns = [
            Column(
                id=new_column_id(),
                original_index=index,
                original_name=header,
                new_name=header,
                width=self.default_width,
            )
            for index, header in enumerate(table.headers)
        ]
        self._history = []

    def clear(self):
        """Drop the table, its columns and the undo history."""
        self._table = None
        self._columns = []
        self._history = []

    # Structural edits (undoable)

    def add_column(self) -> Optional[Column]:
        """Append an empty synthetic column."""
        if self.read_only:
            return None
        self._push_history()

        column = Column(
            id=new_column_id(),
            original_index=SYNTHETIC_INDEX,
            original_name=NEW_COLUMN_NAME,
            new_name=NEW_COLUMN_NAME,
            width=self.default_width,
        )
        self._columns.append(column)
        logger.debug(f"Added column {column.id}")
        return column.model_copy()

    def clone_column(self, column_id: str) -> Optional[Column]:
        """Insert a copy of a column right after it.

        History is pushed before the lookup, so cloning a missing id still
        leaves an undo entry.
        """
        if self.read_only:
            return None
        self._push_history()

        index = self._index_of(column_id)
        if index is None:
            return None

        source = self._columns[index]
        clone = source.model_copy(
            update={"id": new_column_id(), "new_name": f"{source.new_name}{COPY_SUFFIX}"}
        )
        self._columns.insert(index + 1, clone)
        logger.debug(f"Cloned column {column_id} as {clone.id}")
        return clone.model_copy()

    def delete_column(self, column_id: str) -> bool:
        if self.read_only:
            return False
        self._push_history()

        index = self._index_of(column_id)
        if index is None:
            return False
        del self._columns[index]
        logger.debug(f"Deleted column {column_id}")
        return True

    def undo(self) -> bool:
        """Restore the most recent snapshot."""
        if self.read_only or not self._history:
            return False

        snapshot = self._history.pop()
        self._columns = [c.model_copy() for c in snapshot.columns]
        self._table = snapshot.table
        logger.debug(f"Undo applied, {len(self._history)} snapshots left")
        return True

    # Direct edits (not undoable)

    def rename_column(self, column_id: str, new_name: str) -> bool:
        if self.read_only:
            return False
        index = self._index_of(column_id)
        if index is None:
            return False
        self._columns[index].new_name = new_name
        return True

    def rename_by_name(self, source_name: str, target_name: str) -> int:
        """Rename every column currently called source_name. Returns the count."""
        if self.read_only:
            return 0
        renamed = 0
        for column in self._columns:
            if column.new_name == source_name:
                column.new_name = target_name
                renamed += 1
        return renamed

    def reorder_column(self, moved_id: str, before_id: str) -> bool:
        """Move a column so it sits immediately before another one."""
        if self.read_only or moved_id == before_id:
            return False
        moved_index = self._index_of(moved_id)
        if moved_index is None or self._index_of(before_id) is None:
            return False

        moved = self._columns.pop(moved_index)
        self._columns.insert(self._index_of(before_id), moved)
        return True

    def set_column_width(self, column_id: str, width: int) -> bool:
        if self.read_only or width <= self.min_width:
            return False
        index = self._index_of(column_id)
        if index is None:
            return False
        self._columns[index].width = width
        return True

    def _push_history(self):
        self._history.append(self.snapshot())

    def _index_of(self, column_id: str) -> Optional[int]:
        for index, column in enumerate(self._columns):
            if column.id == column_id:
                return index
        return None
