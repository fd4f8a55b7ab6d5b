"""Data models and errors for loaded-table editors."""

from typing import Optional

from pydantic import BaseModel, Field

from ..columns.models import Column
from ..matching.models import ColumnMatch
from ..tabular.models import TableLoadError


class FileTooLargeError(TableLoadError):
    """Exception raised when an upload exceeds the configured size ceiling."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"File is too large. Please upload files under {_format_size(limit)}.")


def _format_size(size: int) -> str:
    """Render a byte count in the largest unit that divides it evenly."""
    for unit, factor in (("MB", 1024 * 1024), ("KB", 1024)):
        if size >= factor and size % factor == 0:
            return f"{size // factor}{unit}"
    return f"{size} bytes"


class ReadFailureError(TableLoadError):
    """Exception raised when a file cannot be read or decoded."""

    def __init__(self, message: str = "Failed to read file."):
        super().__init__(message)


class NoTableLoadedError(Exception):
    """Exception raised when an operation needs a table and none is loaded."""

    pass


class ExportDisabledError(Exception):
    """Exception raised when exporting from an editor that does not allow it."""

    pass


class ExportResult(BaseModel):
    """A rendered CSV document and its download name."""

    filename: str
    content: str


class EditorState(BaseModel):
    """Snapshot of one editor for display."""

    instance_number: int
    read_only: bool
    loaded: bool
    delimiter: Optional[str] = None
    columns: list[Column] = Field(default_factory=list)
    row_count: int = 0
    preview: list[list[str]] = Field(default_factory=list)
    can_undo: bool = False
    error: str = ""
    column_matches: Optional[list[ColumnMatch]] = None
