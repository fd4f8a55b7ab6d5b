"""Loaded-table editors and the working/reference workspace."""

from .models import (
    FileTooLargeError,
    ReadFailureError,
    NoTableLoadedError,
    ExportDisabledError,
    ExportResult,
    EditorState,
)
from .editor import TableEditor
from .workspace import Workspace, WORKING, REFERENCE

__all__ = [
    "FileTooLargeError",
    "ReadFailureError",
    "NoTableLoadedError",
    "ExportDisabledError",
    "ExportResult",
    "EditorState",
    "TableEditor",
    "Workspace",
    "WORKING",
    "REFERENCE",
]
