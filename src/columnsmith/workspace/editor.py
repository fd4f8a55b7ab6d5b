"""A single loaded-table editor: upload, parse, edit, persist, export."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

from ..columns.model import ColumnModel
from ..columns.models import InvalidSessionError
from ..config import settings
from ..export import CsvExporter, export_filename
from ..session import SessionRecord, SessionStore
from ..tabular import ParsedTable, TableLoadError, TabularParser, detect_delimiter
from .models import (
    EditorState,
    ExportDisabledError,
    ExportResult,
    FileTooLargeError,
    NoTableLoadedError,
    ReadFailureError,
)

logger = logging.getLogger(__name__)


class TableEditor:
    """
    One table instance with its column model.

    A failed load never disturbs the table that was loaded before it. The
    reference instance is created read-only and without export.
    """

    def __init__(
        self,
        instance_number: int,
        storage_key: Optional[str] = None,
        read_only: bool = False,
        allow_export: bool = True,
        max_file_size_bytes: Optional[int] = None,
        session_max_bytes: Optional[int] = None,
    ):
        self.instance_number = instance_number
        self.storage_key = storage_key or f"csvEditorSession{instance_number}"
        self.allow_export = allow_export
        self.max_file_size_bytes = max_file_size_bytes or settings.max_file_size_bytes
        self.session_max_bytes = session_max_bytes or settings.session_max_bytes
        self.model = ColumnModel(read_only=read_only)
        self.parser = TabularParser()
        self.exporter = CsvExporter()
        self.delimiter: Optional[str] = None
        self.error = ""

    @property
    def read_only(self) -> bool:
        return self.model.read_only

    # Loading

    def check_size(self, size: int):
        if size > self.max_file_size_bytes:
            error = FileTooLargeError(size, self.max_file_size_bytes)
            self.error = str(error)
            logger.warning(
                f"Rejected upload of {size} bytes for instance {self.instance_number} "
                f"(limit {self.max_file_size_bytes})"
            )
            raise error

    async def load_path(self, path: Path) -> ParsedTable:
        """Read a file from disk, then parse and install it."""
        path = Path(path)
        try:
            size = path.stat().st_size
        except OSError as e:
            self.error = str(ReadFailureError())
            raise ReadFailureError() from e

        self.check_size(size)

        try:
            raw = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            self.error = str(ReadFailureError())
            raise ReadFailureError() from e

        return self.load_bytes(raw)

    def load_bytes(self, raw: bytes) -> ParsedTable:
        """Decode uploaded bytes as UTF-8, then parse and install them."""
        self.check_size(len(raw))
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            error = ReadFailureError(f"Failed to read file: {e.reason}.")
            self.error = str(error)
            raise error from e
        return self.load_text(text)

    def load_text(self, text: str) -> ParsedTable:
        """
        Parse text and replace the current table, columns and history.

        Raises:
            EmptyOrUnheadedError: If the text has no header row
        """
        delimiter = detect_delimiter(text)
        try:
            table = self.parser.parse(text, delimiter)
        except TableLoadError as e:
            self.error = str(e)
            raise

        self.model.load(table)
        self.delimiter = delimiter
        self.error = ""
        logger.info(
            f"Instance {self.instance_number} loaded {len(table.headers)} columns, "
            f"{table.row_count} rows"
        )
        return table

    def reset(self):
        """Forget the loaded table."""
        self.model.clear()
        self.delimiter = None
        self.error = ""

    # Persistence

    def restore(self, record: SessionRecord):
        """Install a saved (table, columns) pair as if it had just been parsed."""
        self.model = ColumnModel.restore(
            record.data, record.columns, read_only=self.model.read_only
        )
        self.delimiter = None
        self.error = ""

    async def save_session(self, store: SessionStore) -> bool:
        """
        Save the current table and columns, unless the payload is too large.

        Oversized or empty sessions are removed from the store instead.
        """
        if not self.model.has_table:
            await store.delete(self.storage_key)
            return False

        record = SessionRecord(data=self.model.table, columns=self.model.columns)
        size = len(record.to_payload().encode("utf-8"))
        if size >= self.session_max_bytes:
            logger.info(
                f"Session '{self.storage_key}' is {size} bytes, not saving "
                f"(limit {self.session_max_bytes})"
            )
            await store.delete(self.storage_key)
            return False

        await store.save(self.storage_key, record)
        return True

    async def restore_session(self, store: SessionStore) -> bool:
        """Load the saved session for this instance, discarding it if invalid."""
        try:
            record = await store.load(self.storage_key)
            if record is None:
                return False
            self.restore(record)
        except InvalidSessionError as e:
            logger.error(f"Failed to load saved session for {self.storage_key}: {e}")
            await store.delete(self.storage_key)
            return False

        logger.info(f"Restored session '{self.storage_key}'")
        return True

    # Output

    def export(self) -> ExportResult:
        if not self.allow_export:
            raise ExportDisabledError(f"Instance {self.instance_number} does not allow export")
        if not self.model.has_table:
            raise NoTableLoadedError("No table loaded")

        content = self.exporter.export(self.model.columns, self.model.table)
        return ExportResult(filename=export_filename(self.instance_number), content=content)

    def state(self, preview_limit: Optional[int] = None) -> EditorState:
        table = self.model.table
        return EditorState(
            instance_number=self.instance_number,
            read_only=self.read_only,
            loaded=table is not None,
            delimiter=self.delimiter,
            columns=self.model.columns,
            row_count=table.row_count if table else 0,
            preview=self.model.preview(preview_limit),
            can_undo=self.model.can_undo,
            error=self.error,
        )
