"""Tests for a single table editor."""

import pytest

from columnsmith.session import SessionRecord
from columnsmith.columns import Column
from columnsmith.tabular import EmptyOrUnheadedError, ParsedTable, TableLoadError
from columnsmith.workspace import (
    ExportDisabledError,
    FileTooLargeError,
    NoTableLoadedError,
    ReadFailureError,
    TableEditor,
)


@pytest.fixture
def editor() -> TableEditor:
    return TableEditor(1, max_file_size_bytes=1024, session_max_bytes=1024 * 1024)


class TestLoading:
    """Test upload, decode and parse."""

    def test_load_text(self, editor, contacts_csv):
        table = editor.load_text(contacts_csv)

        assert table.headers == ["id", "name", "email"]
        assert editor.delimiter == ","
        assert editor.model.column_names() == ["id", "name", "email"]
        assert editor.error == ""

    def test_storage_key_defaults_to_instance(self):
        assert TableEditor(1).storage_key == "csvEditorSession1"
        assert TableEditor(2).storage_key == "csvEditorSession2"

    def test_load_bytes_strips_bom(self, editor):
        editor.load_bytes(b"\xef\xbb\xbfa;b\n1;2")
        assert editor.model.column_names() == ["a", "b"]
        assert editor.delimiter == ";"

    def test_oversized_upload_is_rejected(self, editor):
        with pytest.raises(FileTooLargeError) as exc_info:
            editor.load_bytes(b"a" * 1025)

        assert exc_info.value.size == 1025
        assert exc_info.value.limit == 1024
        assert editor.error.startswith("File is too large.")
        assert not editor.model.has_table

    @pytest.mark.parametrize(
        "limit, shown",
        [(1000, "1000 bytes"), (1024, "1KB"), (2 * 1024 * 1024, "2MB"), (1536 * 1024, "1536KB")],
    )
    def test_oversized_message_shows_limit(self, limit, shown):
        editor = TableEditor(1, max_file_size_bytes=limit)
        with pytest.raises(FileTooLargeError, match=f"under {shown}\\.$"):
            editor.load_bytes(b"a" * (limit + 1))

    def test_size_limit_is_inclusive(self, editor):
        editor.load_bytes(b"a\n" + b"1" * 1022)
        assert editor.model.column_names() == ["a"]

    def test_invalid_utf8_is_a_read_failure(self, editor):
        with pytest.raises(ReadFailureError):
            editor.load_bytes(b"a,b\n\xff\xfe,1")
        assert editor.error.startswith("Failed to read file")

    def test_empty_file_is_rejected(self, editor):
        with pytest.raises(EmptyOrUnheadedError):
            editor.load_bytes(b"")
        assert editor.error.startswith("Could not parse headers.")

    def test_failed_load_leaves_previous_table(self, editor, contacts_csv):
        editor.load_text(contacts_csv)
        editor.model.add_column()
        before = editor.model.columns

        with pytest.raises(TableLoadError):
            editor.load_text("\n\n")

        assert editor.model.columns == before
        assert editor.model.history_depth == 1
        assert editor.delimiter == ","

    def test_successful_load_clears_history_and_error(self, editor, contacts_csv):
        with pytest.raises(TableLoadError):
            editor.load_text("")
        editor.load_text(contacts_csv)
        editor.model.add_column()

        editor.load_text("x,y\n1,2")

        assert editor.model.history_depth == 0
        assert editor.error == ""

    @pytest.mark.asyncio
    async def test_load_path(self, editor, tmp_path, contacts_csv):
        path = tmp_path / "contacts.csv"
        path.write_text(contacts_csv, encoding="utf-8")

        table = await editor.load_path(path)
        assert table.row_count == 3

    @pytest.mark.asyncio
    async def test_load_path_checks_size_before_reading(self, editor, tmp_path):
        path = tmp_path / "big.csv"
        path.write_bytes(b"a" * 2048)

        with pytest.raises(FileTooLargeError):
            await editor.load_path(path)

    @pytest.mark.asyncio
    async def test_load_missing_path(self, editor, tmp_path):
        with pytest.raises(ReadFailureError):
            await editor.load_path(tmp_path / "missing.csv")

    def test_reset(self, editor, contacts_csv):
        editor.load_text(contacts_csv)
        editor.reset()
        assert not editor.model.has_table
        assert editor.delimiter is None


class TestExport:
    """Test exporting from an editor."""

    def test_export(self, editor, contacts_csv):
        editor.load_text(contacts_csv)
        result = editor.export()

        assert result.filename == "transformed_data_instance_1.csv"
        assert result.content.startswith('"id","name","email"\n')

    def test_export_without_table(self, editor):
        with pytest.raises(NoTableLoadedError):
            editor.export()

    def test_export_disabled(self, contacts_csv):
        reference = TableEditor(2, read_only=True, allow_export=False)
        reference.load_text(contacts_csv)
        with pytest.raises(ExportDisabledError):
            reference.export()


class TestState:
    """Test the display snapshot."""

    def test_state_of_empty_editor(self, editor):
        state = editor.state()
        assert state.loaded is False
        assert state.columns == []
        assert state.row_count == 0

    def test_state_after_load(self, editor, contacts_csv):
        editor.load_text(contacts_csv)
        editor.model.add_column()
        state = editor.state(preview_limit=1)

        assert state.loaded is True
        assert state.row_count == 3
        assert state.preview == [["1", "Ann", "ann@example.com", ""]]
        assert state.can_undo is True

    def test_read_only_state(self, contacts_csv):
        reference = TableEditor(2, read_only=True)
        reference.load_text(contacts_csv)
        reference.model.add_column()

        state = reference.state()
        assert state.read_only is True
        assert state.can_undo is False
        assert len(state.columns) == 3


class TestSessions:
    """Test saving and restoring editor sessions."""

    @pytest.mark.asyncio
    async def test_save_and_restore(self, editor, session_store, contacts_csv):
        editor.load_text(contacts_csv)
        first = editor.model.columns[0].id
        editor.model.rename_column(first, "identifier")
        editor.model.set_column_width(first, 240)
        editor.model.add_column()

        assert await editor.save_session(session_store) is True

        restored = TableEditor(1)
        assert await restored.restore_session(session_store) is True
        assert restored.model.columns == editor.model.columns
        assert restored.model.table == editor.model.table
        assert restored.model.history_depth == 0

    @pytest.mark.asyncio
    async def test_restore_keeps_read_only(self, session_store, contacts_csv):
        writer = TableEditor(2)
        writer.load_text(contacts_csv)
        await writer.save_session(session_store)

        reader = TableEditor(2, read_only=True)
        await reader.restore_session(session_store)
        assert reader.read_only is True
        assert reader.model.add_column() is None

    @pytest.mark.asyncio
    async def test_restore_without_saved_session(self, editor, session_store):
        assert await editor.restore_session(session_store) is False
        assert not editor.model.has_table

    @pytest.mark.asyncio
    async def test_oversized_session_is_not_saved(self, session_store, contacts_csv):
        editor = TableEditor(1, session_max_bytes=64)
        editor.load_text(contacts_csv)

        assert await editor.save_session(session_store) is False
        assert await session_store.load(editor.storage_key) is None

    @pytest.mark.asyncio
    async def test_oversized_session_replaces_older_save(self, session_store, contacts_csv):
        small = TableEditor(1)
        small.load_text("a\n1")
        await small.save_session(session_store)

        big = TableEditor(1, session_max_bytes=64)
        big.load_text(contacts_csv)
        await big.save_session(session_store)

        assert await session_store.load("csvEditorSession1") is None

    @pytest.mark.asyncio
    async def test_save_without_table_clears_session(self, editor, session_store, contacts_csv):
        editor.load_text(contacts_csv)
        await editor.save_session(session_store)
        editor.reset()

        assert await editor.save_session(session_store) is False
        assert await session_store.list_keys() == []

    @pytest.mark.asyncio
    async def test_session_with_blank_rows_is_discarded(self, editor, session_store):
        table = ParsedTable(headers=["a"], rows=[["1"], ["  "]])
        record = SessionRecord(
            data=table,
            columns=[Column(id="c", original_index=0, original_name="a", new_name="a")],
        )
        await session_store.save(editor.storage_key, record)

        assert await editor.restore_session(session_store) is False
        assert not editor.model.has_table
        assert await session_store.list_keys() == []

    @pytest.mark.asyncio
    async def test_invalid_session_is_discarded(self, editor, session_store):
        table = ParsedTable(headers=["a"], rows=[["1"]])
        broken = SessionRecord(
            data=table,
            columns=[Column(id="c", original_index=5, original_name="a", new_name="a")],
        )
        await session_store.save(editor.storage_key, broken)

        assert await editor.restore_session(session_store) is False
        assert not editor.model.has_table
        assert await session_store.list_keys() == []
