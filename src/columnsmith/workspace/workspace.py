"""Working table and reference table side by side."""

import logging
from typing import Optional

from ..matching import MatchResult, classify_columns, has_unmatched_columns, match_columns
from ..session import SessionStore
from ..suggestions import (
    ColumnSuggester,
    MatchSuggestion,
    NoUnmatchedColumnsError,
    SuggestionBoard,
    SuggestionError,
    build_suggestion_request,
)
from .editor import TableEditor
from .models import EditorState

logger = logging.getLogger(__name__)

WORKING = "working"
REFERENCE = "reference"


class Workspace:
    """Pairs the editable working table with a read-only reference table."""

    def __init__(
        self,
        working: Optional[TableEditor] = None,
        reference: Optional[TableEditor] = None,
        suggester: Optional[ColumnSuggester] = None,
    ):
        self.working = working or TableEditor(1, "csvEditorSession1")
        self.reference = reference or TableEditor(
            2, "csvEditorSession2", read_only=True, allow_export=False
        )
        self.suggester = suggester
        self.suggestions = SuggestionBoard()

    def editor(self, name: str) -> TableEditor:
        if name == WORKING:
            return self.working
        if name == REFERENCE:
            return self.reference
        raise ValueError(f"Unknown table instance '{name}'")

    def reference_names(self) -> Optional[list[str]]:
        """Reference column names, or None when no reference is loaded."""
        if not self.reference.model.has_table:
            return None
        return self.reference.model.column_names()

    def match(self) -> MatchResult:
        return match_columns(self.working.model.column_names(), self.reference_names())

    def has_unmatched_columns(self) -> bool:
        reference = self.reference_names()
        if not reference:
            return False
        active = self.working.model.column_names()
        return has_unmatched_columns(active, reference, match_columns(active, reference))

    def state(self, name: str) -> EditorState:
        editor = self.editor(name)
        state = editor.state()
        if editor is self.working:
            state.column_matches = classify_columns(
                self.working.model.column_names(), self.reference_names()
            )
        return state

    # Suggestions

    async def find_suggestions(self) -> list[MatchSuggestion]:
        """
        Ask the suggester for renames of unmatched working columns.

        Raises:
            NoUnmatchedColumnsError: If either side has nothing left to match
            SuggestionError: If no suggester is configured or it fails
        """
        result = self.match()
        try:
            request = build_suggestion_request(
                self.working.model, self.reference_names() or [], result
            )
        except NoUnmatchedColumnsError as e:
            self.suggestions.fail(str(e))
            raise

        if self.suggester is None:
            error = SuggestionError("No suggestion service is configured.")
            self.suggestions.fail(str(error))
            raise error

        try:
            suggestions = await self.suggester.suggest(request)
        except SuggestionError as e:
            self.suggestions.fail(str(e))
            raise

        self.suggestions.show(suggestions)
        logger.info(f"Received {len(suggestions)} match suggestions")
        return suggestions

    def accept_suggestion(self, source_name: str, target_name: str) -> int:
        return self.suggestions.accept(self.working.model, source_name, target_name)

    def dismiss_suggestions(self):
        self.suggestions.dismiss()

    # Persistence

    async def save(self, store: SessionStore):
        for editor in (self.working, self.reference):
            await editor.save_session(store)

    async def restore(self, store: SessionStore):
        for editor in (self.working, self.reference):
            await editor.restore_session(store)
