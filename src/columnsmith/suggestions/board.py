"""Pending suggestion list and the accept operation."""

import logging

from ..columns.model import ColumnModel
from .models import MatchSuggestion

logger = logging.getLogger(__name__)


class SuggestionBoard:
    """Holds suggestions awaiting a decision."""

    def __init__(self):
        self.pending: list[MatchSuggestion] = []
        self.error: str = ""

    def show(self, suggestions: list[MatchSuggestion]):
        self.pending = list(suggestions)
        self.error = ""

    def fail(self, message: str):
        self.pending = []
        self.error = message

    def accept(self, model: ColumnModel, source_name: str, target_name: str) -> int:
        """
        Rename the active column(s) called source_name and retire their suggestions.

        Returns:
            Number of columns renamed
        """
        renamed = model.rename_by_name(source_name, target_name)
        self.pending = [s for s in self.pending if s.source_name != source_name]
        logger.info(f"Accepted suggestion '{source_name}' -> '{target_name}' ({renamed} renamed)")
        return renamed

    def dismiss(self):
        self.pending = []
        self.error = ""
