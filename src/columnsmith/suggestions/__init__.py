"""Column-match suggestions for unmatched columns."""

from .models import (
    ColumnSample,
    SuggestionRequest,
    MatchSuggestion,
    NoUnmatchedColumnsError,
    SuggestionError,
)
from .collector import build_suggestion_request
from .board import SuggestionBoard
from .suggester import ColumnSuggester, LLMColumnSuggester, parse_suggestions
from .prompts import SUGGESTION_SYSTEM_PROMPT, build_suggestion_prompt

__all__ = [
    "ColumnSample",
    "SuggestionRequest",
    "MatchSuggestion",
    "NoUnmatchedColumnsError",
    "SuggestionError",
    "build_suggestion_request",
    "SuggestionBoard",
    "ColumnSuggester",
    "LLMColumnSuggester",
    "parse_suggestions",
    "SUGGESTION_SYSTEM_PROMPT",
    "build_suggestion_prompt",
]
