"""Column layout matching against a reference."""

from .models import MatchClassification, ColumnMatchStatus, MatchResult, ColumnMatch
from .engine import (
    match_columns,
    classify_columns,
    unmatched_active,
    unmatched_reference,
    has_unmatched_columns,
)

__all__ = [
    "MatchClassification",
    "ColumnMatchStatus",
    "MatchResult",
    "ColumnMatch",
    "match_columns",
    "classify_columns",
    "unmatched_active",
    "unmatched_reference",
    "has_unmatched_columns",
]
