"""Data models for column matching."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MatchClassification(str, Enum):
    """Overall state of the active layout against the reference."""

    PERFECT = "perfect"  # Same names in the same order
    PARTIAL = "partial"
    NO_REFERENCE = "no_reference"


class ColumnMatchStatus(str, Enum):
    """Match state of a single active column."""

    POSITION = "position"  # Same name at the same index in the reference
    NAME = "name"  # Name exists in the reference elsewhere
    NONE = "none"


class MatchResult(BaseModel):
    """Comparison of an active column layout with a reference layout."""

    classification: MatchClassification
    message: str
    name_matched: set[str] = Field(default_factory=set)
    position_matched: set[str] = Field(default_factory=set)
    position_match_count: int = 0
    matched_count: int = 0
    reference_count: int = 0
    progress_percent: Optional[float] = None  # None when no reference is loaded

    @property
    def has_reference(self) -> bool:
        return self.classification != MatchClassification.NO_REFERENCE


class ColumnMatch(BaseModel):
    """Per-column annotation shown next to each active header."""

    index: int
    name: str
    status: ColumnMatchStatus
    title: str
