"""Data models for column-match suggestions."""

from pydantic import BaseModel, ConfigDict, Field


class ColumnSample(BaseModel):
    """An unmatched active column with its first few cells."""

    name: str
    data: list[str] = Field(default_factory=list)


class SuggestionRequest(BaseModel):
    """Input handed to a suggester."""

    source_columns: list[ColumnSample]
    reference_names: list[str]


class MatchSuggestion(BaseModel):
    """A proposed rename of an active column to a reference name."""

    model_config = ConfigDict(populate_by_name=True)

    source_name: str = Field(alias="sourceColumn")
    target_name: str = Field(alias="referenceColumn")
    rationale: str = Field(default="", alias="reason")


class NoUnmatchedColumnsError(Exception):
    """Exception raised when there is nothing left for a suggester to analyze."""

    def __init__(self, message: str = "No unmatched columns available to analyze."):
        super().__init__(message)


class SuggestionError(Exception):
    """Exception raised when a suggester fails or returns unusable output."""

    def __init__(self, message: str = "Failed to get suggestions from the AI. Please try again."):
        super().__init__(message)
