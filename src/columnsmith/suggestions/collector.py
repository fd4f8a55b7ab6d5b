"""Build suggester input from the current match state."""

from typing import Optional, Sequence

from ..columns.model import ColumnModel
from ..config import settings
from ..matching import MatchResult, unmatched_active, unmatched_reference
from .models import ColumnSample, NoUnmatchedColumnsError, SuggestionRequest


def build_suggestion_request(
    model: ColumnModel,
    reference_names: Sequence[str],
    result: MatchResult,
    sample_rows: Optional[int] = None,
) -> SuggestionRequest:
    """
    Collect unmatched active columns with data samples and unmatched reference names.

    Raises:
        NoUnmatchedColumnsError: If either side has nothing left to match
    """
    sample_rows = sample_rows if sample_rows is not None else settings.suggestion_sample_rows
    columns = model.columns
    active_names = [c.new_name for c in columns]

    source_columns = [
        ColumnSample(
            name=columns[index].new_name,
            data=model.column_sample(columns[index], sample_rows),
        )
        for index in unmatched_active(active_names, result)
    ]
    reference_left = unmatched_reference(reference_names, result)

    if not source_columns or not reference_left:
        raise NoUnmatchedColumnsError()

    return SuggestionRequest(source_columns=source_columns, reference_names=reference_left)
