"""Deterministic comparison of two column-name layouts."""

from typing import Optional, Sequence

from .models import ColumnMatch, ColumnMatchStatus, MatchClassification, MatchResult

NO_REFERENCE_MESSAGE = "Upload a reference CSV to begin matching."
PERFECT_MESSAGE = "Perfect Match! Column names and order align with the reference."


def match_columns(
    active: Sequence[str], reference: Optional[Sequence[str]]
) -> MatchResult:
    """
    Compare active column names with reference column names.

    Name matching ignores order; position matching compares index by index up
    to the shorter list. Pure function of its inputs.

    Args:
        active: newName values of the working table in display order
        reference: newName values of the reference table, or None when no
            reference is loaded

    Returns:
        MatchResult with both match sets, progress and classification
    """
    if not reference:
        return MatchResult(
            classification=MatchClassification.NO_REFERENCE,
            message=NO_REFERENCE_MESSAGE,
        )

    reference_names = set(reference)
    name_matched = {name for name in active if name in reference_names}

    position_matched: set[str] = set()
    position_count = 0
    for active_name, reference_name in zip(active, reference):
        if active_name == reference_name:
            position_matched.add(active_name)
            position_count += 1

    if len(active) == len(reference) and position_count == len(active):
        return MatchResult(
            classification=MatchClassification.PERFECT,
            message=PERFECT_MESSAGE,
            name_matched=name_matched,
            position_matched=position_matched,
            position_match_count=position_count,
            matched_count=len(name_matched),
            reference_count=len(reference),
            progress_percent=100.0,
        )

    return MatchResult(
        classification=MatchClassification.PARTIAL,
        message=(
            f"{len(name_matched)} of {len(reference)} reference columns matched by name. "
            f"{position_count} are in the correct position."
        ),
        name_matched=name_matched,
        position_matched=position_matched,
        position_match_count=position_count,
        matched_count=len(name_matched),
        reference_count=len(reference),
        progress_percent=len(name_matched) / len(reference) * 100,
    )


def classify_columns(
    active: Sequence[str], reference: Optional[Sequence[str]]
) -> Optional[list[ColumnMatch]]:
    """Annotate each active column, or return None without a reference."""
    if not reference:
        return None

    reference_names = set(reference)
    matches = []
    for index, name in enumerate(active):
        if index < len(reference) and reference[index] == name:
            status = ColumnMatchStatus.POSITION
            title = f'Perfect Match: Column "{name}" is in the correct position.'
        elif name in reference_names:
            status = ColumnMatchStatus.NAME
            title = (
                f'Name Match: Column "{name}" exists in the reference, '
                "but is in the wrong position."
            )
        else:
            status = ColumnMatchStatus.NONE
            title = f'No Match: Column "{name}" does not exist in the reference.'
        matches.append(ColumnMatch(index=index, name=name, status=status, title=title))
    return matches


def unmatched_active(active: Sequence[str], result: MatchResult) -> list[int]:
    """Indices of active columns whose name has no counterpart in the reference."""
    return [i for i, name in enumerate(active) if name not in result.name_matched]


def unmatched_reference(reference: Sequence[str], result: MatchResult) -> list[str]:
    """Reference names no active column carries yet."""
    return [name for name in reference if name not in result.name_matched]


def has_unmatched_columns(
    active: Sequence[str], reference: Sequence[str], result: MatchResult
) -> bool:
    matched = len(result.name_matched)
    return len(active) > matched or len(reference) > matched
