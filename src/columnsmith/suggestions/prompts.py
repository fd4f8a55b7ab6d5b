"""Prompts for LLM-backed column matching."""

import json

from .models import SuggestionRequest

SUGGESTION_SYSTEM_PROMPT = """You are an expert data analyst. You match columns between two datasets based on their data content, not just their names.
Respond with a JSON array only. Each element has exactly three string keys: "sourceColumn", "referenceColumn" and "reason".
Only include matches you are reasonably confident about. If there are none, respond with []."""


def build_suggestion_prompt(request: SuggestionRequest) -> str:
    """Render the user message for a suggestion request."""
    source = [column.model_dump() for column in request.source_columns]
    return (
        "Here are the columns from the source dataset that need a match, "
        "along with the first rows of their data:\n"
        f"{json.dumps(source, indent=2)}\n\n"
        "Here is a list of available column names from the reference dataset "
        "that also need a match:\n"
        f"{json.dumps(request.reference_names, indent=2)}\n\n"
        "Analyze the data patterns, types, and content. 'sourceColumn' must be a "
        "name from the source dataset and 'referenceColumn' the best matching "
        "name from the reference dataset."
    )
