"""Suggesters that propose renames for unmatched columns."""

import asyncio
import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from ..config import settings
from ..llm import LLMClient, model_for
from .models import MatchSuggestion, SuggestionError, SuggestionRequest
from .prompts import SUGGESTION_SYSTEM_PROMPT, build_suggestion_prompt

logger = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)
_suggestion_list = TypeAdapter(list[MatchSuggestion])


class ColumnSuggester(ABC):
    """Anything that maps unmatched source columns to reference names."""

    @abstractmethod
    async def suggest(self, request: SuggestionRequest) -> list[MatchSuggestion]:
        pass


class LLMColumnSuggester(ColumnSuggester):
    """Ask an LLM to pair columns by looking at their sample data."""

    def __init__(
        self,
        client: LLMClient,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ):
        self.client = client
        self.model = model or model_for()
        self.max_tokens = max_tokens or settings.suggestion_max_tokens

    async def suggest(self, request: SuggestionRequest) -> list[MatchSuggestion]:
        """
        Request suggestions and keep only pairs that refer to known names.

        Raises:
            SuggestionError: If the call fails or the reply is not a valid list
        """
        messages = [{"role": "user", "content": build_suggestion_prompt(request)}]
        logger.info(
            f"Requesting suggestions for {len(request.source_columns)} source columns "
            f"against {len(request.reference_names)} reference names"
        )

        try:
            response = await asyncio.to_thread(
                self.client.create_message,
                messages=messages,
                system=SUGGESTION_SYSTEM_PROMPT,
                max_tokens=self.max_tokens,
                model=self.model,
            )
        except Exception as e:
            logger.error(f"Suggestion request failed: {e}", exc_info=True)
            raise SuggestionError() from e

        suggestions = parse_suggestions(response.text())

        source_names = {c.name for c in request.source_columns}
        reference_names = set(request.reference_names)
        known = [
            s
            for s in suggestions
            if s.source_name in source_names and s.target_name in reference_names
        ]
        if len(known) < len(suggestions):
            logger.warning(f"Dropped {len(suggestions) - len(known)} suggestions with unknown names")
        return known


def parse_suggestions(text: str) -> list[MatchSuggestion]:
    """Decode a JSON array of suggestions, tolerating a Markdown code fence."""
    text = text.strip()
    fenced = _FENCE_PATTERN.match(text)
    if fenced:
        text = fenced.group(1)

    try:
        return _suggestion_list.validate_python(json.loads(text))
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Unparseable suggestion response: {e}")
        raise SuggestionError() from e
