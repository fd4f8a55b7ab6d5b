"""Base LLM client interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional
from dataclasses import dataclass


@dataclass
class LLMResponse:
    """Response from LLM."""

    content: list[Any]
    stop_reason: str
    usage: Optional[dict] = None

    def text(self) -> str:
        """Join the text blocks, whether SDK objects or plain dicts."""
        parts = []
        for block in self.content:
            if isinstance(block, dict):
                if block.get("type") == "text":
                    parts.append(block.get("text", ""))
            elif getattr(block, "type", None) == "text":
                parts.append(block.text)
        return "".join(parts)


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    def create_message(
        self,
        messages: list[dict],
        system: str,
        max_tokens: int,
        model: str,
    ) -> LLMResponse:
        """Create a message with the LLM."""
        pass
