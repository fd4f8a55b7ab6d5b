"""OpenRouter LLM client."""

import httpx

from .base import LLMClient, LLMResponse


class OpenRouterClient(LLMClient):
    """OpenRouter HTTP API client."""

    def __init__(self, api_key: str, base_url: str = "https://openrouter.ai/api/v1"):
        self.api_key = api_key
        self.base_url = base_url

    def create_message(
        self,
        messages: list[dict],
        system: str,
        max_tokens: int,
        model: str,
    ) -> LLMResponse:
        """Create a message via OpenRouter API."""
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "X-Title": "ColumnSmith",
        }

        payload = {
            "model": model,
            "messages": self._convert_messages(messages, system),
            "max_tokens": max_tokens,
        }

        with httpx.Client(timeout=60.0) as client:
            response = client.post(
                f"{self.base_url}/chat/completions",
                headers=headers,
                json=payload,
            )
            response.raise_for_status()
            data = response.json()

        return self._convert_response(data)

    def _convert_messages(self, messages: list[dict], system: str) -> list[dict]:
        """Convert Anthropic-style messages to OpenRouter format."""
        openrouter_messages = []

        if system:
            openrouter_messages.append({"role": "system", "content": system})

        for msg in messages:
            openrouter_messages.append({"role": msg["role"], "content": msg["content"]})

        return openrouter_messages

    def _convert_response(self, data: dict) -> LLMResponse:
        """Convert OpenRouter response to our format."""
        choice = data["choices"][0]
        message = choice["message"]

        content = []
        if message.get("content"):
            content.append({"type": "text", "text": message["content"]})

        finish_reason = choice.get("finish_reason", "stop")
        stop_reason_map = {
            "stop": "end_turn",
            "length": "max_tokens",
        }
        stop_reason = stop_reason_map.get(finish_reason, finish_reason)

        usage = None
        if "usage" in data:
            usage = {
                "input_tokens": data["usage"].get("prompt_tokens", 0),
                "output_tokens": data["usage"].get("completion_tokens", 0),
            }

        return LLMResponse(
            content=content,
            stop_reason=stop_reason,
            usage=usage,
        )
