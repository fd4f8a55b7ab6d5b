"""LLM client module."""

from typing import Optional

from ..config import Settings, settings as default_settings
from .base import LLMClient, LLMResponse
from .anthropic_client import AnthropicClient
from .openrouter_client import OpenRouterClient


def create_llm_client(settings: Optional[Settings] = None) -> LLMClient:
    """Create the appropriate LLM client based on configuration."""
    settings = settings or default_settings
    if settings.llm_provider == "openrouter":
        if not settings.openrouter_api_key:
            raise ValueError("OPENROUTER_API_KEY is required when LLM_PROVIDER is 'openrouter'")
        return OpenRouterClient(api_key=settings.openrouter_api_key)
    else:
        # Default to Anthropic
        if not settings.anthropic_api_key:
            raise ValueError("ANTHROPIC_API_KEY is required when LLM_PROVIDER is 'anthropic'")
        return AnthropicClient(api_key=settings.anthropic_api_key)


def model_for(settings: Optional[Settings] = None) -> str:
    """Model name to request from the configured provider."""
    settings = settings or default_settings
    if settings.llm_provider == "openrouter":
        return settings.openrouter_model
    return settings.model_name


__all__ = [
    "LLMClient",
    "LLMResponse",
    "AnthropicClient",
    "OpenRouterClient",
    "create_llm_client",
    "model_for",
]
