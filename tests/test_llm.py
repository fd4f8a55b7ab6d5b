"""Tests for LLM client selection and responses."""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from columnsmith.config import Settings
from columnsmith.llm import (
    AnthropicClient,
    LLMResponse,
    OpenRouterClient,
    create_llm_client,
    model_for,
)


class TestCreateLLMClient:
    """Test provider selection."""

    def test_anthropic_by_default(self):
        settings = Settings(llm_provider="anthropic", anthropic_api_key="sk-ant-test")
        with patch("columnsmith.llm.anthropic_client.Anthropic") as anthropic_cls:
            client = create_llm_client(settings)

        assert isinstance(client, AnthropicClient)
        anthropic_cls.assert_called_once_with(api_key="sk-ant-test")

    def test_openrouter(self):
        settings = Settings(llm_provider="openrouter", openrouter_api_key="sk-or-test")
        client = create_llm_client(settings)

        assert isinstance(client, OpenRouterClient)
        assert client.api_key == "sk-or-test"

    def test_missing_anthropic_key(self):
        settings = Settings(llm_provider="anthropic", anthropic_api_key="")
        with pytest.raises(ValueError, match="ANTHROPIC_API_KEY"):
            create_llm_client(settings)

    def test_missing_openrouter_key(self):
        settings = Settings(llm_provider="openrouter", openrouter_api_key="")
        with pytest.raises(ValueError, match="OPENROUTER_API_KEY"):
            create_llm_client(settings)


class TestModelFor:
    """Test model name selection."""

    def test_anthropic_model(self):
        settings = Settings(llm_provider="anthropic", model_name="claude-test")
        assert model_for(settings) == "claude-test"

    def test_openrouter_model(self):
        settings = Settings(llm_provider="openrouter", openrouter_model="vendor/model")
        assert model_for(settings) == "vendor/model"


class TestLLMResponse:
    """Test text extraction from responses."""

    def test_text_from_dict_blocks(self):
        response = LLMResponse(
            content=[
                {"type": "text", "text": "[{"},
                {"type": "tool_use", "id": "x"},
                {"type": "text", "text": "}]"},
            ],
            stop_reason="end_turn",
        )
        assert response.text() == "[{}]"

    def test_text_from_sdk_blocks(self):
        response = LLMResponse(
            content=[SimpleNamespace(type="text", text="[]")],
            stop_reason="end_turn",
        )
        assert response.text() == "[]"

    def test_empty_content(self):
        assert LLMResponse(content=[], stop_reason="end_turn").text() == ""


class TestAnthropicClient:
    """Test the Anthropic adapter."""

    def test_create_message(self):
        sdk_response = SimpleNamespace(
            content=[SimpleNamespace(type="text", text="[]")],
            stop_reason="end_turn",
            usage=SimpleNamespace(input_tokens=10, output_tokens=2),
        )
        with patch("columnsmith.llm.anthropic_client.Anthropic") as anthropic_cls:
            anthropic_cls.return_value.messages.create.return_value = sdk_response
            client = AnthropicClient(api_key="sk-ant-test")

            result = client.create_message(
                messages=[{"role": "user", "content": "hi"}],
                system="sys",
                max_tokens=32,
                model="claude-test",
            )

        anthropic_cls.return_value.messages.create.assert_called_once_with(
            model="claude-test",
            max_tokens=32,
            system="sys",
            messages=[{"role": "user", "content": "hi"}],
        )
        assert result.text() == "[]"
        assert result.usage == {"input_tokens": 10, "output_tokens": 2}
