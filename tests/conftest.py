"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path
from unittest.mock import Mock

import pytest
import pytest_asyncio

from columnsmith.config import Settings
from columnsmith.llm import LLMClient, LLMResponse
from columnsmith.session import SessionStore
from columnsmith.tabular import ParsedTable


@pytest.fixture
def mock_settings(tmp_path: Path) -> Settings:
    """Create settings with test values."""
    return Settings(
        database_path=tmp_path / "test.db",
        max_file_size_mb=1,
        session_max_bytes=1024 * 1024,
        anthropic_api_key="test-key-123",
        llm_provider="anthropic",
        model_name="claude-sonnet-4-20250514",
        host="127.0.0.1",
        port=8000,
        debug=False,
        cors_allow_origins=["*"],
    )


@pytest.fixture
def contacts_csv() -> str:
    """A small comma-separated file with a header and three rows."""
    return "id,name,email\n1,Ann,ann@example.com\n2,Bob,bob@example.com\n3,Cy,cy@example.com\n"


@pytest.fixture
def contacts_table() -> ParsedTable:
    return ParsedTable(
        headers=["id", "name", "email"],
        rows=[
            ["1", "Ann", "ann@example.com"],
            ["2", "Bob", "bob@example.com"],
            ["3", "Cy", "cy@example.com"],
        ],
    )


@pytest_asyncio.fixture
async def session_store(tmp_path: Path):
    """Create a session store backed by a temporary database."""
    store = SessionStore(tmp_path / "sessions.db")
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture
def mock_llm_client() -> Mock:
    """Create a mocked LLM client that answers with an empty suggestion list."""
    client = Mock(spec=LLMClient)
    client.create_message = Mock(
        return_value=LLMResponse(
            content=[{"type": "text", "text": json.dumps([])}],
            stop_reason="end_turn",
            usage={"input_tokens": 100, "output_tokens": 5},
        )
    )
    return client
