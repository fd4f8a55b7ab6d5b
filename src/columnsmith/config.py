"""Configuration management for ColumnSmith."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("CORS_ALLOW_ORIGINS")
    if cors_env:
        return cors_env.split(",")
    return ["*"]


class Settings(BaseModel):
    """Application settings."""

    # Database path for session persistence
    database_path: Path = Path(os.getenv("DATABASE_PATH", "data/columnsmith.db"))

    # Upload limits - files above the ceiling are rejected before parsing
    max_file_size_mb: int = int(os.getenv("MAX_FILE_SIZE_MB", "10"))
    session_max_bytes: int = int(os.getenv("SESSION_MAX_BYTES", str(1024 * 1024)))

    # Column presentation defaults
    default_column_width: int = int(os.getenv("DEFAULT_COLUMN_WIDTH", "150"))
    min_column_width: int = int(os.getenv("MIN_COLUMN_WIDTH", "50"))
    preview_row_limit: int = int(os.getenv("PREVIEW_ROW_LIMIT", "10"))

    # LLM Provider settings ('anthropic' or 'openrouter') for match suggestions
    llm_provider: str = os.getenv("LLM_PROVIDER", "anthropic")
    anthropic_api_key: Optional[str] = os.getenv("ANTHROPIC_API_KEY")
    openrouter_api_key: Optional[str] = os.getenv("OPENROUTER_API_KEY")
    openrouter_model: str = os.getenv("OPENROUTER_MODEL", "anthropic/claude-3.5-sonnet")
    model_name: str = os.getenv("MODEL_NAME", "claude-sonnet-4-20250514")
    suggestion_max_tokens: int = int(os.getenv("SUGGESTION_MAX_TOKENS", "1024"))
    suggestion_sample_rows: int = int(os.getenv("SUGGESTION_SAMPLE_ROWS", "5"))

    # Server settings
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS settings (comma-separated list of allowed origins, or * for all)
    cors_allow_origins: list[str] = _parse_cors_origins()

    @property
    def max_file_size_bytes(self) -> int:
        """Upload ceiling in bytes."""
        return self.max_file_size_mb * 1024 * 1024


settings = Settings()
