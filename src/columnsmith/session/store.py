"""SQLite-based store for editor sessions."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import aiosqlite
from pydantic import ValidationError

from ..columns.models import InvalidSessionError
from ..config import settings
from .models import SessionRecord

logger = logging.getLogger(__name__)


class SessionStore:
    """Keyed persistent storage for (table, columns) pairs."""

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = Path(db_path) if db_path else settings.database_path
        self._connection: Optional[aiosqlite.Connection] = None

    async def initialize(self):
        """Initialize the database and create tables."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._connection = await aiosqlite.connect(str(self.db_path))

        await self._connection.executescript(
            """
            CREATE TABLE IF NOT EXISTS sessions (
                storage_key TEXT PRIMARY KEY,
                payload TEXT NOT NULL,
                saved_at TEXT NOT NULL
            );
            """
        )
        await self._connection.commit()
        logger.info(f"SessionStore initialized at {self.db_path}")

    async def close(self):
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None

    async def save(self, storage_key: str, record: SessionRecord) -> SessionRecord:
        """Store or replace the session saved under a key."""
        await self._connection.execute(
            """
            INSERT OR REPLACE INTO sessions (storage_key, payload, saved_at)
            VALUES (?, ?, ?)
            """,
            (storage_key, record.to_payload(), record.saved_at.isoformat()),
        )
        await self._connection.commit()
        logger.debug(f"Saved session '{storage_key}'")
        return record

    async def load(self, storage_key: str) -> Optional[SessionRecord]:
        """
        Load the session saved under a key.

        Raises:
            InvalidSessionError: If the stored payload cannot be decoded
        """
        async with self._connection.execute(
            "SELECT payload, saved_at FROM sessions WHERE storage_key = ?",
            (storage_key,),
        ) as cursor:
            row = await cursor.fetchone()
        if not row:
            return None

        try:
            record = SessionRecord.model_validate_json(row[0])
        except ValidationError as e:
            raise InvalidSessionError(f"Stored session '{storage_key}' is corrupt: {e}") from e
        record.saved_at = datetime.fromisoformat(row[1])
        return record

    async def delete(self, storage_key: str) -> bool:
        """Delete the session saved under a key."""
        cursor = await self._connection.execute(
            "DELETE FROM sessions WHERE storage_key = ?", (storage_key,)
        )
        await self._connection.commit()
        return cursor.rowcount > 0

    async def list_keys(self) -> list[str]:
        async with self._connection.execute(
            "SELECT storage_key FROM sessions ORDER BY storage_key"
        ) as cursor:
            rows = await cursor.fetchall()
            return [row[0] for row in rows]
