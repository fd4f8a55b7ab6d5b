"""Data models for saved editor sessions."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from ..columns.models import Column
from ..tabular.models import ParsedTable


def _utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


class SessionRecord(BaseModel):
    """A table and its column layout, as saved for one editor instance."""

    data: ParsedTable
    columns: list[Column] = Field(default_factory=list)
    saved_at: datetime = Field(default_factory=_utc_now)

    def to_payload(self) -> str:
        """Serialize the stored part of the record with camelCase column keys."""
        return self.model_dump_json(by_alias=True, exclude={"saved_at"})
