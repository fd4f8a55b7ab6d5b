"""Persistence of editor sessions."""

from .models import SessionRecord
from .store import SessionStore

__all__ = ["SessionRecord", "SessionStore"]
