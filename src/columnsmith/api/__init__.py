"""HTTP API for ColumnSmith."""

from .app import create_app

__all__ = ["create_app"]
