"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import settings
from ..llm import create_llm_client
from ..session import SessionStore
from ..suggestions import LLMColumnSuggester
from ..workspace import Workspace
from .routes import router

logger = logging.getLogger(__name__)

# Global instances
_workspace: Optional[Workspace] = None
_session_store: Optional[SessionStore] = None


def get_workspace() -> Workspace:
    """Get the global workspace instance."""
    global _workspace
    if _workspace is None:
        try:
            suggester = LLMColumnSuggester(create_llm_client())
        except ValueError as e:
            logger.warning(f"Match suggestions disabled: {e}")
            suggester = None
        _workspace = Workspace(suggester=suggester)
    return _workspace


def get_session_store() -> Optional[SessionStore]:
    """Get the session store, or None before startup."""
    return _session_store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    global _session_store
    # Startup
    store = SessionStore()
    await store.initialize()
    _session_store = store
    await get_workspace().restore(store)
    yield
    # Shutdown
    await get_workspace().save(store)
    await store.close()
    _session_store = None


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="ColumnSmith",
        description="Reshape delimited files and match them against a reference layout",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app
