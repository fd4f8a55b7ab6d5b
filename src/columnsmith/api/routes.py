"""API routes for ColumnSmith."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field

from ..suggestions import NoUnmatchedColumnsError, SuggestionError
from ..tabular import EmptyOrUnheadedError
from ..workspace import (
    ExportDisabledError,
    FileTooLargeError,
    NoTableLoadedError,
    ReadFailureError,
    TableEditor,
)

router = APIRouter()


def get_workspace():
    """Get the global workspace instance."""
    from .app import get_workspace as _get_workspace

    return _get_workspace()


def get_session_store():
    """Get the session store if the app lifespan opened one."""
    from .app import get_session_store as _get_session_store

    return _get_session_store()


class ColumnUpdateRequest(BaseModel):
    """Request to rename a column or change its width."""

    new_name: Optional[str] = None
    width: Optional[int] = None


class ColumnMoveRequest(BaseModel):
    """Request to move a column in front of another one."""

    before_id: str


class AcceptSuggestionRequest(BaseModel):
    """Request to accept one suggestion."""

    model_config = ConfigDict(populate_by_name=True)

    source_column: str = Field(alias="sourceColumn")
    reference_column: str = Field(alias="referenceColumn")


def _editor(instance: str) -> TableEditor:
    try:
        return get_workspace().editor(instance)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _editable(instance: str) -> TableEditor:
    editor = _editor(instance)
    if editor.read_only:
        raise HTTPException(status_code=403, detail="This table is read-only")
    if not editor.model.has_table:
        raise HTTPException(status_code=409, detail="No table loaded")
    return editor


async def _persist():
    store = get_session_store()
    if store is not None:
        await get_workspace().save(store)


@router.get("/health")
async def health_check():
    """Health check endpoint with non-secret diagnostics."""
    from ..config import settings

    config = {
        "llm_provider": settings.llm_provider,
        "model_name": settings.model_name,
        "anthropic_key_present": bool(settings.anthropic_api_key),
        "openrouter_key_present": bool(settings.openrouter_api_key),
        "max_file_size_mb": settings.max_file_size_mb,
    }
    if settings.llm_provider == "openrouter":
        config["openrouter_model"] = settings.openrouter_model

    return {"status": "ok", "service": "columnsmith", "config": config}


# Table endpoints


@router.post("/tables/{instance}/upload")
async def upload_table(instance: str, request: Request):
    """Upload raw file bytes to an instance, replacing its table on success."""
    editor = _editor(instance)
    raw = await request.body()
    try:
        table = editor.load_bytes(raw)
    except FileTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except ReadFailureError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EmptyOrUnheadedError as e:
        raise HTTPException(status_code=422, detail=str(e))

    await _persist()
    return {
        "status": "ok",
        "delimiter": editor.delimiter,
        "column_count": len(table.headers),
        "row_count": table.row_count,
    }


@router.get("/tables/{instance}")
async def get_table(instance: str):
    """Current columns, preview and per-column match status."""
    _editor(instance)
    return get_workspace().state(instance).model_dump(by_alias=True)


@router.delete("/tables/{instance}")
async def reset_table(instance: str):
    """Forget the loaded table."""
    _editor(instance).reset()
    await _persist()
    return {"status": "ok", "message": "Table reset"}


@router.post("/tables/{instance}/columns")
async def add_column(instance: str):
    """Append a new empty column."""
    column = _editable(instance).model.add_column()
    await _persist()
    return {"column": column.model_dump(by_alias=True)}


@router.post("/tables/{instance}/columns/{column_id}/clone")
async def clone_column(instance: str, column_id: str):
    """Duplicate a column next to itself."""
    column = _editable(instance).model.clone_column(column_id)
    await _persist()
    if column is None:
        raise HTTPException(status_code=404, detail="Column not found")
    return {"column": column.model_dump(by_alias=True)}


@router.delete("/tables/{instance}/columns/{column_id}")
async def delete_column(instance: str, column_id: str):
    """Delete a column."""
    deleted = _editable(instance).model.delete_column(column_id)
    await _persist()
    if not deleted:
        raise HTTPException(status_code=404, detail="Column not found")
    return {"status": "ok", "message": "Column deleted"}


@router.patch("/tables/{instance}/columns/{column_id}")
async def update_column(instance: str, column_id: str, request: ColumnUpdateRequest):
    """Rename a column and/or change its width."""
    model = _editable(instance).model
    if model.get_column(column_id) is None:
        raise HTTPException(status_code=404, detail="Column not found")

    if request.width is not None and request.width <= model.min_width:
        raise HTTPException(
            status_code=400, detail=f"Width must be greater than {model.min_width}"
        )

    if request.new_name is not None:
        model.rename_column(column_id, request.new_name)
    if request.width is not None:
        model.set_column_width(column_id, request.width)
    await _persist()
    return {"column": model.get_column(column_id).model_dump(by_alias=True)}


@router.post("/tables/{instance}/columns/{column_id}/move")
async def move_column(instance: str, column_id: str, request: ColumnMoveRequest):
    """Move a column immediately in front of another column."""
    model = _editable(instance).model
    if not model.reorder_column(column_id, request.before_id):
        raise HTTPException(status_code=400, detail="Column could not be moved")
    await _persist()
    return {"columns": [c.model_dump(by_alias=True) for c in model.columns]}


@router.post("/tables/{instance}/undo")
async def undo(instance: str):
    """Undo the last add, clone or delete."""
    model = _editable(instance).model
    undone = model.undo()
    await _persist()
    return {"undone": undone, "can_undo": model.can_undo}


@router.get("/tables/{instance}/export")
async def export_table(instance: str):
    """Download the reshaped table as CSV."""
    editor = _editor(instance)
    try:
        result = editor.export()
    except ExportDisabledError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NoTableLoadedError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return Response(
        content=result.content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )


# Matching endpoints


@router.get("/match")
async def match_status():
    """Compare the working layout with the reference layout."""
    workspace = get_workspace()
    result = workspace.match()
    data = result.model_dump(mode="json")
    data["has_unmatched_columns"] = workspace.has_unmatched_columns()
    return data


@router.post("/suggestions")
async def find_suggestions():
    """Ask the suggestion service to pair unmatched columns."""
    workspace = get_workspace()
    try:
        suggestions = await workspace.find_suggestions()
    except NoUnmatchedColumnsError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except SuggestionError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return {
        "count": len(suggestions),
        "suggestions": [s.model_dump(by_alias=True) for s in suggestions],
    }


@router.post("/suggestions/accept")
async def accept_suggestion(request: AcceptSuggestionRequest):
    """Rename the source column to the suggested reference name."""
    workspace = get_workspace()
    renamed = workspace.accept_suggestion(request.source_column, request.reference_column)
    await _persist()
    return {
        "renamed": renamed,
        "pending": [s.model_dump(by_alias=True) for s in workspace.suggestions.pending],
    }


@router.delete("/suggestions")
async def dismiss_suggestions():
    """Clear pending suggestions."""
    get_workspace().dismiss_suggestions()
    return {"status": "ok"}
