"""Review mode API endpoints - per-hunk review of proposed file changes"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from models.review import HunkSegment, PendingChange
from models.session import (
    CommitResponse,
    EditHunkRequest,
    EditLineRequest,
    NavigationDirection,
    PreviewResponse,
    ProposeChangeRequest,
    ProposeChangeResponse,
    SessionSnapshot,
)
from services.change_session import ChangeSession
from services.config_manager import ConfigManager
from services.errors import ChangeNotFoundError, DiffTooLargeError, SessionClosedError
from services.pending_changes import PendingChangeStore

router = APIRouter()


def get_session(change_id: str) -> tuple[PendingChange, ChangeSession]:
    """Look up a pending change and its session, 404 if unknown"""
    store = PendingChangeStore.get_instance()
    try:
        return store.get(change_id), store.session(change_id)
    except ChangeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def build_snapshot(change: PendingChange, session: ChangeSession) -> SessionSnapshot:
    """Everything the editor renders for a review"""
    current = session.current_hunk()
    return SessionSnapshot(
        change=change,
        segments=session.get_segments(),
        stats=session.stats,
        preview=session.preview(),
        pending_hunks=len(session.pending_hunks()),
        current_hunk_id=current.id if current else None,
    )


def snapshot_for(change_id: str) -> SessionSnapshot:
    change, session = get_session(change_id)
    return build_snapshot(change, session)


def _apply(change_id: str, operation) -> SessionSnapshot:
    """Run a session mutation and return the new snapshot"""
    change, session = get_session(change_id)
    try:
        operation(session)
    except SessionClosedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return build_snapshot(change, session)


@router.post("/changes", response_model=ProposeChangeResponse)
async def propose_change(request: ProposeChangeRequest) -> ProposeChangeResponse:
    """Propose new content for a file; reviewed unless diff mode is off"""
    settings = ConfigManager.get_instance().review_settings()
    store = PendingChangeStore.get_instance()

    if not settings.get("diffModeEnabled", True):
        try:
            store.apply_directly(request.file_path, request.new_content)
        except OSError as e:
            raise HTTPException(status_code=500, detail=f"Failed to write file: {e}")
        return ProposeChangeResponse(status="applied")

    store.diff_generator.max_cells = settings.get("maxDiffCells")
    try:
        change = store.propose(
            request.file_path,
            request.original_content,
            request.new_content,
        )
    except DiffTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))

    return ProposeChangeResponse(status="pending", snapshot=snapshot_for(change.id))


@router.get("/changes", response_model=list[PendingChange])
async def list_changes() -> list[PendingChange]:
    """List all pending changes, oldest first"""
    return PendingChangeStore.get_instance().list_changes()


@router.get("/files", response_model=SessionSnapshot)
async def get_change_for_file(path: str) -> SessionSnapshot:
    """Get the review for a file path"""
    try:
        change = PendingChangeStore.get_instance().get_for_file(path)
    except ChangeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return snapshot_for(change.id)


@router.get("/changes/{change_id}", response_model=SessionSnapshot)
async def get_change(change_id: str) -> SessionSnapshot:
    """Get the current review state of a change"""
    return snapshot_for(change_id)


@router.get("/changes/{change_id}/preview", response_model=PreviewResponse)
async def preview_change(change_id: str) -> PreviewResponse:
    """Preview the document that committing would write"""
    _, session = get_session(change_id)
    context_lines = ConfigManager.get_instance().review_settings().get("contextLines", 3)
    return PreviewResponse(
        content=session.preview(),
        inline=session.render_inline(context_lines),
    )


@router.post("/changes/{change_id}/hunks/{hunk_id}/accept", response_model=SessionSnapshot)
async def accept_hunk(change_id: str, hunk_id: str) -> SessionSnapshot:
    return _apply(change_id, lambda s: s.accept_hunk(hunk_id))


@router.post("/changes/{change_id}/hunks/{hunk_id}/reject", response_model=SessionSnapshot)
async def reject_hunk(change_id: str, hunk_id: str) -> SessionSnapshot:
    return _apply(change_id, lambda s: s.reject_hunk(hunk_id))


@router.post("/changes/{change_id}/hunks/{hunk_id}/revert", response_model=SessionSnapshot)
async def revert_hunk(change_id: str, hunk_id: str) -> SessionSnapshot:
    return _apply(change_id, lambda s: s.revert_hunk(hunk_id))


@router.put("/changes/{change_id}/hunks/{hunk_id}", response_model=SessionSnapshot)
async def edit_hunk(change_id: str, hunk_id: str, request: EditHunkRequest) -> SessionSnapshot:
    """Replace the content of a hunk"""
    return _apply(change_id, lambda s: s.edit_hunk(hunk_id, request.lines))


@router.put(
    "/changes/{change_id}/hunks/{hunk_id}/lines/{line_index}",
    response_model=SessionSnapshot,
)
async def edit_hunk_line(
    change_id: str,
    hunk_id: str,
    line_index: int,
    request: EditLineRequest,
) -> SessionSnapshot:
    """Replace a single line of a hunk"""
    return _apply(change_id, lambda s: s.edit_hunk_line(hunk_id, line_index, request.value))


@router.put(
    "/changes/{change_id}/segments/{segment_id}/lines/{line_index}",
    response_model=SessionSnapshot,
)
async def edit_unchanged_line(
    change_id: str,
    segment_id: str,
    line_index: int,
    request: EditLineRequest,
) -> SessionSnapshot:
    """Replace a single line outside any hunk"""
    return _apply(
        change_id,
        lambda s: s.edit_unchanged_line(segment_id, line_index, request.value),
    )


@router.post("/changes/{change_id}/accept-all", response_model=SessionSnapshot)
async def accept_all(change_id: str) -> SessionSnapshot:
    return _apply(change_id, lambda s: s.accept_all_pending())


@router.post("/changes/{change_id}/navigate", response_model=HunkSegment | None)
async def navigate(
    change_id: str,
    direction: NavigationDirection = NavigationDirection.NEXT,
) -> HunkSegment | None:
    """Focus the next or previous pending hunk"""
    _, session = get_session(change_id)
    return session.navigate(direction)


@router.post("/changes/{change_id}/commit", response_model=CommitResponse)
async def commit_change(change_id: str) -> CommitResponse:
    """Write the reviewed document and close the review"""
    store = PendingChangeStore.get_instance()
    change, _ = get_session(change_id)
    try:
        content = store.commit(change_id)
    except SessionClosedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Failed to write file: {e}")

    return CommitResponse(change_id=change_id, file_path=change.file_path, content=content)


@router.post("/changes/{change_id}/discard")
async def discard_change(change_id: str) -> dict[str, Any]:
    """Close the review without touching the file"""
    store = PendingChangeStore.get_instance()
    get_session(change_id)
    try:
        store.discard(change_id)
    except SessionClosedError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return {"status": "success", "message": "Change discarded"}
