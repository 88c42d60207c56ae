"""Session endpoints for the headshot workflow."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, Response, status

from proshot.api.models import (
    EditPromptRequest,
    SelectStyleRequest,
    SessionView,
    SubmitEditRequest,
    UploadImageRequest,
)
from proshot.domain.images import EncodedImage

if TYPE_CHECKING:
    from proshot.services.workflow import WorkflowService

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _workflow(request: Request) -> WorkflowService:
    return request.app.state.container.workflow_service


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_session(request: Request) -> SessionView:
    """Start a new headshot session."""
    session = _workflow(request).create_session()
    return SessionView.from_session(session)


@router.get("/{session_id}")
async def get_session(session_id: UUID, request: Request) -> SessionView:
    """Return the current session state."""
    session = _workflow(request).get_session(session_id)
    return SessionView.from_session(session)


@router.post("/{session_id}/image")
async def upload_image(
    session_id: UUID, body: UploadImageRequest, request: Request
) -> SessionView:
    """Upload the selfie as a data URL."""
    try:
        image = EncodedImage.from_data_url(body.image)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    session = _workflow(request).upload_image(session_id, image)
    return SessionView.from_session(session)


@router.post("/{session_id}/style")
async def select_style(
    session_id: UUID, body: SelectStyleRequest, request: Request
) -> SessionView:
    """Pick a style and generate the headshot."""
    session = await _workflow(request).select_style(session_id, body.style_id)
    return SessionView.from_session(session)


@router.put("/{session_id}/edit-prompt")
async def set_edit_prompt(
    session_id: UUID, body: EditPromptRequest, request: Request
) -> SessionView:
    """Store the edit instruction text."""
    session = _workflow(request).set_edit_prompt(session_id, body.text)
    return SessionView.from_session(session)


@router.post("/{session_id}/edit")
async def submit_edit(
    session_id: UUID, body: SubmitEditRequest, request: Request
) -> SessionView:
    """Apply an edit instruction to the current headshot."""
    session = await _workflow(request).submit_edit(session_id, body.instruction)
    return SessionView.from_session(session)


@router.post("/{session_id}/change-style")
async def change_style(session_id: UUID, request: Request) -> SessionView:
    """Return to style selection with the same selfie."""
    session = _workflow(request).change_style(session_id)
    return SessionView.from_session(session)


@router.post("/{session_id}/back")
async def go_back(session_id: UUID, request: Request) -> SessionView:
    """Return from style selection to the upload step."""
    session = _workflow(request).go_back(session_id)
    return SessionView.from_session(session)


@router.post("/{session_id}/reset")
async def start_over(session_id: UUID, request: Request) -> SessionView:
    """Clear the session and start over."""
    session = _workflow(request).start_over(session_id)
    return SessionView.from_session(session)


@router.get("/{session_id}/download")
async def download(session_id: UUID, request: Request) -> Response:
    """Download the current headshot as an attachment."""
    result = _workflow(request).download(session_id)
    return Response(
        content=result.image.data,
        media_type=result.image.mime_type,
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )
