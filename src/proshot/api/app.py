"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from proshot.api.models import StyleCatalog, StyleView
from proshot.api.sessions import router as sessions_router
from proshot.app_logging import configure_logging
from proshot.containers import AppContainer
from proshot.domain.styles import EDIT_SUGGESTIONS, PROFESSIONAL_STYLES
from proshot.services.workflow import (
    InvalidTransitionError,
    SessionBusyError,
    SessionNotFoundError,
    UnknownStyleError,
    WorkflowError,
)

_ERROR_STATUS: dict[type[WorkflowError], int] = {
    SessionNotFoundError: status.HTTP_404_NOT_FOUND,
    UnknownStyleError: status.HTTP_404_NOT_FOUND,
    InvalidTransitionError: status.HTTP_409_CONFLICT,
    SessionBusyError: status.HTTP_409_CONFLICT,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="ProShot", lifespan=lifespan)
    app.state.container = container

    app.include_router(sessions_router)

    @app.exception_handler(WorkflowError)
    async def workflow_error_handler(
        request: Request, exc: WorkflowError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=_status_for(exc),
            content={"detail": _detail_for(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/styles")
    async def styles() -> StyleCatalog:
        """Return the style catalog and quick edit suggestions."""
        return StyleCatalog(
            styles=[StyleView.from_preset(style) for style in PROFESSIONAL_STYLES],
            edit_suggestions=list(EDIT_SUGGESTIONS),
        )

    return app


def _status_for(exc: WorkflowError) -> int:
    return _ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)


def _detail_for(exc: WorkflowError) -> str:
    if isinstance(exc, SessionNotFoundError):
        return "Session not found."
    if isinstance(exc, UnknownStyleError):
        return f"Unknown style: {exc}"
    return str(exc)
