"""Workflow state machine for headshot sessions."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from proshot.domain.images import EncodedImage
from proshot.domain.sessions import (
    Done,
    Editing,
    Generating,
    Idle,
    SelectingStyle,
    Session,
)
from proshot.domain.styles import find_style
from proshot.services.session_store import SessionStore
from proshot.services.synthesis import SynthesisError, SynthesisService

logger = logging.getLogger(__name__)

GENERATE_FAILED_MESSAGE = "Failed to generate headshot. Please try again."
EDIT_FAILED_MESSAGE = "Failed to edit image. Try a different prompt."


class WorkflowError(Exception):
    """Base class for rejected workflow actions."""


class SessionNotFoundError(WorkflowError):
    """The session id is unknown or expired."""


class UnknownStyleError(WorkflowError):
    """The style id is not in the catalog."""


class InvalidTransitionError(WorkflowError):
    """The action is not available in the session's current state."""


class SessionBusyError(WorkflowError):
    """A synthesis call is already outstanding for the session."""


@dataclass(frozen=True)
class Download:
    """A downloadable headshot file."""

    filename: str
    image: EncodedImage


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class WorkflowService:
    """State machine driving upload, style selection, generation and edits."""

    session_store: SessionStore
    synthesis_service: SynthesisService
    clock: Callable[[], datetime] = field(default=_utc_now)

    def create_session(self) -> Session:
        """Start a new session in the idle state."""
        session = self.session_store.create()
        logger.info("Session created", extra={"session_id": str(session.id)})
        return session

    def get_session(self, session_id: UUID) -> Session:
        """Return a live session or raise SessionNotFoundError."""
        session = self.session_store.get(session_id)
        if session is None:
            raise SessionNotFoundError(str(session_id))
        return session

    def upload_image(self, session_id: UUID, image: EncodedImage) -> Session:
        """Accept the selfie and move on to style selection."""
        session = self.get_session(session_id)
        if not isinstance(session.state, Idle):
            raise InvalidTransitionError(
                f"Cannot upload an image while {session.status}"
            )
        session.transition(SelectingStyle(original=image))
        return session

    async def select_style(self, session_id: UUID, style_id: str) -> Session:
        """Record the chosen style and generate a headshot with it."""
        session = self.get_session(session_id)
        style = find_style(style_id)
        if style is None:
            raise UnknownStyleError(style_id)
        _ensure_idle_for_call(session)
        if not isinstance(session.state, SelectingStyle):
            raise InvalidTransitionError(
                f"Cannot select a style while {session.status}"
            )

        pending = Generating(original=session.state.original, style=style)
        session.error = None
        session.transition(pending)
        session.call_outstanding = True
        try:
            result = await self.synthesis_service.generate(pending.original, style)
        except SynthesisError:
            logger.exception(
                "Headshot generation failed",
                extra={"session_id": str(session.id), "style_id": style.id},
            )
            if session.state is pending:
                session.error = GENERATE_FAILED_MESSAGE
                session.transition(SelectingStyle(original=pending.original))
            return session
        finally:
            session.call_outstanding = False

        if session.state is pending:
            session.transition(
                Done(original=pending.original, style=style, result=result)
            )
        else:
            logger.info(
                "Discarding generation result for a session that moved on",
                extra={"session_id": str(session.id)},
            )
        return session

    def set_edit_prompt(self, session_id: UUID, text: str) -> Session:
        """Store the edit instruction text as typed or picked."""
        session = self.get_session(session_id)
        session.edit_prompt = text
        session.touch()
        return session

    async def submit_edit(
        self, session_id: UUID, instruction: str | None = None
    ) -> Session:
        """Apply the edit instruction to the current headshot.

        Does nothing when the instruction is blank or there is no headshot yet.
        On failure the previous headshot and the instruction text are kept.
        Rejected with SessionBusyError while any synthesis call is outstanding.
        """
        session = self.get_session(session_id)
        _ensure_idle_for_call(session)
        if instruction is not None:
            session.edit_prompt = instruction
        text = session.edit_prompt
        if not text.strip() or not isinstance(session.state, Done):
            return session

        current = session.state
        pending = Editing(
            original=current.original,
            style=current.style,
            result=current.result,
            instruction=text,
        )
        session.error = None
        session.transition(pending)
        session.call_outstanding = True
        try:
            result = await self.synthesis_service.edit(pending.result, text)
        except SynthesisError:
            logger.exception(
                "Headshot edit failed", extra={"session_id": str(session.id)}
            )
            if session.state is pending:
                session.error = EDIT_FAILED_MESSAGE
                session.transition(current)
            return session
        finally:
            session.call_outstanding = False

        if session.state is pending:
            session.transition(
                Done(original=pending.original, style=pending.style, result=result)
            )
            session.edit_prompt = ""
        else:
            logger.info(
                "Discarding edit result for a session that moved on",
                extra={"session_id": str(session.id)},
            )
        return session

    def change_style(self, session_id: UUID) -> Session:
        """Go back to style selection, keeping the uploaded selfie."""
        session = self.get_session(session_id)
        _ensure_idle_for_call(session)
        if not isinstance(session.state, Done):
            raise InvalidTransitionError(
                f"Cannot change style while {session.status}"
            )
        session.transition(SelectingStyle(original=session.state.original))
        return session

    def go_back(self, session_id: UUID) -> Session:
        """Leave style selection and return to the upload step."""
        session = self.get_session(session_id)
        if not isinstance(session.state, SelectingStyle):
            raise InvalidTransitionError(f"Cannot go back while {session.status}")
        session.transition(Idle())
        return session

    def start_over(self, session_id: UUID) -> Session:
        """Clear everything and return to the idle state."""
        session = self.get_session(session_id)
        session.reset()
        logger.info("Session reset", extra={"session_id": str(session.id)})
        return session

    def download(self, session_id: UUID) -> Download:
        """Return the current headshot with a timestamped file name."""
        session = self.get_session(session_id)
        image = session.result_image
        if image is None:
            raise InvalidTransitionError("No headshot to download yet")
        millis = int(self.clock().timestamp() * 1000)
        return Download(filename=f"proshot-{millis}.{image.extension}", image=image)


def _ensure_idle_for_call(session: Session) -> None:
    if session.in_flight:
        raise SessionBusyError(f"Session {session.id} is already {session.status}")
