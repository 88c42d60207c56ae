"""In-memory session storage."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from proshot.domain.sessions import Session


class SessionStore(Protocol):
    """Storage interface for live sessions."""

    def create(self) -> Session:
        """Create and store a new idle session."""

    def get(self, session_id: UUID) -> Session | None:
        """Return a live session by id, if present and not expired."""

    def delete(self, session_id: UUID) -> None:
        """Forget a session."""


@dataclass
class InMemorySessionStore(SessionStore):
    """Session store that keeps sessions in process memory.

    Sessions that have not changed for ``ttl_seconds`` are dropped on access.
    Sessions with an outstanding synthesis call never expire.
    """

    ttl_seconds: int
    _sessions: dict[UUID, Session]

    def __init__(self, ttl_seconds: int = 3600) -> None:
        self.ttl_seconds = ttl_seconds
        self._sessions = {}

    def create(self) -> Session:
        """Create and store a new idle session."""
        self._purge_expired()
        session = Session()
        self._sessions[session.id] = session
        return session

    def get(self, session_id: UUID) -> Session | None:
        """Return a session if it hasn't expired."""
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if self._is_expired(session, datetime.now(tz=UTC)):
            self._sessions.pop(session_id, None)
            return None
        return session

    def delete(self, session_id: UUID) -> None:
        """Remove a session."""
        self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)

    def _is_expired(self, session: Session, now: datetime) -> bool:
        if session.in_flight:
            return False
        return now >= session.updated_at + timedelta(seconds=self.ttl_seconds)

    def _purge_expired(self) -> None:
        now = datetime.now(tz=UTC)
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if self._is_expired(session, now)
        ]
        for session_id in expired:
            self._sessions.pop(session_id, None)
