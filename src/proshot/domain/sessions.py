"""Domain models for headshot sessions."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import ClassVar
from uuid import UUID, uuid4

from proshot.domain.images import EncodedImage
from proshot.domain.styles import StylePreset


@dataclass(frozen=True)
class Idle:
    """Waiting for a selfie upload."""

    status: ClassVar[str] = "IDLE"


@dataclass(frozen=True)
class SelectingStyle:
    """Selfie uploaded, waiting for a style choice."""

    original: EncodedImage
    status: ClassVar[str] = "SELECTING_STYLE"


@dataclass(frozen=True)
class Generating:
    """A generate call is outstanding."""

    original: EncodedImage
    style: StylePreset
    status: ClassVar[str] = "GENERATING"


@dataclass(frozen=True)
class Done:
    """A generated headshot is available."""

    original: EncodedImage
    style: StylePreset
    result: EncodedImage
    status: ClassVar[str] = "DONE"


@dataclass(frozen=True)
class Editing:
    """An edit call on the current result is outstanding."""

    original: EncodedImage
    style: StylePreset
    result: EncodedImage
    instruction: str
    status: ClassVar[str] = "EDITING"


WorkflowState = Idle | SelectingStyle | Generating | Done | Editing


@dataclass
class Session:
    """Mutable state for one user's interaction, held in memory only."""

    id: UUID = field(default_factory=uuid4)
    state: WorkflowState = field(default_factory=Idle)
    error: str | None = None
    edit_prompt: str = ""
    call_outstanding: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))

    @property
    def status(self) -> str:
        return self.state.status

    @property
    def in_flight(self) -> bool:
        """True exactly while a synthesis call is outstanding.

        Survives a reset, so a session cleared mid-call stays busy until the
        stale call returns.
        """
        return self.call_outstanding or isinstance(self.state, Generating | Editing)

    @property
    def original_image(self) -> EncodedImage | None:
        if isinstance(self.state, Idle):
            return None
        return self.state.original

    @property
    def selected_style(self) -> StylePreset | None:
        if isinstance(self.state, Generating | Done | Editing):
            return self.state.style
        return None

    @property
    def result_image(self) -> EncodedImage | None:
        if isinstance(self.state, Done | Editing):
            return self.state.result
        return None

    def transition(self, state: WorkflowState) -> None:
        """Replace the workflow state in place."""
        self.state = state
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.now(tz=UTC)

    def reset(self) -> None:
        """Return the workflow fields to their initial values.

        The identity and the outstanding-call marker are kept.
        """
        self.transition(Idle())
        self.error = None
        self.edit_prompt = ""
