"""Request and response models for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel

from proshot.domain.sessions import Session
from proshot.domain.styles import StylePreset


class StyleView(BaseModel):
    """Public view of a style preset."""

    id: str
    name: str
    description: str
    preview_url: str

    @classmethod
    def from_preset(cls, style: StylePreset) -> "StyleView":
        return cls(
            id=style.id,
            name=style.name,
            description=style.description,
            preview_url=style.preview_url,
        )


class StyleCatalog(BaseModel):
    """Style presets and quick edit suggestions."""

    styles: list[StyleView]
    edit_suggestions: list[str]


class SessionView(BaseModel):
    """Snapshot of a session returned by every session endpoint."""

    id: UUID
    status: str
    in_flight: bool
    style: StyleView | None = None
    original_image: str | None = None
    result_image: str | None = None
    error: str | None = None
    edit_prompt: str = ""

    @classmethod
    def from_session(cls, session: Session) -> "SessionView":
        style = session.selected_style
        original = session.original_image
        result = session.result_image
        return cls(
            id=session.id,
            status=session.status,
            in_flight=session.in_flight,
            style=StyleView.from_preset(style) if style else None,
            original_image=original.to_data_url() if original else None,
            result_image=result.to_data_url() if result else None,
            error=session.error,
            edit_prompt=session.edit_prompt,
        )


class UploadImageRequest(BaseModel):
    """Selfie upload as a base64 data URL."""

    image: str


class SelectStyleRequest(BaseModel):
    style_id: str


class EditPromptRequest(BaseModel):
    text: str


class SubmitEditRequest(BaseModel):
    """Edit submission; falls back to the stored edit prompt when omitted."""

    instruction: str | None = None
