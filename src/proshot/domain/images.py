"""Encoded image values passed between the API and synthesis clients."""

import base64
import binascii
from dataclasses import dataclass

_EXTENSIONS = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
}


@dataclass(frozen=True)
class EncodedImage:
    """Raw image bytes with their MIME type."""

    data: bytes
    mime_type: str

    def __post_init__(self) -> None:
        if not self.data:
            raise ValueError("Image data is empty")

    @classmethod
    def from_bytes(cls, data: bytes) -> "EncodedImage":
        """Wrap raw bytes, detecting the MIME type from the file signature."""
        return cls(data=data, mime_type=detect_mime_type(data))

    @classmethod
    def from_data_url(cls, data_url: str) -> "EncodedImage":
        """Parse a base64 ``data:`` URL as produced by a browser FileReader."""
        header, sep, payload = data_url.partition(",")
        if not sep or not header.startswith("data:") or not header.endswith(";base64"):
            raise ValueError("Expected a base64 data URL")
        mime_type = header[len("data:") : -len(";base64")]
        if not mime_type.startswith("image/"):
            raise ValueError(f"Unsupported media type: {mime_type or 'missing'}")
        try:
            data = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("Image payload is not valid base64") from exc
        return cls(data=data, mime_type=mime_type)

    def to_data_url(self) -> str:
        """Render the image as a base64 data URL."""
        encoded = base64.b64encode(self.data).decode("utf-8")
        return f"data:{self.mime_type};base64,{encoded}"

    @property
    def extension(self) -> str:
        """File extension matching the MIME type."""
        return _EXTENSIONS.get(self.mime_type, "png")


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
