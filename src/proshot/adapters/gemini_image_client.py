"""Gemini image model client for headshot synthesis."""

from dataclasses import dataclass

from google import genai
from google.genai import types

from proshot.domain.images import EncodedImage
from proshot.services.synthesis import SynthesisClient, SynthesisError


@dataclass
class GeminiImageClient(SynthesisClient):
    """Synthesis client backed by Gemini's image generation model."""

    client: genai.Client
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "GeminiImageClient":
        """Create a Gemini image client."""
        return cls(client=genai.Client(api_key=api_key), model=model)

    async def generate(self, source: EncodedImage, instruction: str) -> EncodedImage:
        """Generate a new image from the source photo and instruction."""
        return await self._render(source, instruction)

    async def edit(self, current: EncodedImage, instruction: str) -> EncodedImage:
        """Edit the current image per the instruction."""
        return await self._render(current, instruction)

    async def close(self) -> None:
        """Close the underlying async HTTP session."""
        await self.client.aio.aclose()

    async def _render(self, image: EncodedImage, instruction: str) -> EncodedImage:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=[
                types.Part.from_bytes(data=image.data, mime_type=image.mime_type),
                instruction,
            ],
            config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
        )
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None) if feedback else None
        if block_reason:
            raise SynthesisError(f"Request was blocked by the model: {block_reason}")
        result = _first_inline_image(response)
        if result is None:
            raise SynthesisError("Gemini returned no image")
        return result


def _first_inline_image(
    response: types.GenerateContentResponse,
) -> EncodedImage | None:
    """Return the first inline image part of a generate_content response."""
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            inline = getattr(part, "inline_data", None)
            if inline and inline.data:
                return EncodedImage(
                    data=inline.data, mime_type=inline.mime_type or "image/png"
                )
    return None
