"""OpenAI Images API client for headshot synthesis."""

import base64
from dataclasses import dataclass

from openai import AsyncOpenAI

from proshot.domain.images import EncodedImage
from proshot.services.synthesis import SynthesisClient, SynthesisError


@dataclass
class OpenAIImageClient(SynthesisClient):
    """Synthesis client backed by the OpenAI image edit endpoint."""

    client: AsyncOpenAI
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "OpenAIImageClient":
        """Create an OpenAI image client."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model)

    async def generate(self, source: EncodedImage, instruction: str) -> EncodedImage:
        """Generate a new image from the source photo and instruction."""
        return await self._edit_image(source, instruction)

    async def edit(self, current: EncodedImage, instruction: str) -> EncodedImage:
        """Edit the current image per the instruction."""
        return await self._edit_image(current, instruction)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()

    async def _edit_image(self, image: EncodedImage, instruction: str) -> EncodedImage:
        response = await self.client.images.edit(
            model=self.model,
            image=(f"input.{image.extension}", image.data, image.mime_type),
            prompt=instruction,
        )
        items = response.data or []
        encoded = items[0].b64_json if items else None
        if not encoded:
            raise SynthesisError("OpenAI returned no image data")
        return EncodedImage.from_bytes(base64.b64decode(encoded))
