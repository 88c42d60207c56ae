"""Image synthesis service for headshot generation and edits."""

from dataclasses import dataclass
from typing import Protocol

from proshot.domain.images import EncodedImage
from proshot.domain.styles import StylePreset

GENERATE_PREAMBLE = (
    "Transform this photo into a professional headshot. "
    "Keep the person's identity, facial features and likeness exactly the same. "
    "Change only the background, attire and lighting as described: "
)
EDIT_PREAMBLE = (
    "Edit this professional headshot. "
    "Keep the person's identity and every detail not mentioned unchanged. "
    "Requested change: "
)


class SynthesisError(Exception):
    """Raised when a generate or edit call fails for any reason."""


class SynthesisClient(Protocol):
    """Interface for a remote image generation capability."""

    async def generate(
        self, source: EncodedImage, instruction: str
    ) -> EncodedImage:
        """Return a new image derived from the source and instruction."""

    async def edit(self, current: EncodedImage, instruction: str) -> EncodedImage:
        """Return the current image modified per the instruction."""

    async def close(self) -> None:
        """Release underlying network resources."""


@dataclass
class SynthesisService:
    """Builds synthesis prompts and normalises client failures."""

    client: SynthesisClient

    async def generate(self, source: EncodedImage, style: StylePreset) -> EncodedImage:
        """Generate a headshot of the source subject in the given style."""
        prompt = build_generate_prompt(style)
        try:
            return await self.client.generate(source, prompt)
        except SynthesisError:
            raise
        except Exception as exc:
            raise SynthesisError("generate failed") from exc

    async def edit(self, current: EncodedImage, instruction: str) -> EncodedImage:
        """Apply a free-text edit to an existing headshot."""
        prompt = build_edit_prompt(instruction)
        try:
            return await self.client.edit(current, prompt)
        except SynthesisError:
            raise
        except Exception as exc:
            raise SynthesisError("edit failed") from exc


def build_generate_prompt(style: StylePreset) -> str:
    """Combine the identity-preserving preamble with the style prompt."""
    return f"{GENERATE_PREAMBLE}{style.prompt}"


def build_edit_prompt(instruction: str) -> str:
    """Wrap a user edit instruction so unrelated attributes stay intact."""
    return f"{EDIT_PREAMBLE}{instruction.strip()}"
