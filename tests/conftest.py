"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from proshot.config import Settings
from proshot.containers import AppContainer
from proshot.domain.images import EncodedImage
from proshot.services.session_store import InMemorySessionStore
from proshot.services.synthesis import (
    SynthesisClient,
    SynthesisError,
    SynthesisService,
)
from proshot.services.workflow import WorkflowService

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


def make_image(label: str) -> EncodedImage:
    """Return a small distinct PNG-tagged image."""
    return EncodedImage(data=PNG_HEADER + label.encode("utf-8"), mime_type="image/png")


@dataclass
class FakeSynthesisClient(SynthesisClient):
    """Fake synthesis client returning queued images and recording calls."""

    results: list[EncodedImage] = field(default_factory=list)
    fail_next: int = 0
    gate: asyncio.Event | None = None
    calls: list[tuple[str, EncodedImage, str]] = field(default_factory=list)
    active_calls: int = 0
    max_active_calls: int = 0
    closed: bool = False

    async def generate(self, source: EncodedImage, instruction: str) -> EncodedImage:
        return await self._call("generate", source, instruction)

    async def edit(self, current: EncodedImage, instruction: str) -> EncodedImage:
        return await self._call("edit", current, instruction)

    async def close(self) -> None:
        self.closed = True

    async def _call(
        self, kind: str, image: EncodedImage, instruction: str
    ) -> EncodedImage:
        self.calls.append((kind, image, instruction))
        self.active_calls += 1
        self.max_active_calls = max(self.max_active_calls, self.active_calls)
        try:
            if self.gate is not None:
                await self.gate.wait()
            if self.fail_next:
                self.fail_next -= 1
                raise RuntimeError("quota exceeded: internal detail")
            if self.results:
                return self.results.pop(0)
            return make_image(f"{kind}-{len(self.calls)}")
        finally:
            self.active_calls -= 1


@dataclass
class ContentPolicyClient(FakeSynthesisClient):
    """Fake client that rejects every request with a SynthesisError."""

    async def _call(
        self, kind: str, image: EncodedImage, instruction: str
    ) -> EncodedImage:
        self.calls.append((kind, image, instruction))
        raise SynthesisError("blocked")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        synthesis_provider="gemini",
        gemini_api_key="gemini-key",
        openai_api_key="openai-key",
    )


@pytest.fixture
def synthesis_client() -> FakeSynthesisClient:
    return FakeSynthesisClient()


@pytest.fixture
def workflow_service(synthesis_client: FakeSynthesisClient) -> WorkflowService:
    return WorkflowService(
        session_store=InMemorySessionStore(ttl_seconds=3600),
        synthesis_service=SynthesisService(synthesis_client),
    )


@pytest.fixture
def container(
    settings: Settings,
    synthesis_client: FakeSynthesisClient,
    workflow_service: WorkflowService,
) -> AppContainer:
    async def close_resources() -> None:
        await synthesis_client.close()

    return AppContainer(
        settings=settings,
        synthesis_client=synthesis_client,
        workflow_service=workflow_service,
        close_resources=close_resources,
    )
