"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from proshot.adapters.gemini_image_client import GeminiImageClient
from proshot.adapters.openai_image_client import OpenAIImageClient
from proshot.config import Settings
from proshot.services.session_store import InMemorySessionStore
from proshot.services.synthesis import SynthesisClient, SynthesisService
from proshot.services.workflow import WorkflowService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    synthesis_client: SynthesisClient
    workflow_service: WorkflowService
    close_resources: Callable[[], Awaitable[None]]


def build_synthesis_client(settings: Settings) -> SynthesisClient:
    """Create the synthesis client for the configured provider."""
    api_key = settings.provider_api_key()
    if not api_key:
        env_var = f"{settings.synthesis_provider.upper()}_API_KEY"
        raise RuntimeError(f"Set {env_var} before starting the service.")
    if settings.synthesis_provider == "openai":
        return OpenAIImageClient.create(api_key, settings.openai_image_model)
    return GeminiImageClient.create(api_key, settings.gemini_model)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    synthesis_client = build_synthesis_client(resolved_settings)
    workflow_service = WorkflowService(
        session_store=InMemorySessionStore(
            ttl_seconds=resolved_settings.session_ttl_seconds
        ),
        synthesis_service=SynthesisService(synthesis_client),
    )

    async def close_resources() -> None:
        await synthesis_client.close()

    return AppContainer(
        settings=resolved_settings,
        synthesis_client=synthesis_client,
        workflow_service=workflow_service,
        close_resources=close_resources,
    )
