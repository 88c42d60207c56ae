"""Tests for the synthesis service."""

import asyncio

import pytest

from proshot.domain.styles import find_style
from proshot.services.synthesis import (
    SynthesisError,
    SynthesisService,
    build_edit_prompt,
    build_generate_prompt,
)
from tests.conftest import ContentPolicyClient, FakeSynthesisClient, make_image


def test_generate_prompt_preserves_identity() -> None:
    style = find_style("corporate")
    assert style is not None

    prompt = build_generate_prompt(style)

    assert "likeness" in prompt
    assert prompt.endswith(style.prompt)


def test_edit_prompt_strips_instruction() -> None:
    prompt = build_edit_prompt("  Add a blue tie \n")

    assert prompt.endswith("Add a blue tie")
    assert "unchanged" in prompt


def test_client_failure_becomes_synthesis_error() -> None:
    client = FakeSynthesisClient(fail_next=1)
    service = SynthesisService(client)

    with pytest.raises(SynthesisError) as excinfo:
        asyncio.run(service.edit(make_image("current"), "Warmer lighting"))

    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_synthesis_error_passes_through() -> None:
    service = SynthesisService(ContentPolicyClient())
    style = find_style("tech")
    assert style is not None

    with pytest.raises(SynthesisError, match="blocked"):
        asyncio.run(service.generate(make_image("selfie"), style))
