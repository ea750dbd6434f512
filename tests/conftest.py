"""shared fixtures."""

from typing import Any, Optional

import pytest

from marketresearch.config import Settings
from marketresearch.core.models import CompletionOptions
from marketresearch.errors import RenderError
from marketresearch.exporters.base import DocumentRenderer

ANALYSIS = "1. COMPANY OVERVIEW:\n- Founded 1999\n- **HQ**: Berlin\n\nRISKS\nSome text."


class FakeClient:
    """LLM collaborator returning a canned response."""

    def __init__(self, content: str = ANALYSIS, error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.calls: list[tuple[str, Optional[CompletionOptions]]] = []

    def complete(
        self, prompt: str, options: Optional[CompletionOptions] = None
    ) -> dict[str, Any]:
        self.calls.append((prompt, options))
        if self.error is not None:
            raise self.error
        return {
            "id": "gen-1",
            "choices": [{"message": {"role": "assistant", "content": self.content}}],
        }

    def close(self) -> None:
        pass


class StubRenderer(DocumentRenderer):
    """renderer that records its input and returns fixed bytes."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.rendered: list[str] = []

    def render(self, html: str) -> bytes:
        self.rendered.append(html)
        if self.fail:
            raise RenderError("browser crashed")
        return b"%PDF-1.4 stub"


@pytest.fixture
def settings() -> Settings:
    """settings with a well-formed api key."""
    return Settings(api_key="sk-or-test-key")


@pytest.fixture
def fake_client() -> FakeClient:
    """canned LLM collaborator."""
    return FakeClient()


@pytest.fixture
def stub_renderer() -> StubRenderer:
    """PDF renderer stub."""
    return StubRenderer()
