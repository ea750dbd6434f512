"""tests for research orchestration."""

import pytest

from conftest import ANALYSIS, FakeClient
from marketresearch.core.models import ResearchRequest
from marketresearch.core.research import RESEARCH_OPTIONS, run_research
from marketresearch.errors import ProviderError, ValidationError
from marketresearch.formatters import format_response, to_html


def test_returns_raw_and_formatted_views(fake_client: FakeClient) -> None:
    """result carries raw text plus both formatted views."""
    result = run_research(ResearchRequest(query="Acme", mode="swot"), fake_client)

    assert result.analysis == ANALYSIS
    assert result.basic_formatted == format_response(ANALYSIS)
    assert result.formatted_analysis == to_html(
        ANALYSIS, add_table_of_contents=True, add_styling=True
    )
    assert result.entity_type == "company"
    assert result.full_response["id"] == "gen-1"


def test_sends_rendered_prompt_with_research_options(fake_client: FakeClient) -> None:
    """the prompt for the mode is sent with the research sampling options."""
    run_research(ResearchRequest(query="Fintech", mode="trends"), fake_client)

    prompt, options = fake_client.calls[0]
    assert "trends analysis for the Fintech sector" in prompt
    assert options == RESEARCH_OPTIONS
    assert options.max_tokens == 1500


def test_sector_ai_impact_entity_type(fake_client: FakeClient) -> None:
    """aiImpact honours the requested entity type."""
    result = run_research(
        ResearchRequest(query="Retail", mode="aiImpact", entity_type="sector"),
        fake_client,
    )
    assert result.entity_type == "sector"


@pytest.mark.parametrize(
    "request_, message",
    [
        (ResearchRequest(query="", mode="swot"), "Missing query parameter"),
        (ResearchRequest(query="Acme", mode=""), "Missing mode parameter"),
        (ResearchRequest(query="Acme", mode="forecast"), "Invalid mode: forecast"),
    ],
)
def test_invalid_requests_make_no_call(
    fake_client: FakeClient, request_: ResearchRequest, message: str
) -> None:
    """validation failures are raised before the provider is called."""
    with pytest.raises(ValidationError, match=message):
        run_research(request_, fake_client)
    assert fake_client.calls == []


def test_provider_errors_propagate() -> None:
    """client errors reach the caller unchanged."""
    client = FakeClient(error=ProviderError("OpenRouter API error: 500 - boom", 500))
    with pytest.raises(ProviderError, match="500"):
        run_research(ResearchRequest(query="Acme", mode="profile"), client)
