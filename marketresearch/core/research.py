"""Research orchestration: prompt, provider call, formatting."""

import logging

from marketresearch.core.models import (
    CompletionOptions,
    ResearchRequest,
    ResearchResult,
)
from marketresearch.errors import ValidationError
from marketresearch.formatters import format_response, to_html
from marketresearch.llm.client import CompletionClient, extract_text
from marketresearch.prompts import build_prompt

logger = logging.getLogger(__name__)

RESEARCH_OPTIONS = CompletionOptions(max_tokens=1500, temperature=0.7)


def validate_request(request: ResearchRequest) -> None:
    """
    checks required fields of a research request.

    Raises:
        ValidationError: if query or mode is missing
    """
    if not request.query:
        raise ValidationError("Missing query parameter")
    if not request.mode:
        raise ValidationError("Missing mode parameter")


def run_research(
    request: ResearchRequest,
    client: CompletionClient,
    options: CompletionOptions = RESEARCH_OPTIONS,
) -> ResearchResult:
    """
    runs one research request end to end.

    Args:
        request: query, mode and optional entity type
        client: LLM collaborator
        options: completion options for the provider call

    Returns:
        ResearchResult carrying the raw text and both formatted views

    Raises:
        ValidationError: for a missing field or unknown mode
        MarketResearchError: subclasses raised by the client
    """
    validate_request(request)
    prompt, entity_type = build_prompt(request.mode, request.query, request.entity_type)

    logger.info(
        "Researching %r (mode=%s, entity=%s)", request.query, request.mode, entity_type
    )
    response = client.complete(prompt, options)
    analysis = extract_text(response)
    logger.debug("Received %d characters of analysis", len(analysis))

    return ResearchResult(
        query=request.query,
        mode=request.mode,
        entity_type=entity_type,
        analysis=analysis,
        formatted_analysis=to_html(
            analysis, add_table_of_contents=True, add_styling=True
        ),
        basic_formatted=format_response(analysis),
        full_response=response,
    )
