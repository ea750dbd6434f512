"""prompt templates for each research mode."""

from typing import Optional

from marketresearch.prompts import ai_impact, profile, swot  # noqa: F401
from marketresearch.prompts.registry import (
    PromptTemplate,
    TemplateRegistry,
    registry,
    template,
)


def build_prompt(
    mode: str, subject: str, entity_type: Optional[str] = None
) -> tuple[str, str]:
    """
    renders the prompt for a research request.

    Args:
        mode: one of profile, swot, trends, aiImpact
        subject: company or sector name interpolated into the template
        entity_type: "company" or "sector" (only aiImpact distinguishes them)

    Returns:
        tuple of (prompt text, resolved entity type)

    Raises:
        ValidationError: if mode is unknown
    """
    prompt_template = registry.resolve(mode, entity_type)
    return prompt_template.render(subject), prompt_template.entity_type


__all__ = [
    "PromptTemplate",
    "TemplateRegistry",
    "build_prompt",
    "registry",
    "template",
]
