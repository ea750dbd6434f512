"""conversion of model output into heading-enhanced markdown."""

from typing import Optional

from marketresearch.formatters.pipeline import Pipeline, Stage
from marketresearch.formatters.structure import (
    CAPS_HEADING_PATTERN,
    NUMBERED_HEADING_PATTERN,
    detect_headings,
    normalize_newlines,
)

TOC_TITLE = "Table of Contents"


def _numbered_headings(text: str) -> str:
    return NUMBERED_HEADING_PATTERN.sub(r"## \1. \2", text)


def _caps_headings(text: str) -> str:
    return CAPS_HEADING_PATTERN.sub(r"## \1", text)


# numbered pass runs first; its output starts with "#" so the caps pass skips it
HEADING_STAGES = Pipeline(
    [
        Stage("numbered_headings", _numbered_headings),
        Stage("caps_headings", _caps_headings),
    ]
)


def build_table_of_contents(markdown: str) -> str:
    """
    builds a numbered link list for the level-2 headings in markdown.

    Args:
        markdown: heading-enhanced markdown

    Returns:
        table of contents block, or "" when there are no level-2 headings
    """
    headings = detect_headings(markdown, levels=(2,))
    if not headings:
        return ""
    links = "\n".join(
        f"{index}. [{heading.label}](#{heading.anchor})"
        for index, heading in enumerate(headings, start=1)
    )
    return f"## {TOC_TITLE}\n\n{links}"


def to_markdown(
    text: Optional[str],
    add_table_of_contents: bool = False,
    enhance_headings: bool = True,
) -> str:
    """
    converts model output to markdown.

    Args:
        text: raw (or already sanitized) model output
        add_table_of_contents: prepends a linked table of contents
        enhance_headings: rewrites ALL-CAPS section lines as level-2 headings

    Returns:
        markdown text, or "" for empty input
    """
    if not text:
        return ""

    text = normalize_newlines(text)
    markdown = HEADING_STAGES(text) if enhance_headings else text

    if add_table_of_contents:
        toc = build_table_of_contents(markdown)
        if toc:
            markdown = f"{toc}\n\n---\n\n{markdown}"

    return markdown
