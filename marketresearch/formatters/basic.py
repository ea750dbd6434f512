"""quick-display formatter for the chat-style result panel."""

import re
from typing import Optional

from marketresearch.core.models import ListRun
from marketresearch.formatters.sanitize import sanitize
from marketresearch.formatters.structure import iter_blocks, normalize_newlines

# "**Label**:" anywhere in a line; only the label moves into the heading
BOLD_HEADER_PATTERN = re.compile(r"\*\*([^:\n]+)\*\*:")

HEADER_CLASS = "text-lg font-bold text-black"
LIST_CLASS = "list-disc pl-5 space-y-2"
CONTAINER_CLASS = (
    "market-research-output p-4 bg-white dark:bg-gray-800 text-black rounded-lg shadow"
)


def format_response(raw_text: Optional[str]) -> str:
    """
    formats model output into an HTML fragment for the result panel.

    Args:
        raw_text: raw model output

    Returns:
        HTML fragment wrapped in a light-background container, or "" for
        empty input
    """
    if not raw_text:
        return ""

    text = sanitize(normalize_newlines(raw_text))
    text = BOLD_HEADER_PATTERN.sub(rf'<h3 class="{HEADER_CLASS}">\1</h3>', text)

    lines: list[str] = []
    for block in iter_blocks(text.split("\n")):
        if isinstance(block, ListRun):
            lines.append(f'<ul class="{LIST_CLASS}">')
            lines.extend(f"<li>{item}</li>" for item in block.items)
            lines.append("</ul>")
        else:
            lines.append(block)
    text = "\n".join(lines)

    # blank lines split paragraphs, single breaks stay inline
    text = text.replace("\n\n", "</p><p>").replace("\n", "<br>")

    return f'<div class="{CONTAINER_CLASS}"><p>{text}</p></div>'
