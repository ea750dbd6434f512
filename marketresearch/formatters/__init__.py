"""text-to-markup formatters for model output."""

from marketresearch.formatters.basic import format_response
from marketresearch.formatters.html import to_html
from marketresearch.formatters.markdown import to_markdown
from marketresearch.formatters.sanitize import sanitize

__all__ = [
    "format_response",
    "sanitize",
    "to_html",
    "to_markdown",
]
