"""escaping of markup-significant characters in model output."""

import html as html_lib
from typing import Optional


def sanitize(text: Optional[str]) -> str:
    """
    escapes &, <, >, " and ' so model output cannot inject markup.

    html.escape replaces & before anything else, so entities produced here are
    never escaped twice within one call. Sanitizing an already sanitized string
    escapes its entities again; callers apply it exactly once.

    Args:
        text: raw text

    Returns:
        escaped text (empty string for None)
    """
    if not text:
        return ""
    # html.escape emits &#x27; for the apostrophe; the UI expects &#039;
    return html_lib.escape(text, quote=True).replace("&#x27;", "&#039;")
