"""conversion of model output into a styled HTML document."""

import re
from typing import Optional

from marketresearch.formatters.markdown import TOC_TITLE, to_markdown
from marketresearch.formatters.pipeline import Pipeline, Stage
from marketresearch.formatters.sanitize import sanitize
from marketresearch.formatters.structure import iter_runs, normalize_newlines

H2_PATTERN = re.compile(r"^## (.+)$", re.MULTILINE)
H1_PATTERN = re.compile(r"^# (.+)$", re.MULTILINE)
BULLET_PATTERN = re.compile(r"^- (.+)$", re.MULTILINE)
# lines that already carry block markup
PARAGRAPH_PATTERN = re.compile(
    r"^(?!<ul>|</ul>|<li>|<h[1-6][ >])(.+)$", re.MULTILINE
)
STRONG_PATTERN = re.compile(r"\*\*(.+?)\*\*")
EM_PATTERN = re.compile(r"\*(.+?)\*")
HEADING_ELEMENT_PATTERN = re.compile(r'<h([12]) id="(.+?)">(.+?)</h\1>')

STYLE_BLOCK = """<style>
  .formatted-content {
    font-family: Arial, sans-serif;
    line-height: 1.6;
    color: #000000;
    max-width: 800px;
    margin: 0 auto;
  }
  .formatted-content h1, .formatted-content h2 {
    color: #2c3e50;
    margin-top: 1.5em;
  }
  .formatted-content ul, .formatted-content ol {
    padding-left: 2em;
  }
  .formatted-content li {
    margin-bottom: 0.5em;
  }
  .formatted-content .toc {
    background-color: #f8f9fa;
    padding: 1em;
    border-radius: 5px;
  }
  .formatted-content hr {
    border: 0;
    height: 1px;
    background-color: #ddd;
    margin: 2em 0;
  }
</style>"""


def _headings(text: str) -> str:
    # ids are the literal label, unlike the slugged markdown anchors
    text = H2_PATTERN.sub(r'<h2 id="\1">\1</h2>', text)
    return H1_PATTERN.sub(r'<h1 id="\1">\1</h1>', text)


def _is_list_item(line: str) -> bool:
    return line.startswith("<li>") and line.endswith("</li>")


def _lists(text: str) -> str:
    text = BULLET_PATTERN.sub(r"<li>\1</li>", text)
    lines: list[str] = []
    for is_item, run in iter_runs(text.split("\n"), _is_list_item):
        if is_item:
            lines.append("<ul>")
            lines.extend(run)
            lines.append("</ul>")
        else:
            lines.extend(run)
    return "\n".join(lines)


def _paragraphs(text: str) -> str:
    return PARAGRAPH_PATTERN.sub(r"<p>\1</p>", text)


def _emphasis(text: str) -> str:
    # double before single, or "*" would consume half of each "**" pair
    text = STRONG_PATTERN.sub(r"<strong>\1</strong>", text)
    return EM_PATTERN.sub(r"<em>\1</em>", text)


LOWERING_STAGES = Pipeline(
    [
        Stage("headings", _headings),
        Stage("lists", _lists),
        Stage("paragraphs", _paragraphs),
        Stage("emphasis", _emphasis),
    ]
)


def build_navigation(html: str) -> str:
    """
    builds the table of contents block from level 1-2 heading elements.

    Args:
        html: lowered HTML

    Returns:
        navigation block followed by a rule, or "" when there are no headings
    """
    entries = [
        f'<li><a href="#{match.group(2)}">{match.group(3)}</a></li>'
        for match in HEADING_ELEMENT_PATTERN.finditer(html)
    ]
    if not entries:
        return ""
    items = "".join(entries)
    return f'<div class="toc"><h2>{TOC_TITLE}</h2><ul>{items}</ul></div><hr>'


def to_html(
    text: Optional[str],
    add_table_of_contents: bool = False,
    add_styling: bool = True,
) -> str:
    """
    converts model output to HTML.

    Args:
        text: raw model output (escaped here before any markup is added)
        add_table_of_contents: prepends a navigation block linking each heading
        add_styling: wraps the result in a container with an embedded style block

    Returns:
        HTML string, or "" for empty input
    """
    if not text:
        return ""

    markdown = to_markdown(
        sanitize(normalize_newlines(text)),
        add_table_of_contents=False,
        enhance_headings=True,
    )
    html = LOWERING_STAGES(markdown)

    if add_table_of_contents:
        html = build_navigation(html) + html

    if add_styling:
        html = f'<div class="formatted-content">\n{STYLE_BLOCK}\n{html}\n</div>'

    return html
