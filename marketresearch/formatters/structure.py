"""detection of headings and bullet-list runs in model output."""

import re
from collections.abc import Iterable, Iterator
from typing import Callable, Union

from marketresearch.core.models import Heading, ListRun

# "1. SECTION" or "1. SECTION:" alone on a line
NUMBERED_HEADING_PATTERN = re.compile(
    r"^(\d+)\.[ \t]+([A-Z][A-Z \t]+):?$", re.MULTILINE
)
# "SECTION" or "SECTION:" alone on a line
CAPS_HEADING_PATTERN = re.compile(r"^([A-Z][A-Z \t]+):?$", re.MULTILINE)
# markdown-level headings produced by the heading stages
MARKDOWN_HEADING_PATTERN = re.compile(r"^(#{1,2}) (.+)$", re.MULTILINE)

BULLET_MARKER = "- "

LINE_BREAK_PATTERN = re.compile(r"\r\n?")


def normalize_newlines(text: str) -> str:
    """rewrites CRLF and lone CR line endings as LF."""
    return LINE_BREAK_PATTERN.sub("\n", text)


def slugify(label: str) -> str:
    """
    derives a URL-fragment anchor from a heading label.

    Args:
        label: heading text

    Returns:
        lowercase anchor with non-word characters dropped and spaces as hyphens
    """
    anchor = re.sub(r"[^\w\s-]", "", label.lower(), flags=re.ASCII)
    return re.sub(r"\s+", "-", anchor)


def detect_headings(markdown: str, levels: Iterable[int] = (1, 2)) -> list[Heading]:
    """
    collects markdown headings in document order.

    Duplicate labels produce duplicate anchors.

    Args:
        markdown: text already passed through the heading stages
        levels: heading levels to keep

    Returns:
        list of Heading records
    """
    wanted = set(levels)
    headings = []
    for match in MARKDOWN_HEADING_PATTERN.finditer(markdown):
        level = len(match.group(1))
        if level not in wanted:
            continue
        label = match.group(2)
        headings.append(Heading(level=level, label=label, anchor=slugify(label)))
    return headings


def is_bullet(line: str) -> bool:
    """checks whether a line starts with the bullet marker once trimmed."""
    return line.strip().startswith(BULLET_MARKER)


def iter_runs(
    lines: Iterable[str], is_member: Callable[[str], bool]
) -> Iterator[tuple[bool, list[str]]]:
    """
    groups lines into maximal runs that agree on is_member.

    Args:
        lines: input lines in order
        is_member: predicate marking lines that belong to a run

    Yields:
        (is_member, lines) for each contiguous group
    """
    current: list[str] = []
    current_flag = False
    for line in lines:
        flag = is_member(line)
        if current and flag != current_flag:
            yield current_flag, current
            current = []
        current_flag = flag
        current.append(line)
    if current:
        yield current_flag, current


def iter_blocks(lines: Iterable[str]) -> Iterator[Union[ListRun, str]]:
    """
    splits lines into bullet-list runs and plain lines.

    Args:
        lines: input lines in order

    Yields:
        a ListRun for each bullet run, the line itself for any other line
    """
    for bullet, run in iter_runs(lines, is_bullet):
        if bullet:
            items = tuple(line.strip()[len(BULLET_MARKER) :] for line in run)
            yield ListRun(items=items)
        else:
            for line in run:
                yield line
