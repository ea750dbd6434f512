"""tests for heading and list-run detection."""

from marketresearch.core.models import Heading, ListRun
from marketresearch.formatters.structure import (
    detect_headings,
    is_bullet,
    iter_blocks,
    iter_runs,
    normalize_newlines,
    slugify,
)


def test_slugify_lowercases_and_hyphenates() -> None:
    """drops punctuation, lowercases and joins words with hyphens."""
    assert slugify("1. COMPANY OVERVIEW") == "1-company-overview"
    assert slugify("R&D FOCUS") == "rd-focus"
    assert slugify("GO-TO-MARKET") == "go-to-market"


def test_detect_headings_in_document_order() -> None:
    """collects level 1 and 2 headings with derived anchors."""
    markdown = "## 1. MARKET POSITION\ntext\n# SUMMARY\n### ignored"
    assert detect_headings(markdown) == [
        Heading(level=2, label="1. MARKET POSITION", anchor="1-market-position"),
        Heading(level=1, label="SUMMARY", anchor="summary"),
    ]


def test_detect_headings_filters_levels() -> None:
    """keeps only the requested levels."""
    headings = detect_headings("# TOP\n## SUB", levels=(2,))
    assert [h.label for h in headings] == ["SUB"]


def test_duplicate_labels_share_an_anchor() -> None:
    """duplicate labels yield duplicate anchors."""
    headings = detect_headings("## RISKS\n## RISKS")
    assert [h.anchor for h in headings] == ["risks", "risks"]


def test_is_bullet_uses_trimmed_line() -> None:
    """indented bullets count, bare dashes do not."""
    assert is_bullet("- item")
    assert is_bullet("   - item")
    assert not is_bullet("-item")
    assert not is_bullet("text - more")


def test_iter_runs_groups_contiguous_lines() -> None:
    """groups lines into maximal runs."""
    runs = list(iter_runs(["a", "b", "1", "2", "c"], str.isdigit))
    assert runs == [(False, ["a", "b"]), (True, ["1", "2"]), (False, ["c"])]


def test_iter_blocks_splits_list_runs() -> None:
    """non-bullet lines break list runs and are yielded as-is."""
    blocks = list(iter_blocks(["intro", "- a", "  - b", "text", "- c"]))
    assert blocks == [
        "intro",
        ListRun(items=("a", "b")),
        "text",
        ListRun(items=("c",)),
    ]


def test_normalize_newlines() -> None:
    """CRLF and lone CR both become LF."""
    assert normalize_newlines("a\r\nb\rc\nd") == "a\nb\nc\nd"
