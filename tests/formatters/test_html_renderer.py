"""tests for HTML lowering."""

from marketresearch.formatters.html import LOWERING_STAGES, STYLE_BLOCK, to_html
from marketresearch.formatters.markdown import to_markdown


def test_lowers_headings_lists_paragraphs_and_emphasis() -> None:
    """converts each construct in one document."""
    text = "1. OVERVIEW:\nSome **bold** and *it* text.\n- one\n- two\nEnd"
    assert to_html(text, add_styling=False) == (
        '<h2 id="1. OVERVIEW">1. OVERVIEW</h2>\n'
        "<p>Some <strong>bold</strong> and <em>it</em> text.</p>\n"
        "<ul>\n<li>one</li>\n<li>two</li>\n</ul>\n"
        "<p>End</p>"
    )


def test_level_one_headings_get_identifiers() -> None:
    """# lines become h1 elements carrying their own text as id."""
    assert to_html("# Title", add_styling=False) == '<h1 id="Title">Title</h1>'


def test_lowering_stage_order() -> None:
    """headings, lists, paragraphs, then emphasis."""
    assert LOWERING_STAGES.names == ("headings", "lists", "paragraphs", "emphasis")


def test_strong_is_converted_before_em() -> None:
    """double asterisks are not split by the single-asterisk pass."""
    assert to_html("**a** *b*", add_styling=False) == (
        "<p><strong>a</strong> <em>b</em></p>"
    )


def test_blank_lines_are_not_wrapped() -> None:
    """empty lines stay empty instead of becoming empty paragraphs."""
    assert to_html("one\n\ntwo", add_styling=False) == "<p>one</p>\n\n<p>two</p>"


def test_escapes_model_markup() -> None:
    """markup in model output is escaped before lowering."""
    result = to_html("<b>x</b> & more", add_styling=False)
    assert result == "<p>&lt;b&gt;x&lt;/b&gt; &amp; more</p>"


def test_table_of_contents_links_headings_by_label() -> None:
    """builds a navigation block before the content, in document order."""
    result = to_html(
        "OVERVIEW\ntext\nDETAILS\nmore", add_table_of_contents=True, add_styling=False
    )
    toc = (
        '<div class="toc"><h2>Table of Contents</h2><ul>'
        '<li><a href="#OVERVIEW">OVERVIEW</a></li>'
        '<li><a href="#DETAILS">DETAILS</a></li>'
        "</ul></div><hr>"
    )
    assert result.startswith(toc)
    assert result[len(toc) :] == to_html("OVERVIEW\ntext\nDETAILS\nmore", add_styling=False)


def test_html_ids_differ_from_markdown_anchors() -> None:
    """HTML links use the literal label while markdown links use a slug."""
    text = "1. MARKET POSITION\nbody"
    html = to_html(text, add_table_of_contents=True, add_styling=False)
    markdown = to_markdown(text, add_table_of_contents=True)
    assert 'href="#1. MARKET POSITION"' in html
    assert "(#1-market-position)" in markdown


def test_no_table_of_contents_without_headings() -> None:
    """no navigation block when there are no headings."""
    result = to_html("plain text", add_table_of_contents=True, add_styling=False)
    assert result == "<p>plain text</p>"


def test_styling_wraps_without_changing_markup() -> None:
    """styling adds a container and style block around the same markup."""
    text = "SUMMARY\n- a"
    plain = to_html(text, add_styling=False)
    styled = to_html(text)
    assert styled == f'<div class="formatted-content">\n{STYLE_BLOCK}\n{plain}\n</div>'
    assert "color: #000000;" in STYLE_BLOCK
    assert ".formatted-content .toc" in STYLE_BLOCK


def test_empty_input_returns_empty_string() -> None:
    """returns "" for empty or None input regardless of options."""
    assert to_html("") == ""
    assert to_html(None, add_table_of_contents=True) == ""


def test_is_deterministic() -> None:
    """rendering the same text twice gives identical output."""
    text = "1. OVERVIEW\n- **a**\nRISKS:\n*b*"
    assert to_html(text, add_table_of_contents=True) == to_html(
        text, add_table_of_contents=True
    )


def test_crlf_headings_carry_no_carriage_return() -> None:
    """CRLF model output lowers to the same markup as LF output."""
    crlf = to_html("## X\r\nbody", add_styling=False)
    assert crlf == to_html("## X\nbody", add_styling=False)
    assert '<h2 id="X">X</h2>' in crlf
    assert "\r" not in crlf
