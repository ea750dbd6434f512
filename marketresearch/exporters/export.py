"""Export of research results as downloadable text or PDF files."""

import html as html_lib
import logging
import re
from typing import Optional, cast

from markdown_it import MarkdownIt

from marketresearch.core.models import ExportedFile, ExportRequest
from marketresearch.errors import RenderError, ValidationError
from marketresearch.exporters.base import DocumentRenderer

logger = logging.getLogger(__name__)

UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.\-]")
DEFAULT_FILENAME = "export"

DOCUMENT_SHELL = """<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>
    body {{ font-family: Arial, sans-serif; margin: 40px; line-height: 1.6; }}
    h1 {{ color: #333; }}
    h3 {{ margin-top: 20px; color: #444; }}
    ul {{ margin-left: 20px; }}
    .content {{ max-width: 800px; margin: 0 auto; }}
  </style>
</head>
<body>
  <div class="content">
    <h1>{title}</h1>
    <div class="report-content">
{body}
    </div>
  </div>
</body>
</html>"""


def sanitize_filename(filename: str) -> str:
    """
    reduces a client-supplied filename to a safe basename.

    Args:
        filename: requested name, possibly containing directories

    Returns:
        name made of letters, digits, "_", "-" and "." only
    """
    basename = re.split(r"[\\/]", filename)[-1]
    safe = UNSAFE_FILENAME_CHARS.sub("_", basename)
    if safe in ("", ".", ".."):
        return DEFAULT_FILENAME
    return safe


def _with_extension(filename: str, extension: str) -> str:
    return filename if filename.endswith(extension) else f"{filename}{extension}"


def render_content_html(content: str) -> str:
    """renders plain or markdown content to HTML with raw HTML disabled."""
    md = MarkdownIt("commonmark", {"breaks": True})
    md.enable("table")
    # disables HTML to prevent injection attacks
    md.disable("html_inline")
    md.disable("html_block")
    return cast(str, md.render(content))


def build_document(title: str, content: str) -> str:
    """wraps content in a printable HTML document."""
    return DOCUMENT_SHELL.format(
        title=html_lib.escape(title), body=render_content_html(content)
    )


def _text_export(filename: str, content: str) -> ExportedFile:
    return ExportedFile(
        filename=_with_extension(filename, ".txt"),
        media_type="text/plain; charset=utf-8",
        body=content.encode("utf-8"),
    )


def export_document(
    request: ExportRequest, renderer: Optional[DocumentRenderer] = None
) -> ExportedFile:
    """
    builds a downloadable file for an export request.

    PDF exports fall back to plain text when no renderer is available or the
    renderer fails.

    Args:
        request: filename, content, format and optional pre-rendered HTML
        renderer: HTML-to-PDF renderer used for the pdf format

    Returns:
        ExportedFile ready to send

    Raises:
        ValidationError: if filename or content is missing
    """
    if not request.filename or not request.content:
        raise ValidationError("Missing filename or content parameter")

    filename = sanitize_filename(request.filename)

    if request.format == "pdf":
        if renderer is None:
            logger.warning("No PDF renderer configured, falling back to text export")
        else:
            html = request.html_content or build_document(filename, request.content)
            try:
                pdf = renderer.render(html)
            except RenderError as e:
                logger.error("Error generating PDF: %s", e)
                logger.info("Falling back to text export")
            else:
                return ExportedFile(
                    filename=_with_extension(filename, ".pdf"),
                    media_type="application/pdf",
                    body=pdf,
                )

    return _text_export(filename, request.content)
