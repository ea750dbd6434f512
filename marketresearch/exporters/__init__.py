"""export of research results to downloadable files."""

from marketresearch.exporters.base import DocumentRenderer
from marketresearch.exporters.export import export_document, sanitize_filename
from marketresearch.exporters.pdf import PlaywrightRenderer

__all__ = [
    "DocumentRenderer",
    "PlaywrightRenderer",
    "export_document",
    "sanitize_filename",
]
