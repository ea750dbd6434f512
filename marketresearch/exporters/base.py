"""document renderer interface."""

from abc import ABC, abstractmethod


class DocumentRenderer(ABC):  # pylint: disable=too-few-public-methods
    """abstract base class for HTML-to-PDF renderers."""

    @abstractmethod
    def render(self, html: str) -> bytes:
        """
        Render an HTML document to PDF.

        Args:
            html: complete HTML document

        Returns:
            PDF bytes

        Raises:
            RenderError: if rendering fails or times out
        """
        ...  # pylint: disable=unnecessary-ellipsis
