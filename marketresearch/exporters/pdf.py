"""PDF rendering through headless Chromium (Playwright)."""

import logging
from typing import Any, Optional

from marketresearch.errors import RenderError
from marketresearch.exporters.base import DocumentRenderer

logger = logging.getLogger(__name__)

# launch flags for containerized hosts without a sandbox or shared memory
CHROMIUM_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--no-zygote",
    "--single-process",
]
PAGE_MARGIN = {"top": "1cm", "right": "1cm", "bottom": "1cm", "left": "1cm"}


class PlaywrightRenderer(DocumentRenderer):  # pylint: disable=too-few-public-methods
    """renders HTML to A4 PDF with Chromium."""

    def __init__(
        self, executable_path: Optional[str] = None, timeout_ms: int = 60000
    ) -> None:
        self.executable_path = executable_path
        self.timeout_ms = timeout_ms

    def _launch(self, playwright: Any) -> Any:
        """launches Chromium, retrying once without the executable override."""
        options: dict[str, Any] = {
            "headless": True,
            "args": CHROMIUM_ARGS,
            "timeout": self.timeout_ms,
        }
        if self.executable_path:
            try:
                return playwright.chromium.launch(
                    executable_path=self.executable_path, **options
                )
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.warning(
                    "Chromium launch failed, retrying with minimal options: %s", e
                )
        return playwright.chromium.launch(**options)

    def render(self, html: str) -> bytes:
        """renders html to PDF bytes, raising RenderError on any failure."""
        try:
            # playwright is only needed for PDF export
            from playwright.sync_api import (  # pylint: disable=import-outside-toplevel
                sync_playwright,
            )

            with sync_playwright() as playwright:
                browser = self._launch(playwright)
                try:
                    page = browser.new_page()
                    page.set_default_navigation_timeout(self.timeout_ms)
                    page.set_content(
                        html, wait_until="networkidle", timeout=self.timeout_ms
                    )
                    pdf: bytes = page.pdf(
                        format="A4", print_background=True, margin=PAGE_MARGIN
                    )
                    return pdf
                finally:
                    browser.close()
        except Exception as e:  # pylint: disable=broad-exception-caught
            raise RenderError(f"PDF rendering failed: {e}") from e
