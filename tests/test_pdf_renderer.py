"""tests for the Playwright PDF renderer."""

from unittest.mock import MagicMock, patch

import pytest

from marketresearch.core.models import ExportRequest
from marketresearch.errors import RenderError
from marketresearch.exporters.export import export_document
from marketresearch.exporters.pdf import CHROMIUM_ARGS, PAGE_MARGIN, PlaywrightRenderer


def test_render_returns_pdf_bytes() -> None:
    """renders content to an A4 PDF and closes the browser."""
    with patch("playwright.sync_api.sync_playwright") as mock_sync_playwright:
        playwright = mock_sync_playwright.return_value.__enter__.return_value
        browser = playwright.chromium.launch.return_value
        page = browser.new_page.return_value
        page.pdf.return_value = b"%PDF"

        result = PlaywrightRenderer(timeout_ms=5000).render("<p>x</p>")

    assert result == b"%PDF"
    page.set_content.assert_called_once_with(
        "<p>x</p>", wait_until="networkidle", timeout=5000
    )
    page.pdf.assert_called_once_with(
        format="A4", print_background=True, margin=PAGE_MARGIN
    )
    browser.close.assert_called_once()


def test_launch_retries_without_executable_override() -> None:
    """a failed launch with an explicit executable is retried once without it."""
    playwright = MagicMock()
    browser = MagicMock()
    playwright.chromium.launch.side_effect = [RuntimeError("not found"), browser]

    renderer = PlaywrightRenderer(executable_path="/opt/chrome")
    # pylint: disable=protected-access
    assert renderer._launch(playwright) is browser

    first, second = playwright.chromium.launch.call_args_list
    assert first.kwargs["executable_path"] == "/opt/chrome"
    assert "executable_path" not in second.kwargs
    assert second.kwargs["args"] == CHROMIUM_ARGS


def test_launch_without_executable_is_single_attempt() -> None:
    """without an override the first launch failure propagates."""
    playwright = MagicMock()
    playwright.chromium.launch.side_effect = RuntimeError("no browser")

    with pytest.raises(RuntimeError):
        PlaywrightRenderer()._launch(playwright)  # pylint: disable=protected-access
    assert playwright.chromium.launch.call_count == 1


def test_render_failure_raises_render_error() -> None:
    """any browser failure surfaces as RenderError."""
    with patch("playwright.sync_api.sync_playwright") as mock_sync_playwright:
        playwright = mock_sync_playwright.return_value.__enter__.return_value
        browser = playwright.chromium.launch.return_value
        browser.new_page.return_value.set_content.side_effect = TimeoutError("slow")

        with pytest.raises(RenderError, match="slow"):
            PlaywrightRenderer().render("<p>x</p>")

    browser.close.assert_called_once()


def test_missing_playwright_raises_render_error() -> None:
    """an unavailable playwright install surfaces as RenderError."""
    with patch.dict("sys.modules", {"playwright.sync_api": None}):
        with pytest.raises(RenderError, match="PDF rendering failed"):
            PlaywrightRenderer().render("<p>x</p>")


def test_export_falls_back_to_text_without_playwright() -> None:
    """PDF export degrades to a text file when playwright cannot be imported."""
    with patch.dict("sys.modules", {"playwright.sync_api": None}):
        exported = export_document(
            ExportRequest(filename="report", content="hello", format="pdf"),
            PlaywrightRenderer(),
        )

    assert exported.filename == "report.txt"
    assert exported.media_type.startswith("text/plain")
    assert exported.body == b"hello"
