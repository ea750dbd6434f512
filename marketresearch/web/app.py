"""
FastAPI Application
===================
HTTP surface for research and export.

Run with:
    marketresearch serve
"""
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from marketresearch.config import Settings
from marketresearch.core.models import ExportRequest, ResearchRequest
from marketresearch.core.research import run_research
from marketresearch.errors import ValidationError
from marketresearch.exporters import (
    DocumentRenderer,
    PlaywrightRenderer,
    export_document,
)
from marketresearch.llm import CompletionClient, OpenRouterClient

logger = logging.getLogger(__name__)


class ResearchBody(BaseModel):
    """POST /api/research payload; presence is checked by the research layer."""

    query: Optional[str] = None
    mode: Optional[str] = None
    entityType: Optional[str] = None


class ExportBody(BaseModel):
    """POST /api/export payload."""

    filename: Optional[str] = None
    content: Optional[str] = None
    format: str = "txt"
    htmlContent: Optional[str] = None


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


def create_app(
    settings: Settings,
    client: Optional[CompletionClient] = None,
    renderer: Optional[DocumentRenderer] = None,
) -> FastAPI:
    """
    builds the application with its collaborators.

    Args:
        settings: resolved settings
        client: LLM collaborator (defaults to an OpenRouterClient)
        renderer: PDF renderer (defaults to a PlaywrightRenderer)

    Returns:
        FastAPI application
    """
    owned_client: Optional[OpenRouterClient] = None
    if client is None:
        owned_client = OpenRouterClient(settings)
        client = owned_client
    llm_client: CompletionClient = client
    pdf_renderer = renderer or PlaywrightRenderer(
        executable_path=settings.chromium_executable,
        timeout_ms=settings.pdf_timeout_ms,
    )

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        # injected clients belong to the caller
        if owned_client is not None:
            owned_client.close()

    app = FastAPI(
        title="Market Research Assistant",
        description="LLM-backed company and sector research",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check"""
        return {"status": "ok"}

    @app.post("/api/research")
    def research(body: ResearchBody) -> JSONResponse:
        """
        Research a company or sector.

        - **query**: company or sector name
        - **mode**: profile, swot, trends or aiImpact
        - **entityType**: company or sector (aiImpact only)
        """
        request = ResearchRequest(
            query=body.query or "",
            mode=body.mode or "",
            entity_type=body.entityType,
        )
        try:
            result = run_research(request, llm_client)
        except ValidationError as e:
            return _error(400, e)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error in /api/research: %s", e)
            return _error(500, e)
        return JSONResponse(content=result.to_dict())

    @app.post("/api/export")
    def export(body: ExportBody) -> Response:
        """
        Download content as a text or PDF file.

        - **filename**: requested file name (sanitized)
        - **content**: text to export
        - **format**: txt or pdf
        - **htmlContent**: pre-rendered HTML for the PDF
        """
        request = ExportRequest(
            filename=body.filename or "",
            content=body.content or "",
            format=body.format,
            html_content=body.htmlContent,
        )
        try:
            exported = export_document(request, pdf_renderer)
        except ValidationError as e:
            return _error(400, e)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error in /api/export: %s", e)
            return _error(500, e)
        return Response(
            content=exported.body,
            media_type=exported.media_type,
            headers={"Content-Disposition": exported.content_disposition},
        )

    return app
