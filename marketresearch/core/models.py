"""Data models for research requests, formatted results and exports."""

from dataclasses import dataclass, field
from typing import Any, Optional

MODES = ("profile", "swot", "trends", "aiImpact")
ENTITY_TYPES = ("company", "sector")
EXPORT_FORMATS = ("txt", "pdf")


@dataclass(frozen=True)
class Heading:
    """A detected section heading."""

    level: int  # 1 or 2
    label: str
    anchor: str


@dataclass(frozen=True)
class ListRun:
    """Items of one contiguous run of bullet lines, markers stripped."""

    items: tuple[str, ...]


@dataclass(frozen=True)
class CompletionOptions:
    """Per-call overrides for the LLM collaborator."""

    model: Optional[str] = None
    max_tokens: int = 1000
    temperature: float = 0.7


@dataclass
class ResearchRequest:
    """Inbound research request."""

    query: str
    mode: str
    entity_type: Optional[str] = None  # only consulted for aiImpact


@dataclass
class ResearchResult:
    """Raw model output together with both formatted views."""

    query: str
    mode: str
    entity_type: str
    analysis: str
    formatted_analysis: str
    basic_formatted: str
    full_response: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """returns the JSON payload shape served to the UI."""
        return {
            "query": self.query,
            "mode": self.mode,
            "entityType": self.entity_type,
            "analysis": self.analysis,
            "formatted_analysis": self.formatted_analysis,
            "basic_formatted": self.basic_formatted,
            "full_response": self.full_response,
        }


@dataclass
class ExportRequest:
    """Inbound export request."""

    filename: str
    content: str
    format: str = "txt"
    html_content: Optional[str] = None


@dataclass(frozen=True)
class ExportedFile:
    """A downloadable export."""

    filename: str
    media_type: str
    body: bytes

    @property
    def content_disposition(self) -> str:
        """value for the Content-Disposition header."""
        return f'attachment; filename="{self.filename}"'
