"""exception hierarchy for marketresearch."""

from typing import Optional


class MarketResearchError(Exception):
    """base exception for all marketresearch errors."""


class ConfigError(MarketResearchError):
    """raised for invalid or incomplete configuration."""


class ValidationError(MarketResearchError):
    """raised when a request is missing a required field or has a bad value."""


class AuthenticationError(MarketResearchError):
    """raised when the provider credential is missing or malformed."""


class ProviderError(MarketResearchError):
    """raised when the LLM provider answers with a non-success status."""

    def __init__(
        self, message: str, status_code: Optional[int] = None, body: str = ""
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConnectivityError(MarketResearchError):
    """raised when no response is received from the LLM provider."""


class RenderError(MarketResearchError):
    """raised when the document renderer fails to produce a PDF."""
