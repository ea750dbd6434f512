"""OpenRouter chat-completions client."""

import json
import logging
from typing import Any, Optional, Protocol

import httpx

from marketresearch.config import Settings
from marketresearch.core.models import CompletionOptions
from marketresearch.errors import (
    AuthenticationError,
    ConnectivityError,
    ProviderError,
    ValidationError,
)

logger = logging.getLogger(__name__)

API_KEY_PREFIX = "sk-or-"


class CompletionClient(Protocol):  # pylint: disable=too-few-public-methods
    """protocol for LLM collaborators."""

    def complete(
        self, prompt: str, options: Optional[CompletionOptions] = None
    ) -> dict[str, Any]:
        """returns the provider response for prompt."""


def _mask(api_key: str) -> str:
    """masks all but the ends of an api key for logging."""
    if not api_key:
        return "none"
    return f"{api_key[:6]}…{api_key[-4:]}"


class OpenRouterClient:
    """sends single-turn prompts to OpenRouter; one attempt per call, no retry."""

    def __init__(
        self, settings: Settings, http_client: Optional[httpx.Client] = None
    ) -> None:
        self._settings = settings
        self._http = http_client or httpx.Client(timeout=settings.llm_timeout)

    def close(self) -> None:
        """closes the underlying HTTP client."""
        self._http.close()

    def _api_key(self) -> str:
        api_key = self._settings.api_key.strip()
        if not api_key:
            raise AuthenticationError("OPENROUTER_API_KEY is not configured")
        if not api_key.startswith(API_KEY_PREFIX):
            raise AuthenticationError(
                "OPENROUTER_API_KEY appears invalid. "
                f'It should start with "{API_KEY_PREFIX}"'
            )
        return api_key

    def complete(
        self, prompt: str, options: Optional[CompletionOptions] = None
    ) -> dict[str, Any]:
        """
        sends prompt as a single user message.

        Args:
            prompt: prompt text
            options: model, max_tokens and temperature overrides

        Returns:
            decoded chat-completions response

        Raises:
            ValidationError: if prompt is empty or not a string
            AuthenticationError: if the api key is missing or malformed
            ProviderError: if OpenRouter answers with a non-success status
            ConnectivityError: if no response is received
        """
        if not prompt or not isinstance(prompt, str):
            raise ValidationError("Prompt must be a non-empty string")

        api_key = self._api_key()
        options = options or CompletionOptions()
        model = options.model or self._settings.model

        if self._settings.debug_llm:
            logger.debug(
                "[OpenRouter] model=%s, apiKey(masked)=%s, referer=%s, title=%s",
                model,
                _mask(api_key),
                self._settings.referer,
                self._settings.title,
            )

        payload = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": options.max_tokens,
            "temperature": options.temperature,
        }
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self._settings.referer,
            "X-Title": self._settings.title,
            "Accept": "application/json",
        }

        try:
            response = self._http.post(
                f"{self._settings.base_url}/chat/completions",
                json=payload,
                headers=headers,
            )
        except httpx.TransportError as e:
            logger.error("OpenRouter request failed: %s", e)
            raise ConnectivityError("No response received from OpenRouter API") from e

        if not response.is_success:
            body = response.text
            raise ProviderError(
                f"OpenRouter API error: {response.status_code} - {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            data: dict[str, Any] = response.json()
        except json.JSONDecodeError as e:
            raise ProviderError(
                "OpenRouter API returned invalid JSON",
                status_code=response.status_code,
                body=response.text,
            ) from e
        return data


def extract_text(response: dict[str, Any]) -> str:
    """
    returns the first candidate's message text.

    Raises:
        ProviderError: if the payload has no usable choice
    """
    try:
        content = response["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ProviderError("OpenRouter API response has no message content") from e
    if not isinstance(content, str):
        raise ProviderError("OpenRouter API response has no message content")
    return content
