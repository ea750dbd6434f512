"""runtime configuration, resolved once at startup and injected downstream."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import dotenv_values

from marketresearch.errors import ConfigError

DEFAULT_MODEL = "deepseek/deepseek-r1-0528-qwen3-8b:free"
DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_REFERER = "https://github.com/DhruvRajIyer/AI-Market-Research-Assistant"
DEFAULT_TITLE = "AI Market Research Assistant"


@dataclass(frozen=True)
class Settings:
    """application settings."""

    api_key: str = ""
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    referer: str = DEFAULT_REFERER
    title: str = DEFAULT_TITLE
    debug_llm: bool = False
    llm_timeout: float = 120.0
    chromium_executable: Optional[str] = None
    pdf_timeout_ms: int = 60000
    host: str = "0.0.0.0"
    port: int = 3000

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        dotenv_path: Optional[Union[str, Path]] = None,
    ) -> "Settings":
        """
        builds settings from a .env file overlaid by the environment.

        Args:
            env: mapping to read instead of os.environ (mainly for tests)
            dotenv_path: .env file to read (defaults to ./.env when present)

        Returns:
            resolved Settings

        Raises:
            ConfigError: if a numeric value cannot be parsed
        """
        values: dict[str, str] = {}
        path = Path(dotenv_path) if dotenv_path is not None else Path(".env")
        if path.is_file():
            # dotenv_values leaves os.environ untouched
            values.update(
                {k: v for k, v in dotenv_values(path).items() if v is not None}
            )
        values.update(os.environ if env is None else env)

        def _get(key: str, default: str = "") -> str:
            return values.get(key, default).strip()

        return cls(
            api_key=_get("OPENROUTER_API_KEY"),
            model=_get("OPENROUTER_MODEL") or DEFAULT_MODEL,
            base_url=(_get("OPENROUTER_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            referer=_get("HTTP_REFERER") or DEFAULT_REFERER,
            title=_get("X_TITLE") or DEFAULT_TITLE,
            debug_llm=_get("DEBUG_OPENROUTER").lower() in ("1", "true"),
            llm_timeout=_parse_number("LLM_TIMEOUT", _get("LLM_TIMEOUT"), 120.0),
            chromium_executable=(
                _get("PUPPETEER_EXECUTABLE_PATH")
                or _get("CHROMIUM_EXECUTABLE_PATH")
                or None
            ),
            pdf_timeout_ms=int(
                _parse_number("PDF_TIMEOUT_MS", _get("PDF_TIMEOUT_MS"), 60000)
            ),
            host=_get("HOST") or "0.0.0.0",
            port=int(_parse_number("PORT", _get("PORT"), 3000)),
        )


def _parse_number(key: str, raw: str, default: float) -> float:
    """parses a numeric setting, falling back to default when unset."""
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from e
