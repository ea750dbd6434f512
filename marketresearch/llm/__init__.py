"""LLM provider collaborator."""

from marketresearch.llm.client import CompletionClient, OpenRouterClient, extract_text

__all__ = ["CompletionClient", "OpenRouterClient", "extract_text"]
