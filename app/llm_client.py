"""
LLM client abstraction layer to support multiple providers.

This module provides a unified interface for different LLM providers,
making it easy to switch between Ollama and OpenAI API while maintaining
the same interface for the rest of the application. Both providers are
asked for JSON constrained by a schema.
"""

from __future__ import annotations
import logging
from typing import List, Dict, Any
from abc import ABC, abstractmethod

import ollama
from openai import OpenAI

import config

log = logging.getLogger(__name__)


class LLMResponse:
    """Unified response object for LLM responses."""

    def __init__(self, content: str | None):
        self.message = MessageContent(content)


class MessageContent:
    """Message content wrapper."""

    def __init__(self, content: str | None):
        self.content = content


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    def chat(
        self,
        model: str,
        messages: List[Dict[str, str]],
        schema: Dict[str, Any] | None = None,
    ) -> LLMResponse:
        """Send a chat request to the LLM provider."""


class OllamaClient(LLMClient):
    """Ollama client implementation."""

    def __init__(self, host: str | None = None, timeout: float | None = None):
        self.client = ollama.Client(
            host=host or config.OLLAMA_BASE_URL,
            timeout=timeout or config.LLM_TIMEOUT,
        )

    def chat(self, model, messages, schema=None) -> LLMResponse:
        """Send a chat request to Ollama."""
        response = self.client.chat(
            model=model,
            messages=messages,
            format=schema,
            options={"temperature": config.LLM_MODEL_PARAMS["temperature"]},
        )
        return LLMResponse(response.message.content)


class OpenAIClient(LLMClient):
    """OpenAI client implementation."""

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        # Use provided API key or the configured one
        api_key = api_key or config.OPENAI_API_KEY
        if not api_key:
            raise ValueError("OpenAI API key is required. Set OPENAI_API_KEY environment variable or pass api_key parameter.")

        self.client = OpenAI(api_key=api_key, timeout=timeout or config.LLM_TIMEOUT)

    def chat(self, model, messages, schema=None) -> LLMResponse:
        """Send a chat request to OpenAI."""
        kwargs = {}
        if schema is not None:
            # strict mode needs every property required, which the résumé schema is not
            kwargs["response_format"] = {
                "type": "json_schema",
                "json_schema": {"name": "resume", "schema": schema, "strict": False},
            }

        response = self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=config.LLM_MODEL_PARAMS["temperature"],
            max_tokens=config.LLM_MODEL_PARAMS["max_tokens"],
            **kwargs,
        )
        if not response.choices:
            return LLMResponse(None)
        return LLMResponse(response.choices[0].message.content)


def get_llm_client(provider: str | None = None) -> LLMClient:
    """Factory function to get the appropriate LLM client based on configuration."""
    provider = (provider or config.LLM_PROVIDER).lower()
    log.debug("building %s client", provider)

    if provider == "openai":
        return OpenAIClient()
    elif provider == "ollama":
        return OllamaClient()
    else:
        raise ValueError(f"Unsupported LLM provider: {provider}")


# Create a global client instance
_llm_client = None

def chat(
    model: str,
    messages: List[Dict[str, str]],
    schema: Dict[str, Any] | None = None,
) -> LLMResponse:
    """
    Unified chat function that works with any configured LLM provider.

    The provider client is built lazily on first use and reused afterwards.
    """
    global _llm_client
    if _llm_client is None:
        _llm_client = get_llm_client()

    return _llm_client.chat(model, messages, schema)
