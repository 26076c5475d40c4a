"""
Configuration settings for the résumé builder.

This file contains configuration for the LLM providers used to turn free text
into structured résumé data. Switch providers with the LLM_PROVIDER environment
variable (or a .env file next to where the app is launched).
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os

# LLM Provider Configuration
# Set to "ollama" or "openai"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai").lower()

# Model Configuration
# Both providers must support JSON-schema constrained output.
DEFAULT_MODEL = {
    "ollama": "llama3.1:8b",
    "openai": "gpt-4o-mini"
}
LLM_MODEL = os.getenv("LLM_MODEL")

# OpenAI Configuration
# The key is checked when the client is built, so the editor works without one.
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

# Sampling parameters shared by both providers
LLM_MODEL_PARAMS = {
    "temperature": 0.2,
    "max_tokens": 4096
}

# Ollama Configuration
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")

# Seconds before an LLM request is abandoned
DEFAULT_LLM_TIMEOUT = 120.0


def _read_timeout(raw: str | None) -> float:
    """Parse LLM_TIMEOUT; anything unusable falls back to the default."""
    if not raw:
        return DEFAULT_LLM_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0.0
    if not 0 < timeout < float("inf"):
        logging.getLogger(__name__).warning(
            "ignoring LLM_TIMEOUT=%r, using %.0fs", raw, DEFAULT_LLM_TIMEOUT
        )
        return DEFAULT_LLM_TIMEOUT
    return timeout


LLM_TIMEOUT = _read_timeout(os.getenv("LLM_TIMEOUT"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_model_for_provider(provider: str = None) -> str:
    """Get the model for the specified provider, honouring LLM_MODEL."""
    provider = provider or LLM_PROVIDER
    if LLM_MODEL:
        return LLM_MODEL
    return DEFAULT_MODEL.get(provider, "gpt-4o-mini")
