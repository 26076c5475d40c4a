"""Shared fixtures: a deterministic environment and a scripted LLM client."""

from __future__ import annotations

import json

import pytest

import config
from llm_client import LLMClient, LLMResponse
from schema_resume import initial_resume


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer .env settings from leaking into tests."""
    for key in ("LLM_PROVIDER", "LLM_MODEL", "OPENAI_API_KEY", "OLLAMA_BASE_URL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "LLM_PROVIDER", "openai")
    monkeypatch.setattr(config, "LLM_MODEL", None)
    monkeypatch.setattr(config, "OPENAI_API_KEY", None)


class ScriptedClient(LLMClient):
    """Returns a fixed payload and records every request."""

    def __init__(self, content=None, error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls = []

    def chat(self, model, messages, schema=None):
        self.calls.append({"model": model, "messages": messages, "schema": schema})
        if self.error:
            raise self.error
        return LLMResponse(self.content)


GENERATED = {
    "personalInfo": {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "github": "github.com/janedoe",
    },
    "education": [
        {
            "school": "MIT",
            "degree": "B.S. Computer Science",
            "date": "2015 -- 2019",
            "description": ["Dean's list"],
        }
    ],
    "experience": [
        {
            "company": "Acme",
            "role": "Engineer",
            "location": "Boston, MA",
            "date": "2019 -- Present",
            "description": ["Built things", "Shipped things"],
        }
    ],
    "skills": {"languages": "Python, Go"},
}


@pytest.fixture
def seed():
    return initial_resume()


@pytest.fixture
def generated_payload() -> str:
    return json.dumps(GENERATED)


@pytest.fixture
def scripted_client():
    return ScriptedClient
