"""
LLM-based résumé parser.

• Supports multiple LLM providers (OpenAI, Ollama) through llm_client
• Constrains the model output with RESPONSE_SCHEMA and validates the reply
  against the ResumeDocument models – all or nothing, no partial salvage.
• Nothing is cached: every call is a fresh draft.
"""

from __future__ import annotations
import logging, textwrap
from typing import Callable

from pydantic import ValidationError

import llm_client
from config import get_model_for_provider
from errors import GenerationError
from schema_resume import RESPONSE_SCHEMA, ResumeDocument

log = logging.getLogger(__name__)

_SYSTEM_PROMPT = textwrap.dedent(
    """\
    You are an expert résumé writer.
    Extract the following person's details into a structured JSON format
    suitable for a professional one-page résumé.

    Rules:
    - Use only facts present in the source text; leave unknown fields as "".
    - Each "description" is a list of short achievement bullets.
    - "date" fields are free text ranges, e.g. "May 2020 -- Aug. 2020".
    - "tech" and every skills category are comma-separated lists.
    - Output ONLY the JSON object (no markdown fences).
    """
)


def parse_resume_llm(
    raw_text: str,
    model: str | None = None,
    provider: str | None = None,
    client: llm_client.LLMClient | None = None,
    status_callback: Callable[[str], None] | None = None,
) -> ResumeDocument:
    """
    Ask the LLM to turn *raw_text* into a ResumeDocument.

    Callers must not pass blank text. Raises GenerationError when the service
    fails, returns no payload, or returns something that does not validate.
    """
    model = model or get_model_for_provider(provider)
    messages = [
        {"role": "system", "content": _SYSTEM_PROMPT},
        {"role": "user", "content": f"Source text: {raw_text}"},
    ]

    if status_callback:
        status_callback(f"🤖 Extracting résumé data with {model}...")
    try:
        if client is None and provider is None:
            rsp = llm_client.chat(model=model, messages=messages, schema=RESPONSE_SCHEMA)
        else:
            client = client or llm_client.get_llm_client(provider)
            rsp = client.chat(model, messages, RESPONSE_SCHEMA)
    except Exception as e:
        log.exception("LLM request failed")
        raise GenerationError(f"AI service request failed: {e}") from e

    payload = (rsp.message.content or "").strip()
    if not payload:
        log.error("LLM returned an empty payload")
        raise GenerationError("No data returned from AI")

    try:
        resume = ResumeDocument.model_validate_json(payload)
    except ValidationError as e:
        log.error("LLM payload did not match the résumé schema: %s", e)
        raise GenerationError("Malformed response from AI") from e

    if status_callback:
        status_callback("✅ Résumé data extracted and structured.")
    log.info(
        "generated résumé for %r: %d education, %d experience, %d projects",
        resume.personal_info.name,
        len(resume.education),
        len(resume.experience),
        len(resume.projects),
    )
    return resume
