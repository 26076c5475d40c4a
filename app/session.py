"""
Per-browser-session state for the builder.

Holds the current résumé snapshot, the source text box contents, the pending
flags and the single error message shown to the user. Failures from file
extraction or generation are caught here; the résumé and source text are
left exactly as they were.
"""
from __future__ import annotations
import logging
from typing import Callable

import editor
from errors import ResumeBuilderError
from extractor import extract_text
from parser_llm import parse_resume_llm
from schema_resume import ResumeDocument, initial_resume

log = logging.getLogger(__name__)

GENERATION_FAILED = "Failed to generate resume. Please try again with more details."


class ResumeSession:
    def __init__(self, resume: ResumeDocument | None = None):
        self.resume = resume or initial_resume()
        self.input_text = ""
        self.error: str | None = None
        self.is_generating = False
        self.is_reading_file = False
        # bumped after every upload so the uploader widget comes back empty
        self.uploader_generation = 0

    @property
    def busy(self) -> bool:
        return self.is_generating or self.is_reading_file

    @property
    def can_generate(self) -> bool:
        return bool(self.input_text.strip()) and not self.busy

    # ───────────────────────────────────── extraction ──
    def load_file(self, filename: str, data: bytes) -> bool:
        """Replace the source text with the file's text. Returns success."""
        if self.is_reading_file:
            return False
        self.is_reading_file = True
        self.error = None
        try:
            text = extract_text(data, filename)
        except ResumeBuilderError as e:
            self.error = str(e)
            return False
        else:
            self.input_text = text
            log.info("read %d characters from %s", len(text), filename)
            return True
        finally:
            self.is_reading_file = False
            self.uploader_generation += 1

    # ───────────────────────────────────── generation ──
    def generate(self, generate_fn: Callable[..., ResumeDocument] = parse_resume_llm,
                 **kwargs) -> bool:
        """
        Replace the résumé with one generated from the source text.

        Blank source text is ignored without calling the LLM.
        """
        if not self.input_text.strip() or self.is_generating:
            return False
        self.is_generating = True
        self.error = None
        try:
            resume = generate_fn(self.input_text, **kwargs)
        except ResumeBuilderError as e:
            self.error = f"{GENERATION_FAILED} ({e})"
            return False
        else:
            self.resume = resume
            return True
        finally:
            self.is_generating = False

    # ───────────────────────────────────── editing ──
    def edit(self, operation: Callable[..., ResumeDocument], *args) -> None:
        """Apply an editor operation, e.g. ``session.edit(editor.add_entry, "projects")``."""
        self.resume = operation(self.resume, *args)

    def set_personal(self, field: str, value: str) -> None:
        self.edit(editor.set_personal_field, field, value)

    def set_skill(self, field: str, value: str) -> None:
        self.edit(editor.set_skills_field, field, value)
