"""
Error kinds surfaced to the user.

Each carries a message that is safe to show verbatim in the UI.
"""


class ResumeBuilderError(Exception):
    """Base class for recoverable, user-facing failures."""


class FileReadError(ResumeBuilderError):
    """A plain-text upload could not be decoded."""


class DocumentParseError(ResumeBuilderError):
    """A .docx or .pdf upload could not be turned into text."""


class GenerationError(ResumeBuilderError):
    """The LLM returned nothing usable."""
