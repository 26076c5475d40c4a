"""
Snapshot edits over a ResumeDocument.

Every function returns a new document and leaves its input alone. Branches
that are edited are rebuilt; untouched ones are shared with the old snapshot.
Entries and bullets are addressed by position only, so an index outside the
current list is a caller bug and raises IndexError. Values are validated
against the model, so a wrong type raises pydantic's ValidationError.
"""
from __future__ import annotations
from typing import Any, List, Mapping

from pydantic import BaseModel

from schema_resume import (
    PERSONAL_FIELDS,
    SECTIONS,
    SKILLS_FIELDS,
    ResumeDocument,
    empty_entry,
    entry_fields,
)


# ───────────────────────────────────────── helpers ──
def _check_field(field: str, allowed: tuple[str, ...], where: str) -> None:
    if field not in allowed:
        raise ValueError(f"{where} has no field {field!r}")


def _check_index(index: int, items: list, what: str) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"{what} index {index} out of range (0..{len(items) - 1})")


def _entries(resume: ResumeDocument, section: str) -> list:
    if section not in SECTIONS:
        raise ValueError(f"Unknown section: {section!r}")
    return getattr(resume, section)


def _rebuild(model: BaseModel, **changes) -> BaseModel:
    # model_copy(update=...) skips validation, so go through the constructor
    return type(model).model_validate({**model.model_dump(), **changes})


def _with_section(resume: ResumeDocument, section: str, entries: List) -> ResumeDocument:
    return resume.model_copy(update={section: entries})


def _replace_entry(resume, section, index, **changes) -> ResumeDocument:
    entries = _entries(resume, section)
    _check_index(index, entries, section)
    new = list(entries)
    new[index] = _rebuild(entries[index], **changes)
    return _with_section(resume, section, new)


def _bullets(resume, section, entry_index) -> list[str]:
    entries = _entries(resume, section)
    _check_index(entry_index, entries, section)
    return entries[entry_index].description


# ───────────────────────────────────────── scalar blocks ──
def set_personal_field(resume: ResumeDocument, field: str, value: str) -> ResumeDocument:
    _check_field(field, PERSONAL_FIELDS, "personalInfo")
    info = _rebuild(resume.personal_info, **{field: value})
    return resume.model_copy(update={"personal_info": info})


def set_skills_field(resume: ResumeDocument, field: str, value: str) -> ResumeDocument:
    _check_field(field, SKILLS_FIELDS, "skills")
    skills = _rebuild(resume.skills, **{field: value})
    return resume.model_copy(update={"skills": skills})


# ───────────────────────────────────────── entries ──
def update_entry(
    resume: ResumeDocument, section: str, index: int, fields: Mapping[str, Any]
) -> ResumeDocument:
    """Merge *fields* onto one entry; a given description replaces all bullets."""
    allowed = entry_fields(section) + ("description",)
    for name in fields:
        _check_field(name, allowed, section)
    changes = dict(fields)
    if "description" in changes:
        changes["description"] = list(changes["description"])
    return _replace_entry(resume, section, index, **changes)


def add_entry(resume: ResumeDocument, section: str) -> ResumeDocument:
    entries = _entries(resume, section)
    return _with_section(resume, section, [*entries, empty_entry(section)])


def remove_entry(resume: ResumeDocument, section: str, index: int) -> ResumeDocument:
    entries = _entries(resume, section)
    _check_index(index, entries, section)
    return _with_section(resume, section, entries[:index] + entries[index + 1:])


# ───────────────────────────────────────── bullets ──
def update_bullet(
    resume: ResumeDocument, section: str, entry_index: int, bullet_index: int, text: str
) -> ResumeDocument:
    bullets = _bullets(resume, section, entry_index)
    _check_index(bullet_index, bullets, "bullet")
    new = list(bullets)
    new[bullet_index] = text
    return _replace_entry(resume, section, entry_index, description=new)


def add_bullet(resume: ResumeDocument, section: str, entry_index: int) -> ResumeDocument:
    bullets = _bullets(resume, section, entry_index)
    return _replace_entry(resume, section, entry_index, description=[*bullets, ""])


def remove_bullet(
    resume: ResumeDocument, section: str, entry_index: int, bullet_index: int
) -> ResumeDocument:
    bullets = _bullets(resume, section, entry_index)
    _check_index(bullet_index, bullets, "bullet")
    return _replace_entry(
        resume, section, entry_index,
        description=bullets[:bullet_index] + bullets[bullet_index + 1:],
    )
