"""
Canonical résumé schema.

The pydantic models are the in-memory document; RESPONSE_SCHEMA is the JSON
schema handed to the LLM so its output deserializes straight into them.
"""
from __future__ import annotations
from typing import Dict, List, Type

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    # edits go through editor.py, which builds new instances
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class PersonalInfo(_Frozen):
    name: str
    phone: str = ""
    email: str
    linkedin: str = ""
    github: str = ""


class EducationEntry(_Frozen):
    school: str
    degree: str
    location: str = ""
    date: str
    description: List[str] = Field(default_factory=list)


class ExperienceEntry(_Frozen):
    company: str
    role: str
    location: str = ""
    date: str
    description: List[str] = Field(default_factory=list)


class ProjectEntry(_Frozen):
    name: str
    tech: str = ""
    date: str
    description: List[str] = Field(default_factory=list)


class SkillsBlock(_Frozen):
    languages: str = ""
    frameworks: str = ""
    tools: str = ""
    libraries: str = ""


class ResumeDocument(_Frozen):
    personal_info: PersonalInfo = Field(alias="personalInfo")
    education: List[EducationEntry]
    experience: List[ExperienceEntry]
    projects: List[ProjectEntry] = Field(default_factory=list)
    skills: SkillsBlock

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


# ───────────────────────────────────────── sections ──
ENTRY_MODELS: Dict[str, Type[_Frozen]] = {
    "education": EducationEntry,
    "experience": ExperienceEntry,
    "projects": ProjectEntry,
}
SECTIONS = tuple(ENTRY_MODELS)

PERSONAL_FIELDS = tuple(PersonalInfo.model_fields)
SKILLS_FIELDS = tuple(SkillsBlock.model_fields)


def entry_fields(section: str) -> tuple[str, ...]:
    """Scalar (non-bullet) field names of an entry in *section*."""
    model = _entry_model(section)
    return tuple(f for f in model.model_fields if f != "description")


def empty_entry(section: str):
    """Blank entry for *section*: every scalar "" and no bullets."""
    model = _entry_model(section)
    return model(**{f: "" for f in entry_fields(section)}, description=[])


def _entry_model(section: str) -> Type[_Frozen]:
    try:
        return ENTRY_MODELS[section]
    except KeyError:
        raise ValueError(f"Unknown section: {section!r}") from None


# ───────────────────────────────────────── seed ──
def initial_resume() -> ResumeDocument:
    """Sample résumé shown before anything has been generated."""
    return ResumeDocument(
        personal_info=PersonalInfo(
            name="JAKE DOE",
            phone="123-456-7890",
            email="jake@example.com",
            linkedin="linkedin.com/in/jakedoe",
            github="github.com/jakedoe",
        ),
        education=[
            EducationEntry(
                school="Southwestern University",
                degree="Bachelor of Science in Computer Science",
                location="Georgetown, TX",
                date="Aug. 2018 -- May 2021",
                description=[],
            )
        ],
        experience=[
            ExperienceEntry(
                company="Starbucks",
                role="Software Engineer Intern",
                location="Seattle, WA",
                date="May 2020 -- Aug. 2020",
                description=[
                    "Worked on the mobile app using React Native and TypeScript",
                    "Improved performance by 20% by optimizing database queries",
                ],
            )
        ],
        projects=[
            ProjectEntry(
                name="Git-it-done",
                tech="Node.js, Express, MongoDB",
                date="June 2020",
                description=[
                    "Developed a CLI tool to automate git workflows",
                    "Used by over 500 developers weekly",
                ],
            )
        ],
        skills=SkillsBlock(
            languages="Java, Python, C/C++, SQL (Postgres), JavaScript, HTML/CSS",
            frameworks="React, Node.js, Flask, JUnit, WordPress",
            tools="Git, Docker, Google Cloud Platform, VS Code, PyCharm, IntelliJ, Eclipse",
            libraries="pandas, NumPy, Matplotlib",
        ),
    )


# ───────────────────────────────────────── LLM output schema ──
_STR = {"type": "string"}
_BULLETS = {"type": "array", "items": _STR}


def _obj(props: Dict[str, dict], required: List[str]) -> dict:
    return {
        "type": "object",
        "properties": props,
        "required": required,
        "additionalProperties": False,
    }


RESPONSE_SCHEMA = _obj(
    {
        "personalInfo": _obj(
            {k: _STR for k in ("name", "phone", "email", "linkedin", "github")},
            ["name", "email"],
        ),
        "education": {
            "type": "array",
            "items": _obj(
                {"school": _STR, "degree": _STR, "location": _STR,
                 "date": _STR, "description": _BULLETS},
                ["school", "degree", "date"],
            ),
        },
        "experience": {
            "type": "array",
            "items": _obj(
                {"company": _STR, "role": _STR, "location": _STR,
                 "date": _STR, "description": _BULLETS},
                ["company", "role", "date"],
            ),
        },
        "projects": {
            "type": "array",
            "items": _obj(
                {"name": _STR, "tech": _STR, "date": _STR, "description": _BULLETS},
                ["name", "date"],
            ),
        },
        "skills": _obj(
            {k: _STR for k in ("languages", "frameworks", "tools", "libraries")},
            [],
        ),
    },
    ["personalInfo", "education", "experience", "skills"],
)
