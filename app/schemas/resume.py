from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ResumeModel(BaseModel):
    """Wire format is camelCase, as sent by the resume editor."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResumeItem(ResumeModel):
    id: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _null_id(cls, value: Any) -> Any:
        return "" if value is None else value


class PersonalInfo(ResumeModel):
    name: str | None = None
    title: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    summary: str | None = None
    linkedin: str | None = None
    github: str | None = None


class Experience(ResumeItem):
    title: str | None = None
    company: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None


class Education(ResumeItem):
    degree: str | None = None
    school: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None


class Skill(ResumeItem):
    name: str | None = None
    level: str | None = None


class Project(ResumeItem):
    name: str | None = None
    description: str | None = None
    technologies: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    url: str | None = None


class Achievement(ResumeItem):
    title: str | None = None
    description: str | None = None
    date: str | None = None


class ResumeData(ResumeModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    achievements: list[Achievement] = Field(default_factory=list)

    @field_validator("personal_info", mode="before")
    @classmethod
    def _null_personal_info(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("experience", "education", "skills", "projects", "achievements", mode="before")
    @classmethod
    def _null_sections(cls, value: Any) -> Any:
        # Editors send null for untouched sections and for deleted rows.
        if value is None:
            return []
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value

    @property
    def summary(self) -> str:
        return self.personal_info.summary or ""

    def skill_names(self) -> list[str]:
        """Non-blank skill names; editor placeholders are skipped."""
        return [skill.name.strip() for skill in self.skills if skill.name and skill.name.strip()]
