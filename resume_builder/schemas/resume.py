# File: resume_builder/schemas/resume.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

IDENTITY_FIELDS = ("name", "title", "phone", "email", "location", "website")
REQUIRED_IDENTITY_FIELDS = ("name", "email")
EXPERIENCE_REQUIRED_FIELDS = ("company", "position", "duration")
EDUCATION_REQUIRED_FIELDS = ("institution", "degree", "year")


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input, dumps camelCase with by_alias=True."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExperienceEntry(CamelModel):
    company: str = ""
    position: str = ""
    duration: str = ""
    responsibilities: List[str] = Field(default_factory=lambda: [""])


class EducationEntry(CamelModel):
    institution: str = ""
    degree: str = ""
    year: str = ""


class ResumeContent(CamelModel):
    """The authored part of a resume, as sent in POST/PUT bodies."""

    name: str = ""
    title: str = ""
    phone: str = ""
    email: str = ""
    location: str = ""
    website: str = ""
    summary: str = ""
    experiences: List[ExperienceEntry] = Field(default_factory=lambda: [ExperienceEntry()])
    education: List[EducationEntry] = Field(default_factory=lambda: [EducationEntry()])
    skills: List[str] = Field(default_factory=list)


class ResumeDocument(ResumeContent):
    """A full resume: authored content plus the fields the store assigns."""

    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ResumeSummary(CamelModel):
    id: str
    name: str
    title: Optional[str] = None
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# Top-level document fields, in declaration order
DOCUMENT_FIELDS = tuple(ResumeDocument.model_fields)
