# File: resume_builder/client/editors.py
"""
Section editors: one per slice of the resume.

Each editor reads the session's current document and submits either an
identity patch or a whole-section replacement. Lists are always rebuilt,
never mutated in place, so earlier snapshots of the document stay intact.
"""

import logging
from typing import Dict, List

from resume_builder.client.document import DocumentUpdate, IdentityPatch, Section, SectionReplace
from resume_builder.client.session import ResumeSession
from resume_builder.core.config import settings
from resume_builder.schemas.resume import (
    EDUCATION_REQUIRED_FIELDS,
    EXPERIENCE_REQUIRED_FIELDS,
    IDENTITY_FIELDS,
    REQUIRED_IDENTITY_FIELDS,
    EducationEntry,
    ExperienceEntry,
    ResumeDocument,
)

logger = logging.getLogger(__name__)


class SectionEditor:
    def __init__(self, session: ResumeSession):
        self.session = session

    @property
    def document(self) -> ResumeDocument:
        return self.session.document

    def submit(self, update: DocumentUpdate) -> ResumeDocument:
        return self.session.apply(update)


class BasicDetailsEditor(SectionEditor):
    def view(self) -> Dict[str, str]:
        return {f: getattr(self.document, f) for f in IDENTITY_FIELDS}

    def change(self, field: str, value: str) -> ResumeDocument:
        if field not in IDENTITY_FIELDS:
            raise ValueError(f"Not a basic details field: {field}")
        return self.submit(IdentityPatch({field: value}))

    def missing_required(self) -> List[str]:
        return [f for f in REQUIRED_IDENTITY_FIELDS if not getattr(self.document, f).strip()]


class SummaryEditor(SectionEditor):
    SAMPLE_SUMMARIES = (
        "Experienced software developer with 3+ years in full-stack development. "
        "Proficient in React, Node.js, and cloud technologies. Passionate about creating "
        "user-friendly applications that solve real-world problems.",
        "Creative graphic designer with 5+ years of experience in branding and digital design. "
        "Skilled in Adobe Creative Suite and modern design principles. Proven track record of "
        "delivering impactful visual solutions for diverse clients.",
        "Results-driven marketing professional with expertise in digital marketing strategies. "
        "Experienced in SEO, social media management, and content creation. Successfully "
        "increased brand engagement by 40% in previous role.",
    )

    @property
    def char_count(self) -> int:
        return len(self.document.summary)

    @property
    def is_over_limit(self) -> bool:
        # Display hint only; long summaries are still stored
        return self.char_count > settings.SUMMARY_SOFT_LIMIT

    def change(self, text: str) -> ResumeDocument:
        return self.submit(SectionReplace(Section.SUMMARY, text))

    def insert_sample(self, index: int) -> ResumeDocument:
        return self.change(self.SAMPLE_SUMMARIES[index])


class _EntryListEditor(SectionEditor):
    """Shared add/remove/change rules for experiences and education."""

    section: Section
    entry_type: type
    required_fields: tuple

    def entries(self) -> list:
        return getattr(self.document, self.section.value)

    def _replace(self, entries: list) -> ResumeDocument:
        return self.submit(SectionReplace(self.section, entries))

    def incomplete_entries(self) -> List[int]:
        """Indexes of entries with a blank required sub-field."""
        return [
            i for i, entry in enumerate(self.entries())
            if any(not getattr(entry, f).strip() for f in self.required_fields)
        ]

    def change(self, index: int, field: str, value: str) -> ResumeDocument:
        if field not in self.required_fields:
            raise ValueError(f"Not a {self.section.value} field: {field}")
        entries = list(self.entries())
        entries[index] = entries[index].model_copy(update={field: value})
        return self._replace(entries)

    def add(self) -> bool:
        incomplete = self.incomplete_entries()
        if incomplete:
            logger.info(f"Refusing to add to {self.section.value}: entries {incomplete} are incomplete")
            return False
        self._replace(list(self.entries()) + [self.entry_type()])
        return True

    def remove(self, index: int) -> bool:
        entries = self.entries()
        if len(entries) <= 1 or not 0 <= index < len(entries):
            return False
        self._replace([e for i, e in enumerate(entries) if i != index])
        return True


class ExperienceEditor(_EntryListEditor):
    section = Section.EXPERIENCES
    entry_type = ExperienceEntry
    required_fields = EXPERIENCE_REQUIRED_FIELDS

    def _set_responsibilities(self, index: int, responsibilities: List[str]) -> ResumeDocument:
        entries = list(self.entries())
        entries[index] = entries[index].model_copy(update={"responsibilities": responsibilities})
        return self._replace(entries)

    def change_responsibility(self, index: int, resp_index: int, value: str) -> ResumeDocument:
        responsibilities = list(self.entries()[index].responsibilities)
        responsibilities[resp_index] = value
        return self._set_responsibilities(index, responsibilities)

    def add_responsibility(self, index: int) -> bool:
        self._set_responsibilities(index, list(self.entries()[index].responsibilities) + [""])
        return True

    def remove_responsibility(self, index: int, resp_index: int) -> bool:
        responsibilities = self.entries()[index].responsibilities
        if len(responsibilities) <= 1 or not 0 <= resp_index < len(responsibilities):
            return False
        self._set_responsibilities(index, [r for i, r in enumerate(responsibilities) if i != resp_index])
        return True


class EducationEditor(_EntryListEditor):
    section = Section.EDUCATION
    entry_type = EducationEntry
    required_fields = EDUCATION_REQUIRED_FIELDS


class SkillsEditor(SectionEditor):
    def add(self, raw: str) -> bool:
        skill = raw.strip()
        if not skill or skill in self.document.skills:
            return False
        self.submit(SectionReplace(Section.SKILLS, list(self.document.skills) + [skill]))
        return True

    def remove(self, index: int) -> bool:
        skills = self.document.skills
        if not 0 <= index < len(skills):
            return False
        self.submit(SectionReplace(Section.SKILLS, [s for i, s in enumerate(skills) if i != index]))
        return True
