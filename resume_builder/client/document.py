# File: resume_builder/client/document.py
"""
Client document model and the synchronizer.

Every change to the live resume is expressed as one of two update kinds
and merged by apply_update. The input document is never mutated; fields
the update does not name are carried over as the same objects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from resume_builder.schemas.resume import DOCUMENT_FIELDS, ResumeDocument


class Section(str, Enum):
    EXPERIENCES = "experiences"
    EDUCATION = "education"
    SKILLS = "skills"
    SUMMARY = "summary"


@dataclass(frozen=True)
class IdentityPatch:
    """Shallow merge of the given fields into the whole document."""

    fields: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SectionReplace:
    """Wholesale replacement of exactly one top-level section."""

    section: Section
    value: Any


DocumentUpdate = Union[IdentityPatch, SectionReplace]


def empty_document() -> ResumeDocument:
    return ResumeDocument()


def apply_update(document: ResumeDocument, update: DocumentUpdate) -> ResumeDocument:
    if isinstance(update, IdentityPatch):
        unknown = [name for name in update.fields if name not in DOCUMENT_FIELDS]
        if unknown:
            raise ValueError(f"Unknown document field(s): {', '.join(unknown)}")
        return document.model_copy(update=dict(update.fields))

    if isinstance(update, SectionReplace):
        section = Section(update.section)
        return document.model_copy(update={section.value: update.value})

    raise TypeError(f"Unsupported update: {type(update).__name__}")


def synchronize(
    document: ResumeDocument,
    *,
    patch: Optional[Dict[str, Any]] = None,
    section: Optional[Union[Section, str]] = None,
    value: Any = None,
) -> ResumeDocument:
    """Keyword form of apply_update: pass either patch or section/value."""
    if (patch is None) == (section is None):
        raise ValueError("Pass exactly one of patch or section")
    if patch is not None:
        return apply_update(document, IdentityPatch(patch))
    return apply_update(document, SectionReplace(Section(section), value))


def content_fields(document: ResumeDocument) -> Dict[str, Any]:
    """The document as a patch over every field, for whole-document loads."""
    return {name: getattr(document, name) for name in DOCUMENT_FIELDS}
