# File: resume_builder/services/resume_store.py
"""
Resume store: create, read, update and list over the resumes table.
Validation of required fields happens here on every insert and update,
so the API layer never writes an incomplete document.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from resume_builder.core.exceptions import NotFoundError, ValidationError
from resume_builder.db import models
from resume_builder.db.models import utcnow
from resume_builder.schemas.resume import (
    EDUCATION_REQUIRED_FIELDS,
    EXPERIENCE_REQUIRED_FIELDS,
    REQUIRED_IDENTITY_FIELDS,
    ResumeContent,
    ResumeDocument,
    ResumeSummary,
)

logger = logging.getLogger(__name__)


def _clean(content: ResumeContent) -> Dict[str, Any]:
    """Plain column values with surrounding whitespace stripped from every string."""
    return {
        "name": content.name.strip(),
        "title": content.title.strip(),
        "phone": content.phone.strip(),
        "email": content.email.strip(),
        "location": content.location.strip(),
        "website": content.website.strip(),
        "summary": content.summary.strip(),
        "experiences": [
            {
                "company": exp.company.strip(),
                "position": exp.position.strip(),
                "duration": exp.duration.strip(),
                "responsibilities": [r.strip() for r in exp.responsibilities],
            }
            for exp in content.experiences
        ],
        "education": [
            {
                "institution": edu.institution.strip(),
                "degree": edu.degree.strip(),
                "year": edu.year.strip(),
            }
            for edu in content.education
        ],
        "skills": [s.strip() for s in content.skills],
    }


def missing_fields(values: Dict[str, Any]) -> List[str]:
    """Dotted paths of every required field that is blank."""
    missing = [f for f in REQUIRED_IDENTITY_FIELDS if not values.get(f)]
    for i, exp in enumerate(values.get("experiences", [])):
        missing.extend(f"experiences.{i}.{f}" for f in EXPERIENCE_REQUIRED_FIELDS if not exp.get(f))
    for i, edu in enumerate(values.get("education", [])):
        missing.extend(f"education.{i}.{f}" for f in EDUCATION_REQUIRED_FIELDS if not edu.get(f))
    return missing


def validate(values: Dict[str, Any]) -> None:
    missing = missing_fields(values)
    if missing:
        raise ValidationError(
            "Resume validation failed",
            fields=missing,
            detail=f"required field(s) missing: {', '.join(missing)}",
        )


def _get_or_raise(db: Session, resume_id: str) -> models.Resume:
    resume = db.query(models.Resume).filter(models.Resume.id == resume_id).first()
    if not resume:
        raise NotFoundError("Resume not found")
    return resume


def create_resume(db: Session, content: ResumeContent) -> ResumeDocument:
    values = _clean(content)
    validate(values)

    now = utcnow()
    resume = models.Resume(**values, created_at=now, updated_at=now)
    db.add(resume)
    db.commit()
    db.refresh(resume)

    logger.info(f"Resume saved with ID: {resume.id}")
    return ResumeDocument.model_validate(resume)


def get_resume(db: Session, resume_id: str) -> ResumeDocument:
    return ResumeDocument.model_validate(_get_or_raise(db, resume_id))


def update_resume(db: Session, resume_id: str, content: ResumeContent) -> ResumeDocument:
    resume = _get_or_raise(db, resume_id)

    values = _clean(content)
    validate(values)

    # Full replacement of the authored fields; created_at is never touched
    for field, value in values.items():
        setattr(resume, field, value)
    resume.updated_at = utcnow()

    db.commit()
    db.refresh(resume)

    logger.info(f"Resume {resume_id} updated")
    return ResumeDocument.model_validate(resume)


def list_resumes(db: Session) -> List[ResumeSummary]:
    """Every stored resume, most recently updated first. No pagination."""
    resumes = db.query(models.Resume).order_by(models.Resume.updated_at.desc()).all()
    return [ResumeSummary.model_validate(r) for r in resumes]
