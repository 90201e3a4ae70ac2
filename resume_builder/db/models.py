# File: resume_builder/db/models.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, JSON

from resume_builder.db.database import Base


def generate_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(String(32), primary_key=True, default=generate_id)

    # Personal information
    name = Column(String, nullable=False)
    title = Column(String, default="")
    phone = Column(String, default="")
    email = Column(String, nullable=False)
    location = Column(String, default="")
    website = Column(String, default="")

    # Professional summary
    summary = Column(Text, default="")

    # List-shaped sections, stored as JSON arrays
    experiences = Column(JSON, default=list)  # [{company, position, duration, responsibilities}]
    education = Column(JSON, default=list)  # [{institution, degree, year}]
    skills = Column(JSON, default=list)

    # Set in the store so ordering by updated_at never sees NULLs
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, index=True)
