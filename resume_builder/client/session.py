# File: resume_builder/client/session.py
import logging
from typing import Optional

from resume_builder.client.document import (
    DocumentUpdate,
    IdentityPatch,
    apply_update,
    content_fields,
    empty_document,
)
from resume_builder.schemas.resume import ResumeDocument

logger = logging.getLogger(__name__)

SECTIONS = ("basic", "summary", "experience", "education", "skills", "preview")


class ResumeSession:
    """
    Owner of the single live resume for one editing session.

    Editors read `document` and hand their changes to `apply`; nothing else
    replaces the document.
    """

    def __init__(self, document: Optional[ResumeDocument] = None):
        self._document = document if document is not None else empty_document()
        self.active_section = "basic"
        # Incremented by every load()
        self.generation = 0

    @property
    def document(self) -> ResumeDocument:
        return self._document

    def apply(self, update: DocumentUpdate) -> ResumeDocument:
        self._document = apply_update(self._document, update)
        return self._document

    def load(self, document: ResumeDocument) -> ResumeDocument:
        """Replace every field with those of a stored or backed-up document."""
        logger.info(f"Loading resume {document.id or '(unsaved)'} into session")
        self.generation += 1
        return self.apply(IdentityPatch(content_fields(document)))

    def navigate(self, section: str) -> None:
        if section not in SECTIONS:
            raise ValueError(f"Unknown section: {section}")
        self.active_section = section
