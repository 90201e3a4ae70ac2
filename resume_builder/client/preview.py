# File: resume_builder/client/preview.py
"""
Preview & export: the only component that persists the session's resume.

Saving goes to the resume API first and falls back to the local backup when
that fails. A background task also writes the local backup on a fixed period.
The printable view is rendered from a read-only snapshot of the document.
"""

import asyncio
import contextlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from resume_builder.client.document import IdentityPatch
from resume_builder.client.gateway import ResumeGateway
from resume_builder.client.local_storage import LocalStorage
from resume_builder.client.session import ResumeSession
from resume_builder.core.config import settings
from resume_builder.core.exceptions import ConnectivityError, ResumeBuilderError, StorageError
from resume_builder.schemas.resume import ResumeDocument

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"


def create_jinja_env(template_dir: Path = TEMPLATE_DIR) -> Environment:
    return Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_resume_html(document: ResumeDocument, env: Optional[Environment] = None) -> str:
    """Printable HTML for a resume. Entries without a company or institution are left out."""
    env = env or create_jinja_env()
    experiences = [
        {
            "company": exp.company,
            "position": exp.position,
            "duration": exp.duration,
            "responsibilities": [r for r in exp.responsibilities if r.strip()],
        }
        for exp in document.experiences
        if exp.company
    ]
    education = [edu for edu in document.education if edu.institution]
    return env.get_template("resume.html").render(
        resume=document,
        experiences=experiences,
        education=education,
    )


@dataclass
class SaveOutcome:
    success: bool
    message: str
    resume_id: Optional[str] = None
    saved_locally: bool = False


class PreviewExport:
    def __init__(
        self,
        session: ResumeSession,
        gateway: Optional[ResumeGateway] = None,
        storage: Optional[LocalStorage] = None,
        autosave_interval: Optional[float] = None,
    ):
        self.session = session
        self.gateway = gateway or ResumeGateway()
        self.storage = storage or LocalStorage()
        self.autosave_interval = (
            autosave_interval if autosave_interval is not None else settings.AUTOSAVE_INTERVAL_SECONDS
        )

        self.is_saving = False
        self.is_connected = True
        self._autosave_task: Optional[asyncio.Task] = None

    @property
    def resume_id(self) -> Optional[str]:
        return self.session.document.id

    async def check_connection(self) -> bool:
        self.is_connected = await self.gateway.probe()
        return self.is_connected

    def _write_backup(self, document: ResumeDocument) -> bool:
        try:
            self.storage.save(document)
        except StorageError as e:
            logger.warning(f"Local backup skipped: {e}")
            return False
        return True

    async def save(self) -> SaveOutcome:
        if self.is_saving:
            return SaveOutcome(False, "A save is already in progress")

        document = self.session.document
        if not document.name.strip() or not document.email.strip():
            return SaveOutcome(False, "Name and email are required to save")
        generation = self.session.generation

        self.is_saving = True
        try:
            if document.id:
                saved = await self.gateway.update(document.id, document)
                message = "Resume updated successfully!"
            else:
                saved = await self.gateway.create(document)
                message = f"Resume saved! ID: {saved.id}"

            self.is_connected = True
            if self.session.generation != generation:
                logger.info(f"Resume {saved.id} saved, but the session loaded another resume meanwhile")
                return SaveOutcome(True, message, resume_id=saved.id)

            # Only the store-assigned fields; edits made during the request survive
            self.session.apply(IdentityPatch({
                "id": saved.id,
                "created_at": saved.created_at,
                "updated_at": saved.updated_at,
            }))
            saved_locally = self._write_backup(self.session.document)
            return SaveOutcome(True, message, resume_id=saved.id, saved_locally=saved_locally)

        except ResumeBuilderError as e:
            logger.error(f"Save failed: {e}")
            if isinstance(e, ConnectivityError):
                self.is_connected = False
            message = f"Save failed: {e}"
            saved_locally = self._write_backup(document)
            if saved_locally:
                message += " (Saved locally as backup)"
            return SaveOutcome(False, message, resume_id=document.id, saved_locally=saved_locally)

        finally:
            self.is_saving = False

    async def load(self, resume_id: str) -> ResumeDocument:
        """Fetch a stored resume and make it the session's document."""
        document = await self.gateway.read(resume_id)
        return self.session.load(document)

    def restore_backup(self) -> SaveOutcome:
        try:
            backup = self.storage.load_document()
        except StorageError as e:
            return SaveOutcome(False, f"Could not read local backup: {e}")
        if backup is None:
            return SaveOutcome(False, "No local backup found")
        self.session.load(backup)
        return SaveOutcome(True, "Local backup restored", resume_id=backup.id, saved_locally=True)

    def backup(self) -> bool:
        """One tick of the backup timer: write locally once name or email is set."""
        document = self.session.document
        if not (document.name or document.email):
            return False
        return self._write_backup(document)

    async def _autosave_loop(self) -> None:
        while True:
            await asyncio.sleep(self.autosave_interval)
            self.backup()

    def start_autosave(self) -> None:
        if self._autosave_task is None or self._autosave_task.done():
            logger.info(f"Local backup every {self.autosave_interval} seconds")
            self._autosave_task = asyncio.get_running_loop().create_task(self._autosave_loop())

    async def stop_autosave(self) -> None:
        task, self._autosave_task = self._autosave_task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    def render_html(self) -> str:
        return render_resume_html(self.session.document)

    def export_filename(self) -> str:
        return f"{self.session.document.name or 'Resume'}_Resume.pdf"
