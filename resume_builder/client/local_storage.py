"""
Local backup storage — save, load, clear.
All offline persistence of the session's resume goes through this module.
Each key is one JSON file, overwritten wholesale on every save.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from resume_builder.core.config import settings
from resume_builder.core.exceptions import StorageError
from resume_builder.schemas.resume import ResumeDocument

logger = logging.getLogger(__name__)


class LocalStorage:
    def __init__(self, directory: Optional[str] = None, default_key: Optional[str] = None):
        self.directory = directory or settings.LOCAL_STORAGE_DIR
        self.default_key = default_key or settings.LOCAL_STORAGE_KEY

    def _path(self, key: Optional[str]) -> str:
        return os.path.join(self.directory, f"{key or self.default_key}.json")

    def save(self, document: ResumeDocument, key: Optional[str] = None) -> Dict[str, Any]:
        """Write the full document plus a lastSaved timestamp. Returns the payload written."""
        payload = document.model_dump(by_alias=True, mode="json")
        payload["lastSaved"] = datetime.now(timezone.utc).isoformat()

        path = self._path(key)
        tmp_path = f"{path}.tmp"
        try:
            os.makedirs(self.directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error(f"Failed to save local backup to {path}: {e}")
            raise StorageError("Failed to save local backup", detail=str(e)) from e

        logger.info(f"Resume saved locally as backup ({path})")
        return payload

    def load(self, key: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Stored payload, or None when there is none or it cannot be parsed."""
        path = self._path(key)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring corrupt local backup {path}: {e}")
            return None
        except OSError as e:
            logger.error(f"Failed to read local backup {path}: {e}")
            raise StorageError("Failed to read local backup", detail=str(e)) from e

        if not isinstance(data, dict):
            logger.warning(f"Ignoring corrupt local backup {path}: expected an object")
            return None

        logger.info(f"Resume loaded from local backup ({path})")
        return data

    def load_document(self, key: Optional[str] = None) -> Optional[ResumeDocument]:
        """Like load, but as a ResumeDocument; payloads that don't fit the model count as corrupt."""
        data = self.load(key)
        if data is None:
            return None
        try:
            return ResumeDocument.model_validate(data)
        except ValueError as e:
            logger.warning(f"Ignoring corrupt local backup {self._path(key)}: {e}")
            return None

    def clear(self, key: Optional[str] = None) -> None:
        path = self._path(key)
        try:
            os.unlink(path)
            logger.info(f"Local backup cleared ({path})")
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error(f"Failed to clear local backup {path}: {e}")
            raise StorageError("Failed to clear local backup", detail=str(e)) from e
