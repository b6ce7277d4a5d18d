"""
JSON document storage.

The whole application state lives in a single JSON document.  Every
request reads the document, works on its own copy and writes the whole
document back; there is no locking, so two overlapping writes resolve
as last‑writer‑wins.

``ensure_initialized`` plays the role of a migration step: it creates
the document on first run and backfills fields that were introduced
after older documents were written.
"""

import json
import logging
import os
import stat
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from fundraiser_api.app.services.defaults import MIGRATABLE_FIELDS, default_state, default_value

logger = logging.getLogger(__name__)


def fallback_state() -> Dict[str, Any]:
    """Minimal state served when the document cannot be read."""
    return {"lapCount": 0, "cagnotte": 0}


def utc_timestamp() -> str:
    """Current UTC time as ``2025-01-31T18:04:05.123Z``."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class DataStore:
    """Read and write the application state document at ``path``."""

    def __init__(self, path: os.PathLike | str) -> None:
        self.path = Path(path)

    def read(self) -> Dict[str, Any]:
        """Load the document.

        Any failure (missing file, I/O error, invalid JSON or a JSON
        value that is not an object) is logged and the minimal
        fallback state is returned instead.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error("Failed to read data file %s: %s", self.path, exc)
            return fallback_state()
        if not isinstance(data, dict):
            logger.error("Data file %s does not contain a JSON object", self.path)
            return fallback_state()
        return data

    def save(self, state: Dict[str, Any]) -> bool:
        """Stamp ``lastUpdated`` and overwrite the document.

        The document is written to a temporary file in the same
        directory and renamed over the target, so readers never see a
        partially written file.  Returns ``False`` on failure.
        """
        state["lastUpdated"] = utc_timestamp()
        try:
            payload = json.dumps(state, indent=2, ensure_ascii=False)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.chmod(tmp_path, self._file_mode())
                os.replace(tmp_path, self.path)
            except BaseException:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
                raise
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to save data file %s: %s", self.path, exc)
            return False
        return True

    def _file_mode(self) -> int:
        """Permission bits for the document: the existing file's, or the umask default."""
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            mask = os.umask(0)
            os.umask(mask)
            return 0o666 & ~mask

    def ensure_initialized(self) -> List[str]:
        """Create or migrate the document.

        Returns the names of the fields that were backfilled; an empty
        list means the document was already up to date (or has just
        been created from defaults).
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            if self.save(default_state()):
                logger.info("Created data file %s with default content", self.path)
            return []

        data = self.read()
        added = [field for field in MIGRATABLE_FIELDS if field not in data]
        for field in added:
            data[field] = default_value(field)
        if added:
            if self.save(data):
                logger.info("Migrated data file %s: added %s", self.path, ", ".join(added))
        return added
