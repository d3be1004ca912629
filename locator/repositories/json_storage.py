"""
JSON-file persistence adapter.

The whole dataset lives in a single document; every load reads all of it and
every save rewrites all of it. Failures are reported as ``None``/``False`` and
logged, never raised, so callers can turn them into structured responses.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging
import os
import shutil
import tempfile

logger = logging.getLogger(__name__)


class JsonStore:
    """Whole-document load/save over one JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> dict | None:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                db = json.load(f)
        except (OSError, ValueError):
            logger.exception("Failed to read %s", self.path)
            return None
        if not isinstance(db, dict):
            logger.error("Failed to read %s: top-level value is %s, not an object", self.path, type(db).__name__)
            return None
        return db

    def save(self, db: dict) -> bool:
        tmp_name = None
        try:
            payload = json.dumps(db, ensure_ascii=False, indent=2)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to write %s", self.path)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False
        return True
