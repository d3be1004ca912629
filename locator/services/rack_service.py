"""Admin use case: place a new rack marker or move an existing one."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any

from locator.core.config import get_settings
from locator.domain.racks import find_rack, normalize_rack_code, parse_coordinate
from locator.repositories.json_storage import JsonStore
from locator.services.errors import InvalidInputError, ServiceUnavailableError, StorageWriteError

logger = logging.getLogger(__name__)

# Serializes load-modify-save inside one process. Separate processes sharing
# the data file still race and the last save wins.
_write_lock = threading.Lock()


@dataclass
class RackUpsertResult:
    rack: dict
    created: bool
    message: str


class RackService:
    """Find-or-create rack markers keyed on the upper-cased rack code."""

    def __init__(self, store: JsonStore | None = None) -> None:
        self.store = store or JsonStore(get_settings().data_file)

    def upsert_rack(self, code: Any, x: Any, y: Any) -> RackUpsertResult:
        code_norm = normalize_rack_code(code)
        x_val = parse_coordinate(x)
        y_val = parse_coordinate(y)
        if not code_norm or x_val is None or y_val is None:
            raise InvalidInputError()

        with _write_lock:
            db = self.store.load()
            if db is None:
                raise ServiceUnavailableError()

            racks = db.get("racks")
            if not isinstance(racks, list):
                racks = []
                db["racks"] = racks

            rack = find_rack(racks, code=code_norm)
            created = rack is None
            if created:
                rack = {"id": f"R-{code_norm}", "code": code_norm, "x": x_val, "y": y_val}
                racks.append(rack)
            else:
                rack["x"] = x_val
                rack["y"] = y_val

            if not self.store.save(db):
                raise StorageWriteError()

        logger.info("Rack %s %s at (%s, %s)", code_norm, "created" if created else "moved", x_val, y_val)
        return RackUpsertResult(rack=rack, created=created, message=f"Rack {code_norm} saved")
