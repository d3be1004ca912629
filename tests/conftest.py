from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Make the locator package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from locator.core import config as core_config  # noqa: E402
from locator.repositories.json_storage import JsonStore  # noqa: E402


def sample_db() -> dict:
    return {
        "company": "ACME Ceramics",
        "warehouse": "WH-1",
        "items": [
            {"id": "I1", "name": "Bolt M6", "code": "BLT6", "rackId": "R-A01"},
            {"id": "I2", "name": "Nut M6", "code": "NUT6", "rackId": "R-999"},
            {"id": "I3", "name": "Bearing 6204", "code": "BRG6204", "rackId": None},
            {"id": "I4", "name": "Washer", "code": "WSH-M6", "rackId": "R-B01"},
        ],
        "racks": [
            {"id": "R-A01", "code": "A01", "x": 10, "y": 20},
            {"id": "R-B01", "code": "B01", "x": 30, "y": 40},
        ],
    }


class SpyStore(JsonStore):
    """JsonStore that counts calls and can be told to fail on save."""

    def __init__(self, path, fail_save: bool = False) -> None:
        super().__init__(path)
        self.loads = 0
        self.saves = 0
        self.fail_save = fail_save

    def load(self):
        self.loads += 1
        return super().load()

    def save(self, db):
        self.saves += 1
        if self.fail_save:
            return False
        return super().save(db)


@pytest.fixture(autouse=True)
def _fresh_settings():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def data_file(tmp_path) -> Path:
    path = tmp_path / "db.json"
    path.write_text(json.dumps(sample_db(), indent=2), encoding="utf-8")
    return path


@pytest.fixture()
def read_db(data_file):
    def _read() -> dict:
        return json.loads(data_file.read_text(encoding="utf-8"))
    return _read
