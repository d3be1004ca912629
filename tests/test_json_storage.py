"""
Failure modes and write format of the JSON store.
"""
from __future__ import annotations

import json
import logging

from locator.repositories.json_storage import JsonStore


def test_load_returns_whole_document(data_file):
    db = JsonStore(data_file).load()
    assert db["company"] == "ACME Ceramics"
    assert [r["code"] for r in db["racks"]] == ["A01", "B01"]


def test_load_missing_file_returns_none_and_logs(tmp_path, caplog):
    store = JsonStore(tmp_path / "missing.json")
    with caplog.at_level(logging.ERROR, logger="locator.repositories.json_storage"):
        assert store.load() is None
    assert any("Failed to read" in rec.getMessage() for rec in caplog.records)


def test_load_malformed_json_returns_none(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("{not json", encoding="utf-8")
    assert JsonStore(path).load() is None


def test_load_non_object_returns_none(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert JsonStore(path).load() is None


def test_save_overwrites_with_readable_json(data_file):
    store = JsonStore(data_file)
    db = {"warehouse": "Gudang Utama", "company": "ACME", "items": [], "racks": []}
    assert store.save(db) is True

    raw = data_file.read_text(encoding="utf-8")
    assert raw.startswith('{\n  "warehouse": "Gudang Utama"')
    assert list(json.loads(raw)) == ["warehouse", "company", "items", "racks"]
    # no temporary files left behind
    assert [p.name for p in data_file.parent.iterdir()] == ["db.json"]


def test_save_into_missing_directory_returns_false(tmp_path, caplog):
    store = JsonStore(tmp_path / "nope" / "db.json")
    with caplog.at_level(logging.ERROR, logger="locator.repositories.json_storage"):
        assert store.save({"racks": []}) is False
    assert any("Failed to write" in rec.getMessage() for rec in caplog.records)


def test_save_unserializable_keeps_previous_file(data_file):
    before = data_file.read_text(encoding="utf-8")
    assert JsonStore(data_file).save({"racks": [object()]}) is False
    assert data_file.read_text(encoding="utf-8") == before
    assert [p.name for p in data_file.parent.iterdir()] == ["db.json"]
