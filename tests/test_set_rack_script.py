from __future__ import annotations

import runpy
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "set_rack.py"


@pytest.fixture()
def set_rack_main():
    return runpy.run_path(str(SCRIPT))["main"]


def test_script_creates_rack(set_rack_main, data_file, read_db, capsys):
    code = set_rack_main(["--code", "e05", "--x", "7", "--y", "8", "--data", str(data_file)])
    assert code == 0
    assert read_db()["racks"][-1] == {"id": "R-E05", "code": "E05", "x": 7, "y": 8}
    out = capsys.readouterr().out
    assert "Rack E05 saved" in out
    assert "Created" in out


def test_script_reports_invalid_input(set_rack_main, data_file, read_db, capsys):
    before = read_db()
    code = set_rack_main(["--code", "A01", "--x", "left", "--y", "8", "--data", str(data_file)])
    assert code == 1
    assert "Error:" in capsys.readouterr().err
    assert read_db() == before


def test_script_uses_data_file_setting(set_rack_main, data_file, read_db, monkeypatch):
    monkeypatch.setenv("DATA_FILE", str(data_file))
    assert set_rack_main(["--code", "A01", "--x", "1", "--y", "2"]) == 0
    assert read_db()["racks"][0]["x"] == 1
