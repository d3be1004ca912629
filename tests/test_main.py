from __future__ import annotations

import pytest

from locator.__main__ import uvicorn_log_level


@pytest.mark.parametrize(
    "setting, expected",
    [
        ("INFO", "info"),
        ("DEBUG", "debug"),
        ("WARNING", "warning"),
        ("WARN", "warning"),
        ("CRITICAL", "critical"),
        ("FATAL", "critical"),
        ("ERROR", "error"),
        ("verbose", "info"),
        ("", "info"),
        (None, "info"),
    ],
)
def test_uvicorn_log_level(setting, expected):
    assert uvicorn_log_level(setting) == expected
