"""
Utility helpers shared across routers.
"""

from datetime import datetime, timezone

from fastapi.responses import JSONResponse

from locator.services.errors import LocatorError


def iso_now() -> str:
    """UTC timestamp with millisecond precision and a trailing Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def error_response(err: LocatorError) -> JSONResponse:
    return JSONResponse({"ok": False, "message": err.message}, status_code=err.status_code)
