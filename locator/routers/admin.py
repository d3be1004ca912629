"""Admin endpoints for placing and moving rack markers on the facility map."""
from __future__ import annotations

from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from locator.core.utils import error_response
from locator.services.errors import LocatorError
from locator.services.rack_service import RackService

router = APIRouter(prefix="/api/admin", tags=["admin"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _get_rack_service(request: Request) -> RackService:
    svc = getattr(getattr(request.app, "state", None), "rack_service", None)
    if not svc:
        raise RuntimeError("RackService not configured")
    return svc


async def _read_payload(request: Request) -> dict:
    """Body as a dict, from JSON or a submitted form; anything else is empty."""
    content_type = (request.headers.get("content-type") or "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


@router.post("/rack")
async def upsert_rack(request: Request):
    svc = _get_rack_service(request)
    payload = await _read_payload(request)
    try:
        result = await run_in_threadpool(
            svc.upsert_rack, payload.get("code"), payload.get("x"), payload.get("y")
        )
    except LocatorError as exc:
        return error_response(exc)
    return {"ok": True, "message": result.message, "rack": result.rack}
