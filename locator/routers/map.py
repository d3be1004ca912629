from __future__ import annotations

from fastapi import APIRouter, Request

from locator.core.utils import error_response
from locator.services.errors import LocatorError
from locator.services.map_service import MapService

router = APIRouter(prefix="/api", tags=["map"])


def _get_map_service(request: Request) -> MapService:
    svc = getattr(getattr(request.app, "state", None), "map_service", None)
    if not svc:
        raise RuntimeError("MapService not configured")
    return svc


@router.get("/map")
def get_map(request: Request):
    svc = _get_map_service(request)
    try:
        info = svc.get_map()
    except LocatorError as exc:
        return error_response(exc)
    return {
        "ok": True,
        "company": info.company,
        "warehouse": info.warehouse,
        "mapFile": info.map_file,
        "racks": info.racks,
    }
