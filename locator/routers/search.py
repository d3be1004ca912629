from __future__ import annotations

from fastapi import APIRouter, Request

from locator.core.utils import error_response
from locator.services.errors import LocatorError
from locator.services.search_service import SearchService

router = APIRouter(prefix="/api", tags=["search"])


def _get_search_service(request: Request) -> SearchService:
    svc = getattr(getattr(request.app, "state", None), "search_service", None)
    if not svc:
        raise RuntimeError("SearchService not configured")
    return svc


@router.get("/search")
def search(request: Request, q: str = ""):
    svc = _get_search_service(request)
    try:
        result = svc.search(q)
    except LocatorError as exc:
        return error_response(exc)
    if result.message:
        return {"ok": True, "results": result.results, "message": result.message}
    return {"ok": True, "query": result.query, "total": result.total, "results": result.results}
