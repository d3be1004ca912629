from fastapi import APIRouter, Request

from locator.core.config import get_settings
from locator.core.utils import iso_now

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health(request: Request):
    settings = getattr(request.app.state, "settings", None) or get_settings()
    return {
        "ok": True,
        "company": settings.company_name,
        "service": settings.service_name,
        "time": iso_now(),
    }
