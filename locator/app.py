import logging
import os

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.datastructures import Headers

from locator.core.config import Settings, get_settings
from locator.core.logging_config import setup_logging
from locator.repositories.json_storage import JsonStore
from locator.routers import admin as admin_router
from locator.routers import health as health_router
from locator.routers import map as map_router
from locator.routers import search as search_router
from locator.services.map_service import MapService
from locator.services.rack_service import RackService
from locator.services.search_service import SearchService

logger = logging.getLogger(__name__)


class BodyTooLarge(Exception):
    """Raised from ``receive`` once a streamed body passes the limit."""


class BodySizeLimitMiddleware:
    """
    Answer 413 for request bodies larger than ``max_bytes``.

    A declared Content-Length is checked up front; chunked bodies are counted
    as they are read.
    """

    def __init__(self, app, *, max_bytes: int) -> None:
        self.app = app
        self._max_bytes = max_bytes

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        length = Headers(scope=scope).get("content-length")
        if length and length.isdigit() and int(length) > self._max_bytes:
            await _too_large()(scope, receive, send)
            return

        received = 0
        started = False

        async def limited_receive():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self._max_bytes:
                    raise BodyTooLarge()
            return message

        async def tracking_send(message):
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, tracking_send)
        except BodyTooLarge:
            if started:
                raise
            await _too_large()(scope, receive, send)


def _too_large() -> JSONResponse:
    return JSONResponse({"ok": False, "message": "Request body too large"}, status_code=413)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.service_name)
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)

    store = JsonStore(settings.data_file)
    app.state.settings = settings
    app.state.search_service = SearchService(store)
    app.state.map_service = MapService(store, map_file=settings.map_file)
    app.state.rack_service = RackService(store)

    app.include_router(health_router.router)
    app.include_router(search_router.router)
    app.include_router(map_router.router)
    app.include_router(admin_router.router)

    data_dir = settings.data_file.parent
    for folder in (settings.frontend_dir, settings.maps_dir, data_dir):
        os.makedirs(folder, exist_ok=True)
    # "/" is mounted last so it only sees paths no API route claimed.
    app.mount("/maps", StaticFiles(directory=settings.maps_dir), name="maps")
    app.mount("/data", StaticFiles(directory=data_dir), name="data")
    app.mount("/", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")

    logger.debug("Serving data file %s", settings.data_file)
    return app


app = create_app()
