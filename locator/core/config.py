"""
Configuration helpers for the locator backend.

Exposes a Settings object that reads environment variables (storage paths,
static asset folders, branding, logging) so that routers/services do not fetch
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_file: Path
    frontend_dir: Path
    maps_dir: Path
    map_file: str
    company_name: str
    service_name: str
    log_level: str
    log_file: str
    max_body_bytes: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _path(value: str | None, default: Path) -> Path:
        value = (value or "").strip()
        return Path(value).expanduser().resolve() if value else default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        data_file=_path(os.getenv("DATA_FILE"), ROOT_DIR / "data" / "db.json"),
        frontend_dir=_path(os.getenv("FRONTEND_DIR"), ROOT_DIR / "frontend"),
        maps_dir=_path(os.getenv("MAPS_DIR"), ROOT_DIR / "maps"),
        map_file=os.getenv("MAP_FILE", "/maps/warehouse.svg"),
        company_name=os.getenv("COMPANY_NAME", "PT Granitoguna Building Ceramics"),
        service_name=os.getenv("SERVICE_NAME", "Warehouse Locator API"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE", ""),
        max_body_bytes=_int(os.getenv("MAX_BODY_BYTES", str(2 * 1024 * 1024)), 2 * 1024 * 1024),
    )
