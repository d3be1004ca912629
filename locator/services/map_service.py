"""Facility map metadata and rack markers."""

from __future__ import annotations

from dataclasses import dataclass, field

from locator.core.config import get_settings
from locator.repositories.json_storage import JsonStore
from locator.services.errors import ServiceUnavailableError


@dataclass
class MapInfo:
    company: str | None
    warehouse: str | None
    map_file: str
    racks: list = field(default_factory=list)


class MapService:
    def __init__(self, store: JsonStore | None = None, map_file: str | None = None) -> None:
        settings = get_settings()
        self.store = store or JsonStore(settings.data_file)
        self.map_file = map_file or settings.map_file

    def get_map(self) -> MapInfo:
        db = self.store.load()
        if db is None:
            raise ServiceUnavailableError()
        racks = db.get("racks")
        return MapInfo(
            company=db.get("company"),
            warehouse=db.get("warehouse"),
            map_file=self.map_file,
            racks=racks if isinstance(racks, list) else [],
        )
