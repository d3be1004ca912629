"""Item search: substring filter over items joined to their racks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from locator.core.config import get_settings
from locator.domain.racks import find_rack, item_matches, search_record
from locator.repositories.json_storage import JsonStore
from locator.services.errors import ServiceUnavailableError

EMPTY_QUERY_MESSAGE = "Empty query"


@dataclass
class SearchResult:
    query: str
    results: list = field(default_factory=list)
    message: Optional[str] = None

    @property
    def total(self) -> int:
        return len(self.results)


class SearchService:
    def __init__(self, store: JsonStore | None = None) -> None:
        self.store = store or JsonStore(get_settings().data_file)

    def normalize(self, value: str | None) -> str:
        return (value or "").strip().lower()

    def search(self, query: str | None) -> SearchResult:
        q = self.normalize(query)
        if not q:
            return SearchResult(query="", message=EMPTY_QUERY_MESSAGE)

        db = self.store.load()
        if db is None:
            raise ServiceUnavailableError()

        items = db.get("items")
        racks = db.get("racks")
        if not isinstance(items, list):
            items = []
        if not isinstance(racks, list):
            racks = []
        results = [
            search_record(item, find_rack(racks, rack_id=item.get("rackId")))
            for item in items
            if isinstance(item, dict) and item_matches(item, q)
        ]
        return SearchResult(query=q, results=results)
