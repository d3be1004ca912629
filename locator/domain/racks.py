"""Domain helpers for rack codes, map coordinates and search records."""
from __future__ import annotations

import math
from typing import Any, Mapping, Optional

UNKNOWN_RACK_CODE = "-"


def normalize_rack_code(value: Any) -> str:
    """Trim and upper-case a rack code; None becomes an empty string."""
    if value is None:
        return ""
    return str(value).strip().upper()


def parse_coordinate(value: Any) -> Optional[int | float]:
    """
    Parse a map coordinate from JSON/form input.

    Returns None when the value is missing, not numeric or not finite.
    Integral values come back as int so that 120.0 is stored as 120.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if isinstance(number, float):
        if not math.isfinite(number):
            return None
        if number.is_integer():
            return int(number)
    return number


def find_rack(racks: list, *, rack_id: Any = None, code: str | None = None) -> Optional[dict]:
    """Linear scan for a rack by id or by normalized code."""
    for rack in racks:
        if not isinstance(rack, dict):
            continue
        if code is not None:
            if normalize_rack_code(rack.get("code")) == code:
                return rack
        elif rack_id is not None and rack.get("id") == rack_id:
            return rack
    return None


def item_matches(item: Mapping[str, Any], query: str) -> bool:
    """True when the normalized query is a substring of the item name or code."""
    name = str(item.get("name") or "").lower()
    code = str(item.get("code") or "").lower()
    return query in name or query in code


def search_record(item: Mapping[str, Any], rack: Optional[Mapping[str, Any]]) -> dict:
    return {
        "id": item.get("id"),
        "name": item.get("name"),
        "code": item.get("code"),
        "rackId": item.get("rackId"),
        "rackCode": rack.get("code") if rack else UNKNOWN_RACK_CODE,
        "rackX": rack.get("x") if rack else None,
        "rackY": rack.get("y") if rack else None,
    }
