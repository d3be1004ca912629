#!/usr/bin/env python3
"""
Place or move a rack marker directly in the data file.

Usage:
  python scripts/set_rack.py --code A01 --x 120 --y 250 [--data data/db.json]
"""
from __future__ import annotations

import argparse
import sys

from locator.core.config import get_settings
from locator.core.logging_config import setup_logging
from locator.repositories.json_storage import JsonStore
from locator.services.errors import LocatorError
from locator.services.rack_service import RackService


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Create or move a rack marker")
    ap.add_argument("--code", required=True, help="Rack code (e.g. A01)")
    ap.add_argument("--x", required=True, help="X coordinate on the facility map")
    ap.add_argument("--y", required=True, help="Y coordinate on the facility map")
    ap.add_argument("--data", help="Path to db.json (default: DATA_FILE setting)")
    args = ap.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)
    svc = RackService(JsonStore(args.data or settings.data_file))
    try:
        result = svc.upsert_rack(args.code, args.x, args.y)
    except LocatorError as exc:
        sys.stderr.write(f"Error: {exc.message}\n")
        return 1

    rack = result.rack
    print(f"OK: {result.message}")
    print(f"  ID: {rack['id']}")
    print(f"  Position: ({rack['x']}, {rack['y']})")
    print(f"  {'Created' if result.created else 'Updated'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
