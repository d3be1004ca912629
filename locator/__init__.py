"""Warehouse sparepart locator: item search and rack markers over a JSON file."""
