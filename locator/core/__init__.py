"""
Core utilities shared across the locator service.

This package hosts configuration helpers (env vars, paths) and cross-cutting
concerns such as logging setup. Services and routers depend on these
primitives instead of reading os.environ directly.
"""
