"""
Persistence adapters.

Services depend on the store in this package rather than touching the JSON
file themselves.
"""
