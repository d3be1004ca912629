"""
Use cases for the locator API.

Each service orchestrates the JSON store to implement one operation (search,
map listing, rack upsert). Routers call these services instead of touching
the data file directly.
"""
