"""
FastAPI routers grouped by use case (health, search, map, admin).

Each module exposes an APIRouter that the application factory includes, and
looks up its service on ``request.app.state``.
"""
