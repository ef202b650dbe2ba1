"""
FastAPI routers grouped by concern (entities, auth, pages).

Each module exposes an APIRouter (or a factory building one) that app.py
includes in the main application.
"""
