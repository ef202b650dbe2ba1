"""Dashboard HTML pages served straight from the web root."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from workboard.core.config import get_settings

router = APIRouter(prefix="", tags=["pages"])


def _page(name: str) -> FileResponse:
    path = get_settings().web_root / name
    if not path.is_file():
        raise HTTPException(404, "Page not found")
    return FileResponse(path, media_type="text/html")


@router.get("/")
def index():
    return _page("index.html")


@router.get("/login.html")
def login_page():
    return _page("login.html")


@router.get("/dashboard.html")
def dashboard_page():
    return _page("dashboard.html")
