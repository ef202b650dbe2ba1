from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from workboard.core.utils import read_payload
from workboard.services.auth_service import AuthService, InvalidCredentialsError

router = APIRouter(prefix="/api", tags=["auth"])
auth_service = AuthService()


@router.post("/login")
def login(payload: Any = Depends(read_payload)):
    body = payload if isinstance(payload, dict) else {}
    try:
        result = auth_service.login(body.get("username"), body.get("password"))
    except InvalidCredentialsError as exc:
        return JSONResponse({"success": False, "message": str(exc)}, status_code=401)
    return {
        "success": True,
        "message": "Login successful",
        "token": result.token,
        "username": result.username,
    }
