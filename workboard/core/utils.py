"""
Utility helpers shared across routers.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import HTTPException, Request

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _reject_constant(name: str) -> Any:
    # NaN/Infinity cannot be rendered back by JSONResponse
    raise ValueError(f"Unsupported JSON constant {name}")


async def read_payload(request: Request) -> Any:
    """
    Decode the request body as JSON or as a submitted form.

    An empty body is treated as an empty object; anything else that does not
    parse as strict JSON is rejected with 400. Uploaded files in a multipart
    form are not stored.
    """
    content_type = (request.headers.get("content-type") or "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        payload = {}
        for key, value in form.items():
            if isinstance(value, str):
                payload[key] = value
            else:
                logger.debug("Ignoring uploaded file field %r on %s", key, request.url.path)
        return payload
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise HTTPException(400, "Invalid JSON body")
