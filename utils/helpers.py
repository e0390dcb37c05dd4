"""Helper utility functions."""

from datetime import datetime, timezone
from typing import Any, Dict
from fastapi import Request
from starlette.datastructures import UploadFile

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def utc_now() -> datetime:
    """Current time as a naive UTC datetime, the form dates are stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


async def read_payload(request: Request) -> Dict[str, Any]:
    """Read a request body as a flat mapping of unknown shape.

    JSON objects and HTML forms are accepted. Anything else, including
    malformed JSON or a JSON body that is not an object, reads as empty.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {
            key: value for key, value in form.items()
            if not isinstance(value, UploadFile)
        }

    body = await request.body()
    if not body:
        return {}
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
