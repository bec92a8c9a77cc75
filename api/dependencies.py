# api/dependencies.py
from typing import Any, Dict, Optional

from fastapi import Request

from api.schemas import form_to_dict
from core.sa.models import MAX_ID


async def submitted_form(request: Request) -> Dict[str, Any]:
    """FastAPI dependency returning the url-encoded request body as a dict.

    Lets the route functions stay synchronous while the body is read on the
    event loop.
    """
    return form_to_dict(await request.form())


def submitted_id(data: Dict[str, Any], key: str) -> Optional[int]:
    """Read an integer id from a submitted form, None if missing or malformed"""
    value = data.get(key)
    if isinstance(value, list) or value is None:
        return None
    try:
        value = int(str(value).strip())
    except ValueError:
        return None
    return value if value <= MAX_ID else None
