# api/schemas/base.py
from datetime import date
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from markupsafe import Markup, escape
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import PydanticCustomError
from starlette.datastructures import FormData

from core.sa.models import MAX_ID


class FormSchema(BaseModel):
    """Base schema for HTML form submissions.

    Whitespace is trimmed from every string field and fields the form does
    not declare are rejected.
    """
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, validate_default=True)


FormT = TypeVar("FormT", bound=FormSchema)


def require_text(
    value: str,
    message: str,
    min_length: int = 1,
    max_length: Optional[int] = None,
    max_message: Optional[str] = None,
) -> Markup:
    """Check the length of an already trimmed value and HTML-escape it"""
    if len(value) < min_length:
        raise PydanticCustomError("required", message)
    if max_length is not None and len(value) > max_length:
        raise PydanticCustomError("too_long", max_message or message)
    return escape(value)


def require_alphanumeric(value: str, message: str) -> str:
    if not value.isalnum():
        raise PydanticCustomError("not_alphanumeric", message)
    return value


def optional_date(value: Any, message: str) -> Optional[date]:
    """Parse an ISO date, treating falsy values as unset"""
    if not value:
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise PydanticCustomError("invalid_date", message)


def required_id(value: Any, message: str, invalid_message: Optional[str] = None) -> int:
    """Coerce a submitted reference to an integer id"""
    if isinstance(value, int) and value <= MAX_ID:
        return value
    if value is None or not str(value).strip():
        raise PydanticCustomError("required", message)
    try:
        value = int(str(value).strip())
    except ValueError:
        raise PydanticCustomError("invalid_id", invalid_message or message)
    if value > MAX_ID:
        raise PydanticCustomError("invalid_id", invalid_message or message)
    return value


def ensure_list(value: Any) -> List[Any]:
    """Normalize a multi-value field: absent -> [], scalar -> [scalar], list unchanged"""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def form_to_dict(form: FormData) -> Dict[str, Any]:
    """Flatten submitted form data.

    A field submitted once becomes a scalar, a field submitted several
    times becomes a list.
    """
    data: Dict[str, Any] = {}
    for key in form.keys():
        values = form.getlist(key)
        data[key] = values[0] if len(values) == 1 else values
    return data


def sanitize_values(data: Dict[str, Any], multi_fields: Tuple[str, ...] = ()) -> Dict[str, Any]:
    """Trimmed and escaped copy of the submitted values, for re-rendering a form.

    Fields named in multi_fields keep every submitted value; any other field
    submitted more than once keeps only its first value.
    """
    values: Dict[str, Any] = {}
    for key, value in data.items():
        if key in multi_fields:
            values[key] = [escape(str(item).strip()) for item in ensure_list(value)]
        elif isinstance(value, list):
            values[key] = escape(str(value[0]).strip()) if value else ""
        else:
            values[key] = escape(str(value).strip())
    return values


def form_errors(exc: ValidationError, data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Convert a pydantic ValidationError into per-field form errors"""
    errors = []
    for error in exc.errors():
        param = str(error["loc"][0]) if error["loc"] else ""
        errors.append({
            "msg": error["msg"],
            "param": param,
            "value": data.get(param, ""),
            "location": "body",
        })
    return errors


def validate_form(
    schema: Type[FormT], data: Dict[str, Any]
) -> Tuple[Optional[FormT], List[Dict[str, Any]]]:
    """Validate submitted form data against a schema.

    Returns:
        Tuple of (validated form or None, list of errors)
    """
    try:
        return schema.model_validate(data), []
    except ValidationError as exc:
        return None, form_errors(exc, data)
