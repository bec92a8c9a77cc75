# api/schemas/genre.py
from pydantic import field_validator

from .base import FormSchema, require_text


class GenreForm(FormSchema):
    name: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return require_text(
            value,
            "Genre name must contain at least 3 characters",
            min_length=3,
            max_length=100,
            max_message="Genre name must not exceed 100 characters",
        )
