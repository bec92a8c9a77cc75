# api/schemas/author.py
from datetime import date
from typing import Optional

from pydantic import field_validator

from .base import FormSchema, optional_date, require_alphanumeric, require_text


class AuthorForm(FormSchema):
    first_name: str = ""
    family_name: str = ""
    date_of_birth: Optional[date] = None
    date_of_death: Optional[date] = None

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, value: str) -> str:
        value = require_text(
            value,
            "First name must be specified.",
            max_length=100,
            max_message="First name must not exceed 100 characters.",
        )
        return require_alphanumeric(value, "First name has non-alphanumeric characters.")

    @field_validator("family_name")
    @classmethod
    def validate_family_name(cls, value: str) -> str:
        value = require_text(
            value,
            "Family name must be specified.",
            max_length=100,
            max_message="Family name must not exceed 100 characters.",
        )
        return require_alphanumeric(value, "Family name has non-alphanumeric characters.")

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def validate_date_of_birth(cls, value):
        return optional_date(value, "Invalid date of birth")

    @field_validator("date_of_death", mode="before")
    @classmethod
    def validate_date_of_death(cls, value):
        return optional_date(value, "Invalid date of death")
