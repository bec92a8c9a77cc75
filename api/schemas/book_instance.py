# api/schemas/book_instance.py
from datetime import date
from typing import Optional

from pydantic import field_validator
from pydantic_core import PydanticCustomError

from core.sa.models import LoanStatus
from .base import FormSchema, optional_date, require_text, required_id


class BookInstanceForm(FormSchema):
    book: Optional[int] = None
    imprint: str = ""
    status: LoanStatus = LoanStatus.MAINTENANCE
    due_back: Optional[date] = None

    @field_validator("book", mode="before")
    @classmethod
    def validate_book(cls, value):
        return required_id(value, "Book must be specified", "Invalid book.")

    @field_validator("imprint")
    @classmethod
    def validate_imprint(cls, value: str) -> str:
        return require_text(
            value,
            "Imprint must be specified",
            max_length=255,
            max_message="Imprint must not exceed 255 characters",
        )

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, value):
        if isinstance(value, LoanStatus):
            return value
        if value is None or value == "":
            return LoanStatus.MAINTENANCE
        try:
            return LoanStatus(str(value).strip())
        except ValueError:
            raise PydanticCustomError("invalid_status", "Invalid status")

    @field_validator("due_back", mode="before")
    @classmethod
    def validate_due_back(cls, value):
        return optional_date(value, "Invalid date")
