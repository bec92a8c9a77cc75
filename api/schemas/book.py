# api/schemas/book.py
from typing import List, Optional

from pydantic import field_validator

from .base import FormSchema, ensure_list, require_text, required_id


class BookForm(FormSchema):
    title: str = ""
    author: Optional[int] = None
    summary: str = ""
    isbn: str = ""
    genre: List[int] = []

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return require_text(
            value,
            "Title must not be empty.",
            max_length=255,
            max_message="Title must not exceed 255 characters.",
        )

    @field_validator("summary")
    @classmethod
    def validate_summary(cls, value: str) -> str:
        return require_text(value, "Summary must not be empty.")

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, value: str) -> str:
        return require_text(
            value,
            "ISBN must not be empty",
            max_length=32,
            max_message="ISBN must not exceed 32 characters",
        )

    @field_validator("author", mode="before")
    @classmethod
    def validate_author(cls, value):
        return required_id(value, "Author must not be empty.", "Invalid author.")

    @field_validator("genre", mode="before")
    @classmethod
    def validate_genre(cls, value):
        # Checkbox groups arrive absent, as one value, or as several
        genre_ids = []
        for item in ensure_list(value):
            genre_id = required_id(item, "Invalid genre.")
            if genre_id not in genre_ids:
                genre_ids.append(genre_id)
        return genre_ids
