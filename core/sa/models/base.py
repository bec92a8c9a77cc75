# core/sa/models/base.py
from datetime import date, datetime, UTC
from markupsafe import Markup
from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, mapped_column, Mapped
from sqlalchemy.types import TypeDecorator

# Largest value an INTEGER primary key can hold
MAX_ID = 2**63 - 1

class Base(DeclarativeBase):
    """Base class for all models"""
    pass

class TimestampMixin:
    """Mixin to add created_at and updated_at columns"""
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))

class EscapedString(TypeDecorator):
    """String column holding HTML-escaped text.

    Values are escaped before they are written, so they are loaded back as
    Markup and templates render them without escaping a second time.
    Escaping can grow text several times over, so the column is unbounded
    and lengths are checked on the raw input by the form schemas.
    """
    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Markup(value)

def format_date(value: date | None) -> str:
    """Format a date like 'Jan 5, 2024', or '' when unset"""
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"
