# core/sa/models/book_instance.py
from datetime import date
from enum import Enum
from sqlalchemy import Date, ForeignKey, Integer, String, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, EscapedString, format_date

class LoanStatus(str, Enum):
    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"

class BookInstance(Base, TimestampMixin):
    """A single physical copy of a book"""
    __tablename__ = 'book_instance'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), nullable=False)
    imprint: Mapped[str] = mapped_column(EscapedString(), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=LoanStatus.MAINTENANCE.value)
    due_back: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)

    # Relationships
    book = relationship('Book', back_populates='instances')

    __table_args__ = (
        Index('idx_book_instance_book_id', 'book_id'),
        Index('idx_book_instance_status', 'status'),
    )

    @property
    def url(self) -> str:
        return f"/catalog/bookinstance/{self.id}"

    @property
    def due_back_formatted(self) -> str:
        return format_date(self.due_back)
