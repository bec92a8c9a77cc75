# core/sa/models/genre.py
from sqlalchemy import Integer
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, EscapedString

class Genre(Base, TimestampMixin):
    __tablename__ = 'genre'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(EscapedString(), nullable=False, unique=True)

    # Convenience relationship
    books = relationship('Book', secondary='book_genre', back_populates='genres')

    @property
    def url(self) -> str:
        return f"/catalog/genre/{self.id}"
