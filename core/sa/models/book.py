# core/sa/models/book.py
from sqlalchemy import Column, ForeignKey, Integer, Table, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, EscapedString

book_genre = Table(
    'book_genre',
    Base.metadata,
    Column('book_id', ForeignKey('book.id', ondelete='CASCADE'), primary_key=True),
    Column('genre_id', ForeignKey('genre.id'), primary_key=True),
)

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(EscapedString(), nullable=False)
    author_id: Mapped[int] = mapped_column(ForeignKey('author.id'), nullable=False)
    summary: Mapped[str] = mapped_column(EscapedString(), nullable=False)
    isbn: Mapped[str] = mapped_column(EscapedString(), nullable=False)

    # Relationships
    author = relationship('Author', back_populates='books')
    genres = relationship('Genre', secondary=book_genre, back_populates='books', order_by='Genre.name')
    instances = relationship('BookInstance', back_populates='book')

    __table_args__ = (
        Index('idx_book_title', 'title'),
        Index('idx_book_author_id', 'author_id'),
    )

    @property
    def url(self) -> str:
        return f"/catalog/book/{self.id}"
