# core/sa/models/__init__.py
from .base import Base, TimestampMixin, EscapedString, MAX_ID
from .author import Author
from .genre import Genre
from .book import Book, book_genre
from .book_instance import BookInstance, LoanStatus

__all__ = [
    'Base',
    'TimestampMixin',
    'EscapedString',
    'MAX_ID',
    'Author',
    'Genre',
    'Book',
    'book_genre',
    'BookInstance',
    'LoanStatus',
]
