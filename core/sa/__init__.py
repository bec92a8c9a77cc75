# core/sa/__init__.py
from .database import Database
from .models import (
    Base, Author, Book, Genre, BookInstance,
    LoanStatus, book_genre
)

__all__ = [
    'Database',
    'Base',
    'Author',
    'Book',
    'Genre',
    'BookInstance',
    'LoanStatus',
    'book_genre'
]
