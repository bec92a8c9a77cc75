from .author import AuthorRepository
from .book import BookRepository
from .book_instance import BookInstanceRepository
from .genre import GenreRepository, DuplicateGenreError

__all__ = [
    'AuthorRepository',
    'BookRepository',
    'BookInstanceRepository',
    'GenreRepository',
    'DuplicateGenreError',
]
