from .base import form_to_dict, sanitize_values, validate_form
from .author import AuthorForm
from .book import BookForm
from .book_instance import BookInstanceForm
from .genre import GenreForm

__all__ = [
    'AuthorForm',
    'BookForm',
    'BookInstanceForm',
    'GenreForm',
    'form_to_dict',
    'sanitize_values',
    'validate_form',
]
