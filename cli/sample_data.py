# cli/sample_data.py
"""Sample catalog used by `local-library db populate`."""
import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from api.schemas import AuthorForm, BookForm, BookInstanceForm, GenreForm, validate_form
from core.sa.repositories import (
    AuthorRepository, BookInstanceRepository, BookRepository, GenreRepository
)

logger = logging.getLogger(__name__)

AUTHORS: List[Dict[str, Any]] = [
    {"first_name": "Patrick", "family_name": "Rothfuss", "date_of_birth": "1973-06-06"},
    {"first_name": "Ben", "family_name": "Bova", "date_of_birth": "1932-11-08"},
    {"first_name": "Isaac", "family_name": "Asimov", "date_of_birth": "1920-01-02", "date_of_death": "1992-04-06"},
    {"first_name": "Bob", "family_name": "Billings"},
    {"first_name": "Jim", "family_name": "Jones", "date_of_birth": "1971-12-16"},
]

GENRES: List[str] = ["Fantasy", "Science Fiction", "French Poetry"]

# author and genre refer to positions in AUTHORS and GENRES
BOOKS: List[Dict[str, Any]] = [
    {
        "title": "The Name of the Wind (The Kingkiller Chronicle, #1)",
        "summary": "I have stolen princesses back from sleeping barrow kings. I burned down the town of Trebon. "
                   "I have spent the night with Felurian and left with both my sanity and my life.",
        "isbn": "9781473211896",
        "author": 0,
        "genre": [0],
    },
    {
        "title": "The Wise Man's Fear (The Kingkiller Chronicle, #2)",
        "summary": "Picking up the tale of Kvothe Kingkiller once again, we follow him into exile, "
                   "into political intrigue, courtship, adventure, love and magic.",
        "isbn": "9788401352836",
        "author": 0,
        "genre": [0],
    },
    {
        "title": "The Slow Regard of Silent Things (Kingkiller Chronicle)",
        "summary": "Deep below the University, there is a dark place. Few people know of it: "
                   "a broken web of ancient passageways and abandoned rooms.",
        "isbn": "9780756411336",
        "author": 0,
        "genre": [0],
    },
    {
        "title": "Apes and Angels",
        "summary": "Humankind headed out to the stars not for conquest, nor exploration, nor even for curiosity. "
                   "Humans went to the stars in a desperate crusade to save intelligent life wherever they found it.",
        "isbn": "9780765379528",
        "author": 1,
        "genre": [1],
    },
    {
        "title": "Death Wave",
        "summary": "In Ben Bova's previous novel New Earth, Jordan Kell led the first human mission beyond "
                   "the solar system.",
        "isbn": "9780765379504",
        "author": 1,
        "genre": [1],
    },
    {
        "title": "Test Book 1",
        "summary": "Summary of test book 1",
        "isbn": "ISBN111111",
        "author": 4,
        "genre": [0, 1],
    },
    {
        "title": "Test Book 2",
        "summary": "Summary of test book 2",
        "isbn": "ISBN222222",
        "author": 4,
        "genre": [],
    },
]

# book refers to positions in BOOKS
BOOK_INSTANCES: List[Dict[str, Any]] = [
    {"book": 0, "imprint": "London Gollancz, 2014.", "status": "Available"},
    {"book": 1, "imprint": "Gollancz, 2011.", "status": "Loaned"},
    {"book": 2, "imprint": "Gollancz, 2015."},
    {"book": 3, "imprint": "New York Tom Doherty Associates, 2016.", "status": "Available"},
    {"book": 3, "imprint": "New York Tom Doherty Associates, 2016.", "status": "Available"},
    {"book": 3, "imprint": "New York Tom Doherty Associates, 2016.", "status": "Available"},
    {"book": 4, "imprint": "New York, NY Tom Doherty Associates, LLC, 2015.", "status": "Available"},
    {"book": 4, "imprint": "New York, NY Tom Doherty Associates, LLC, 2015.", "status": "Maintenance"},
    {"book": 4, "imprint": "New York, NY Tom Doherty Associates, LLC, 2015.", "status": "Loaned"},
    {"book": 0, "imprint": "Imprint XXX2"},
    {"book": 1, "imprint": "Imprint XXX3"},
]


def _validated(schema, data: Dict[str, Any]):
    form, errors = validate_form(schema, data)
    if errors:
        raise ValueError(f"Invalid sample record {data}: {[error['msg'] for error in errors]}")
    return form


def populate(session: Session) -> Dict[str, int]:
    """Insert the sample catalog.

    Every record goes through the same form schemas as the web forms, so
    the stored text is sanitized exactly like user input.

    Returns:
        Number of records created per entity type
    """
    created = {"authors": 0, "genres": 0, "books": 0, "book_instances": 0}

    author_repo = AuthorRepository(session)
    authors = []
    for data in AUTHORS:
        form = _validated(AuthorForm, data)
        authors.append(author_repo.create_author(
            first_name=form.first_name,
            family_name=form.family_name,
            date_of_birth=form.date_of_birth,
            date_of_death=form.date_of_death,
        ))
        created["authors"] += 1

    genre_repo = GenreRepository(session)
    genres = []
    for name in GENRES:
        form = _validated(GenreForm, {"name": name})
        genre, was_created = genre_repo.get_or_create(form.name)
        genres.append(genre)
        if was_created:
            created["genres"] += 1

    book_repo = BookRepository(session)
    books = []
    for data in BOOKS:
        form = _validated(BookForm, {
            **data,
            "author": authors[data["author"]].id,
            "genre": [genres[index].id for index in data["genre"]],
        })
        books.append(book_repo.create_book(
            title=form.title,
            author_id=form.author,
            summary=form.summary,
            isbn=form.isbn,
            genre_ids=form.genre,
        ))
        created["books"] += 1

    instance_repo = BookInstanceRepository(session)
    for data in BOOK_INSTANCES:
        form = _validated(BookInstanceForm, {**data, "book": books[data["book"]].id})
        instance_repo.create_instance(
            book_id=form.book,
            imprint=form.imprint,
            status=form.status,
            due_back=form.due_back,
        )
        created["book_instances"] += 1

    logger.info(f"Populated sample catalog: {created}")
    return created
