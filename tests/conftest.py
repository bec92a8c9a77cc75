# tests/conftest.py
import sys
import pytest
from datetime import date
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from api.main import app
from core.sa.database import Database, get_db
from core.sa.models import Author, Book, BookInstance, Genre, LoanStatus

@pytest.fixture
def database(tmp_path):
    """Create a fresh SQLite database file for each test"""
    db = Database(f"sqlite:///{tmp_path / 'test_library.db'}")
    db.init_db()
    yield db
    db.engine.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def client(database):
    """TestClient whose requests use the test database"""
    def override_get_db():
        session = database.get_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

@pytest.fixture
def sample_author(db_session):
    """Create a sample author for testing."""
    author = Author(
        first_name="Patrick",
        family_name="Rothfuss",
        date_of_birth=date(1973, 6, 6)
    )
    db_session.add(author)
    db_session.commit()
    return author

@pytest.fixture
def sample_genre(db_session):
    """Create a sample genre for testing."""
    genre = Genre(name="Fantasy")
    db_session.add(genre)
    db_session.commit()
    return genre

@pytest.fixture
def sample_book(db_session, sample_author, sample_genre):
    """Create a sample book by sample_author tagged with sample_genre."""
    book = Book(
        title="The Name of the Wind",
        author=sample_author,
        summary="The tale of Kvothe.",
        isbn="9781473211896",
        genres=[sample_genre]
    )
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def sample_book_instance(db_session, sample_book):
    """Create a loaned copy of sample_book."""
    book_instance = BookInstance(
        book=sample_book,
        imprint="London Gollancz, 2014.",
        status=LoanStatus.LOANED.value,
        due_back=date(2024, 1, 5)
    )
    db_session.add(book_instance)
    db_session.commit()
    return book_instance
