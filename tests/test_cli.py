# tests/test_cli.py
import pytest
from click.testing import CliRunner

from cli.main import cli
from cli.sample_data import AUTHORS, BOOK_INSTANCES, BOOKS, GENRES
from core.sa.database import Database
from core.sa.models import Author, Book, BookInstance, Genre


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'cli_library.db'}"


@pytest.fixture
def runner():
    return CliRunner()


def test_db_init(runner, db_url):
    result = runner.invoke(cli, ['db', '--db-url', db_url, 'init'])
    assert result.exit_code == 0
    assert "Database initialized" in result.output


def test_db_populate(runner, db_url):
    result = runner.invoke(cli, ['db', '--db-url', db_url, 'populate'])
    assert result.exit_code == 0, result.output
    assert f"books: {len(BOOKS)}" in result.output

    database = Database(db_url)
    session = database.get_session()
    try:
        assert session.query(Author).count() == len(AUTHORS)
        assert session.query(Genre).count() == len(GENRES)
        assert session.query(Book).count() == len(BOOKS)
        assert session.query(BookInstance).count() == len(BOOK_INSTANCES)
        # Sample text is stored sanitized, like form input
        assert session.query(Book).filter(Book.title.contains("&#39;")).count() > 0
    finally:
        session.close()
        database.engine.dispose()


def test_db_populate_skips_non_empty_catalog(runner, db_url):
    runner.invoke(cli, ['db', '--db-url', db_url, 'populate'])
    result = runner.invoke(cli, ['db', '--db-url', db_url, 'populate'])
    assert result.exit_code == 0
    assert "skipping sample data" in result.output


def test_db_stats(runner, db_url):
    runner.invoke(cli, ['db', '--db-url', db_url, 'populate'])
    result = runner.invoke(cli, ['db', '--db-url', db_url, 'stats'])

    available = sum(1 for copy in BOOK_INSTANCES if copy.get("status") == "Available")
    assert result.exit_code == 0
    assert f"Books: {len(BOOKS)}" in result.output
    assert f"Copies: {len(BOOK_INSTANCES)}" in result.output
    assert f"Copies available: {available}" in result.output
    assert f"Genres: {len(GENRES)}" in result.output


def test_db_drop_requires_confirmation(runner, db_url):
    runner.invoke(cli, ['db', '--db-url', db_url, 'init'])
    result = runner.invoke(cli, ['db', '--db-url', db_url, 'drop'], input="n\n")
    assert "Aborted" in result.output


def test_db_drop(runner, db_url):
    runner.invoke(cli, ['db', '--db-url', db_url, 'populate'])
    result = runner.invoke(cli, ['db', '--db-url', db_url, 'drop', '--yes'])
    assert result.exit_code == 0
    assert "Database dropped" in result.output

    result = runner.invoke(cli, ['db', '--db-url', db_url, 'stats'])
    assert result.exit_code != 0


def test_db_populate_failure_rolls_back(runner, db_url, monkeypatch):
    def failing_populate(session):
        session.add(Genre(name="Partial"))
        session.flush()
        raise ValueError("sample data is broken")

    monkeypatch.setattr("cli.commands.db.populate_catalog", failing_populate)
    result = runner.invoke(cli, ['db', '--db-url', db_url, 'populate'])
    assert result.exit_code != 0
    assert "Error during populate: sample data is broken" in result.output

    database = Database(db_url)
    session = database.get_session()
    try:
        assert session.query(Genre).count() == 0
    finally:
        session.close()
        database.engine.dispose()
