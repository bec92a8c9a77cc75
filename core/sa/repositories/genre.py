# core/sa/repositories/genre.py

import logging
from typing import List, Optional, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from core.sa.models import Genre, MAX_ID

logger = logging.getLogger(__name__)

class DuplicateGenreError(ValueError):
    """Raised when a genre would take a name that is already in use."""

    def __init__(self, name: str, existing: Optional[Genre] = None):
        super().__init__(f"Genre with name '{name}' already exists")
        self.name = name
        self.existing = existing

class GenreRepository:
    """Repository for managing Genre entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_by_id(self, genre_id: int) -> Optional[Genre]:
        if genre_id > MAX_ID:
            return None
        return self.session.get(Genre, genre_id)

    def get_by_name(self, name: str) -> Optional[Genre]:
        """Get a genre by its exact name.

        Args:
            name: The name of the genre to retrieve

        Returns:
            The Genre object if found, None otherwise
        """
        return self.session.query(Genre).filter(Genre.name == name).first()

    def list_genres(self) -> List[Genre]:
        """Get all genres ordered by name."""
        return self.session.query(Genre).order_by(Genre.name).all()

    def count_genres(self) -> int:
        return self.session.query(Genre).count()

    def get_or_create(self, name: str) -> Tuple[Genre, bool]:
        """Find a genre by name, creating it if it does not exist yet.

        The unique constraint on Genre.name decides between two concurrent
        creators: the loser rolls back and gets the winner's row.

        Args:
            name: The (sanitized) genre name

        Returns:
            Tuple of (genre, created)
        """
        existing = self.get_by_name(name)
        if existing:
            return existing, False

        genre = Genre(name=name)
        self.session.add(genre)
        try:
            self.session.commit()
            return genre, True
        except IntegrityError:
            self.session.rollback()
            existing = self.get_by_name(name)
            if existing is None:
                raise
            logger.warning(f"Genre '{name}' was created concurrently, using id {existing.id}")
            return existing, False

    def update_genre(self, genre_id: int, name: str) -> Optional[Genre]:
        """Rename a genre.

        Args:
            genre_id: The ID of the genre to update
            name: The new (sanitized) name

        Returns:
            The updated Genre object if found, None otherwise

        Raises:
            DuplicateGenreError: If another genre already has that name
        """
        genre = self.get_by_id(genre_id)
        if not genre:
            return None

        existing = self.get_by_name(name)
        if existing and existing.id != genre_id:
            raise DuplicateGenreError(name, existing)

        genre.name = name
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise DuplicateGenreError(name, self.get_by_name(name))
        return genre

    def delete_genre(self, genre_id: int) -> bool:
        """Delete a genre. Books tagged with it must be checked by the caller.

        Returns:
            True if the genre was deleted, False if not found
        """
        genre = self.get_by_id(genre_id)
        if not genre:
            return False

        self.session.delete(genre)
        self.session.commit()
        return True
