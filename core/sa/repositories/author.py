# core/sa/repositories/author.py
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session
from ..models import Author, Book, MAX_ID

class AuthorRepository:
    """Repository for managing Author entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_by_id(self, author_id: int) -> Optional[Author]:
        """Get an author by ID.

        Args:
            author_id: The ID of the author to retrieve

        Returns:
            The Author object if found, None otherwise
        """
        if author_id > MAX_ID:
            return None
        return self.session.get(Author, author_id)

    def list_authors(self) -> List[Author]:
        """Get all authors ordered by family name.

        Returns:
            List of Author objects sorted by family name, then first name
        """
        return (
            self.session.query(Author)
            .order_by(Author.family_name, Author.first_name)
            .all()
        )

    def get_books(self, author_id: int) -> List[Book]:
        """Get the books written by an author.

        Args:
            author_id: The ID of the author

        Returns:
            List of Book objects ordered by title
        """
        return (
            self.session.query(Book)
            .filter(Book.author_id == author_id)
            .order_by(Book.title)
            .all()
        )

    def count_authors(self) -> int:
        """Count all authors."""
        return self.session.query(Author).count()

    def create_author(
        self,
        first_name: str,
        family_name: str,
        date_of_birth: Optional[date] = None,
        date_of_death: Optional[date] = None
    ) -> Author:
        """Create a new author.

        Args:
            first_name: The author's first name (already sanitized)
            family_name: The author's family name (already sanitized)
            date_of_birth: Optional date of birth
            date_of_death: Optional date of death

        Returns:
            The created Author object
        """
        author = Author(
            first_name=first_name,
            family_name=family_name,
            date_of_birth=date_of_birth,
            date_of_death=date_of_death
        )
        self.session.add(author)
        self.session.commit()
        return author

    def update_author(
        self,
        author_id: int,
        first_name: str,
        family_name: str,
        date_of_birth: Optional[date] = None,
        date_of_death: Optional[date] = None
    ) -> Optional[Author]:
        """Replace every editable field of an existing author.

        Args:
            author_id: The ID of the author to update
            first_name: New first name
            family_name: New family name
            date_of_birth: New date of birth, None clears it
            date_of_death: New date of death, None clears it

        Returns:
            The updated Author object if found, None otherwise
        """
        author = self.get_by_id(author_id)
        if not author:
            return None

        author.first_name = first_name
        author.family_name = family_name
        author.date_of_birth = date_of_birth
        author.date_of_death = date_of_death

        self.session.commit()
        return author

    def delete_author(self, author_id: int) -> bool:
        """Delete an author.

        Callers must check get_books() first: authors with books are
        protected by a foreign key.

        Args:
            author_id: The ID of the author to delete

        Returns:
            True if the author was deleted, False if not found
        """
        author = self.get_by_id(author_id)
        if not author:
            return False

        self.session.delete(author)
        self.session.commit()
        return True
