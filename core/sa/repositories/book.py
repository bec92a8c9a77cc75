# core/sa/repositories/book.py
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload, selectinload
from ..models import Book, BookInstance, Genre, MAX_ID

class BookRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book by ID with its author and genres loaded"""
        if book_id > MAX_ID:
            return None
        return (
            self.session.query(Book)
            .filter(Book.id == book_id)
            .options(
                joinedload(Book.author),
                selectinload(Book.genres)
            )
            .first()
        )

    def list_books(self) -> List[Book]:
        """Get all books ordered by title, with authors loaded"""
        return (
            self.session.query(Book)
            .options(joinedload(Book.author))
            .order_by(Book.title)
            .all()
        )

    def get_books_by_genre(self, genre_id: int) -> List[Book]:
        """Get all books tagged with a genre"""
        return (
            self.session.query(Book)
            .join(Book.genres)
            .filter(Genre.id == genre_id)
            .order_by(Book.title)
            .all()
        )

    def get_instances(self, book_id: int) -> List[BookInstance]:
        """Get every copy of a book"""
        return (
            self.session.query(BookInstance)
            .filter(BookInstance.book_id == book_id)
            .order_by(BookInstance.id)
            .all()
        )

    def count_books(self) -> int:
        return self.session.query(Book).count()

    def _get_genres(self, genre_ids: List[int]) -> List[Genre]:
        if not genre_ids:
            return []
        return self.session.query(Genre).filter(Genre.id.in_(genre_ids)).all()

    def create_book(
        self,
        title: str,
        author_id: int,
        summary: str,
        isbn: str,
        genre_ids: Optional[List[int]] = None
    ) -> Book:
        """Create a new book and attach its genres"""
        book = Book(
            title=title,
            author_id=author_id,
            summary=summary,
            isbn=isbn,
            genres=self._get_genres(genre_ids or [])
        )
        self.session.add(book)
        self.session.commit()
        return book

    def update_book(
        self,
        book_id: int,
        title: str,
        author_id: int,
        summary: str,
        isbn: str,
        genre_ids: Optional[List[int]] = None
    ) -> Optional[Book]:
        """Replace every editable field of a book, genres included.

        Returns None if the book does not exist.
        """
        book = self.get_by_id(book_id)
        if not book:
            return None

        book.title = title
        book.author_id = author_id
        book.summary = summary
        book.isbn = isbn
        book.genres = self._get_genres(genre_ids or [])

        self.session.commit()
        return book

    def delete_book(self, book_id: int) -> bool:
        """Delete a book. Copies must be removed first."""
        book = self.get_by_id(book_id)
        if not book:
            return False

        self.session.delete(book)
        self.session.commit()
        return True
