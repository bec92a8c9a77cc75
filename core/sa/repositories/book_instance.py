# core/sa/repositories/book_instance.py
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from ..models import Book, BookInstance, LoanStatus, MAX_ID

class BookInstanceRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, instance_id: int) -> Optional[BookInstance]:
        """Get a copy by ID with its book loaded"""
        if instance_id > MAX_ID:
            return None
        return (
            self.session.query(BookInstance)
            .filter(BookInstance.id == instance_id)
            .options(joinedload(BookInstance.book))
            .first()
        )

    def list_instances(self) -> List[BookInstance]:
        """Get all copies ordered by the title of their book"""
        return (
            self.session.query(BookInstance)
            .join(BookInstance.book)
            .options(joinedload(BookInstance.book))
            .order_by(Book.title, BookInstance.id)
            .all()
        )

    def count_instances(self, status: Optional[LoanStatus] = None) -> int:
        """Count copies, optionally only those with a given status"""
        query = self.session.query(BookInstance)
        if status is not None:
            query = query.filter(BookInstance.status == status.value)
        return query.count()

    def create_instance(
        self,
        book_id: int,
        imprint: str,
        status: LoanStatus = LoanStatus.MAINTENANCE,
        due_back: Optional[date] = None
    ) -> BookInstance:
        instance = BookInstance(
            book_id=book_id,
            imprint=imprint,
            status=status.value,
            due_back=due_back or date.today()
        )
        self.session.add(instance)
        self.session.commit()
        return instance

    def update_instance(
        self,
        instance_id: int,
        book_id: int,
        imprint: str,
        status: LoanStatus,
        due_back: Optional[date] = None
    ) -> Optional[BookInstance]:
        """Replace every editable field of a copy. Returns None if it does not exist."""
        instance = self.get_by_id(instance_id)
        if not instance:
            return None

        instance.book_id = book_id
        instance.imprint = imprint
        instance.status = status.value
        instance.due_back = due_back or date.today()

        self.session.commit()
        return instance

    def delete_instance(self, instance_id: int) -> bool:
        instance = self.get_by_id(instance_id)
        if not instance:
            return False

        self.session.delete(instance)
        self.session.commit()
        return True
