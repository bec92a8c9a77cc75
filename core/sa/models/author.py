# core/sa/models/author.py
from datetime import date
from markupsafe import Markup
from sqlalchemy import Date, Integer, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, EscapedString, format_date

class Author(Base, TimestampMixin):
    __tablename__ = 'author'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(EscapedString(), nullable=False)
    family_name: Mapped[str] = mapped_column(EscapedString(), nullable=False)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    date_of_death: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Relationships
    books = relationship('Book', back_populates='author')

    __table_args__ = (
        Index('idx_author_family_name', 'family_name'),
    )

    @property
    def name(self) -> str:
        """Full name as 'family_name, first_name', or '' when either part is missing"""
        if not self.first_name or not self.family_name:
            return ""
        return Markup("{}, {}").format(self.family_name, self.first_name)

    @property
    def url(self) -> str:
        return f"/catalog/author/{self.id}"

    @property
    def date_of_birth_formatted(self) -> str:
        return format_date(self.date_of_birth)

    @property
    def date_of_death_formatted(self) -> str:
        return format_date(self.date_of_death)

    @property
    def lifespan(self) -> str:
        if not self.date_of_birth and not self.date_of_death:
            return ""
        return f"{self.date_of_birth_formatted} - {self.date_of_death_formatted}"
