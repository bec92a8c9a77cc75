# api/routes/catalog.py

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from api.templating import templates
from core.sa.database import get_db
from core.sa.models import LoanStatus
from core.sa.repositories import (
    AuthorRepository, BookInstanceRepository, BookRepository, GenreRepository
)

router = APIRouter(tags=["catalog"])


@router.get("/")
def index(request: Request, db: Session = Depends(get_db)):
    """Landing page with a count of every record type."""
    instance_repo = BookInstanceRepository(db)
    data = {
        "book_count": BookRepository(db).count_books(),
        "book_instance_count": instance_repo.count_instances(),
        "book_instance_available_count": instance_repo.count_instances(LoanStatus.AVAILABLE),
        "author_count": AuthorRepository(db).count_authors(),
        "genre_count": GenreRepository(db).count_genres(),
    }
    return templates.TemplateResponse(request, "index.html", {
        "title": "Local Library Home",
        "data": data,
    })
