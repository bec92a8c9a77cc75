# api/routes/books.py

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from api.dependencies import submitted_form, submitted_id
from api.schemas import BookForm, sanitize_values, validate_form
from api.schemas.base import ensure_list
from api.templating import templates
from core.sa.database import get_db
from core.sa.repositories import AuthorRepository, BookRepository, GenreRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["books"])

BOOK_LIST_URL = "/catalog/books"


def _render_book_form(
    request: Request,
    db: Session,
    title: str,
    book: Any = None,
    selected_author: str = "",
    selected_genres: Optional[List[str]] = None,
    errors: Optional[List[Dict[str, Any]]] = None,
):
    """Render the book form with every author and genre to choose from.

    Selections are compared as id strings so that both a stored book and
    a re-submitted form mark the same options.
    """
    return templates.TemplateResponse(request, "book_form.html", {
        "title": title,
        "book": book,
        "authors": AuthorRepository(db).list_authors(),
        "genres": GenreRepository(db).list_genres(),
        "selected_author": selected_author,
        "selected_genres": selected_genres or [],
        "errors": errors or [],
    })


def _render_invalid_book_form(request, db, title, data, errors):
    values = sanitize_values(data, multi_fields=("genre",))
    return _render_book_form(
        request, db, title,
        book=values,
        selected_author=str(values.get("author", "")),
        selected_genres=[str(genre_id) for genre_id in ensure_list(values.get("genre"))],
        errors=errors,
    )


def _reference_errors(db: Session, form: BookForm) -> List[Dict[str, Any]]:
    """Check that the submitted author and genres exist"""
    errors = []
    if AuthorRepository(db).get_by_id(form.author) is None:
        errors.append({"msg": "Author does not exist.", "param": "author", "value": form.author, "location": "body"})

    genre_repo = GenreRepository(db)
    for genre_id in form.genre:
        if genre_repo.get_by_id(genre_id) is None:
            errors.append({"msg": "Genre does not exist.", "param": "genre", "value": genre_id, "location": "body"})
    return errors


@router.get("/books")
def book_list(request: Request, db: Session = Depends(get_db)):
    """Display list of all books with their authors, sorted by title."""
    repo = BookRepository(db)
    return templates.TemplateResponse(request, "book_list.html", {
        "title": "Book List",
        "book_list": repo.list_books(),
    })


@router.get("/book/create")
def book_create_get(request: Request, db: Session = Depends(get_db)):
    return _render_book_form(request, db, "Create Book")


@router.post("/book/create")
def book_create_post(
    request: Request,
    data: Dict[str, Any] = Depends(submitted_form),
    db: Session = Depends(get_db)
):
    form, errors = validate_form(BookForm, data)
    if not errors:
        errors = _reference_errors(db, form)
    if errors:
        return _render_invalid_book_form(request, db, "Create Book", data, errors)

    repo = BookRepository(db)
    book = repo.create_book(
        title=form.title,
        author_id=form.author,
        summary=form.summary,
        isbn=form.isbn,
        genre_ids=form.genre,
    )
    logger.info(f"Created book {book.id}: {book.title}")
    return RedirectResponse(book.url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/book/{book_id:int}")
def book_detail(book_id: int, request: Request, db: Session = Depends(get_db)):
    """Display a book with its author, genres and copies."""
    repo = BookRepository(db)
    book = repo.get_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")

    return templates.TemplateResponse(request, "book_detail.html", {
        "title": book.title,
        "book": book,
        "book_instances": repo.get_instances(book_id),
    })


@router.get("/book/{book_id:int}/delete")
def book_delete_get(book_id: int, request: Request, db: Session = Depends(get_db)):
    repo = BookRepository(db)
    book = repo.get_by_id(book_id)
    if book is None:
        return RedirectResponse(BOOK_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)

    return templates.TemplateResponse(request, "book_delete.html", {
        "title": "Delete Book",
        "book": book,
        "book_instances": repo.get_instances(book_id),
    })


@router.post("/book/{book_id:int}/delete")
def book_delete_post(
    book_id: int,
    request: Request,
    data: Dict[str, Any] = Depends(submitted_form),
    db: Session = Depends(get_db)
):
    """
    Handle book delete on POST.

    A book that still has copies is kept and the confirmation page is shown
    again listing them.
    """
    repo = BookRepository(db)
    target_id = submitted_id(data, "bookid")
    book = repo.get_by_id(target_id) if target_id is not None else None
    if book is None:
        return RedirectResponse(BOOK_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)

    book_instances = repo.get_instances(book.id)
    if book_instances:
        logger.warning(f"Refusing to delete book {book.id}: {len(book_instances)} copies reference it")
        return templates.TemplateResponse(request, "book_delete.html", {
            "title": "Delete Book",
            "book": book,
            "book_instances": book_instances,
        })

    repo.delete_book(book.id)
    logger.info(f"Deleted book {target_id}")
    return RedirectResponse(BOOK_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/book/{book_id:int}/update")
def book_update_get(book_id: int, request: Request, db: Session = Depends(get_db)):
    repo = BookRepository(db)
    book = repo.get_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")

    return _render_book_form(
        request, db, "Update Book",
        book=book,
        selected_author=str(book.author_id),
        selected_genres=[str(genre.id) for genre in book.genres],
    )


@router.post("/book/{book_id:int}/update")
def book_update_post(
    book_id: int,
    request: Request,
    data: Dict[str, Any] = Depends(submitted_form),
    db: Session = Depends(get_db)
):
    repo = BookRepository(db)
    if repo.get_by_id(book_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")

    form, errors = validate_form(BookForm, data)
    if not errors:
        errors = _reference_errors(db, form)
    if errors:
        return _render_invalid_book_form(request, db, "Update Book", data, errors)

    book = repo.update_book(
        book_id,
        title=form.title,
        author_id=form.author,
        summary=form.summary,
        isbn=form.isbn,
        genre_ids=form.genre,
    )
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")

    logger.info(f"Updated book {book.id}")
    return RedirectResponse(book.url, status_code=status.HTTP_303_SEE_OTHER)
