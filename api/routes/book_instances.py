# api/routes/book_instances.py

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from markupsafe import Markup
from sqlalchemy.orm import Session

from api.dependencies import submitted_form, submitted_id
from api.schemas import BookInstanceForm, sanitize_values, validate_form
from api.templating import templates
from core.sa.database import get_db
from core.sa.models import LoanStatus
from core.sa.repositories import BookInstanceRepository, BookRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bookinstances"])

BOOK_INSTANCE_LIST_URL = "/catalog/bookinstances"


def _render_instance_form(
    request: Request,
    db: Session,
    title: str,
    book_instance: Any = None,
    selected_book: str = "",
    errors: Optional[List[Dict[str, Any]]] = None,
):
    return templates.TemplateResponse(request, "bookinstance_form.html", {
        "title": title,
        "book_instance": book_instance,
        "book_list": BookRepository(db).list_books(),
        "selected_book": selected_book,
        "statuses": [loan_status.value for loan_status in LoanStatus],
        "errors": errors or [],
    })


def _validate_instance(db: Session, data: Dict[str, Any]):
    form, errors = validate_form(BookInstanceForm, data)
    if not errors and BookRepository(db).get_by_id(form.book) is None:
        errors = [{"msg": "Book does not exist.", "param": "book", "value": form.book, "location": "body"}]
    return form, errors


def _render_invalid_instance_form(request, db, title, data, errors):
    values = sanitize_values(data)
    return _render_instance_form(
        request, db, title,
        book_instance=values,
        selected_book=str(values.get("book", "")),
        errors=errors,
    )


@router.get("/bookinstances")
def bookinstance_list(request: Request, db: Session = Depends(get_db)):
    """Display every copy with its book, sorted by book title."""
    repo = BookInstanceRepository(db)
    return templates.TemplateResponse(request, "bookinstance_list.html", {
        "title": "Book Instance List",
        "bookinstance_list": repo.list_instances(),
    })


@router.get("/bookinstance/create")
def bookinstance_create_get(request: Request, db: Session = Depends(get_db)):
    return _render_instance_form(request, db, "Create BookInstance")


@router.post("/bookinstance/create")
def bookinstance_create_post(
    request: Request,
    data: Dict[str, Any] = Depends(submitted_form),
    db: Session = Depends(get_db)
):
    form, errors = _validate_instance(db, data)
    if errors:
        return _render_invalid_instance_form(request, db, "Create BookInstance", data, errors)

    repo = BookInstanceRepository(db)
    book_instance = repo.create_instance(
        book_id=form.book,
        imprint=form.imprint,
        status=form.status,
        due_back=form.due_back,
    )
    logger.info(f"Created copy {book_instance.id} of book {book_instance.book_id}")
    return RedirectResponse(book_instance.url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/bookinstance/{bookinstance_id:int}")
def bookinstance_detail(bookinstance_id: int, request: Request, db: Session = Depends(get_db)):
    repo = BookInstanceRepository(db)
    book_instance = repo.get_by_id(bookinstance_id)
    if book_instance is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book copy not found")

    return templates.TemplateResponse(request, "bookinstance_detail.html", {
        "title": Markup("Copy: {}").format(book_instance.book.title),
        "book_instance": book_instance,
    })


@router.get("/bookinstance/{bookinstance_id:int}/delete")
def bookinstance_delete_get(bookinstance_id: int, request: Request, db: Session = Depends(get_db)):
    repo = BookInstanceRepository(db)
    book_instance = repo.get_by_id(bookinstance_id)
    if book_instance is None:
        return RedirectResponse(BOOK_INSTANCE_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)

    return templates.TemplateResponse(request, "bookinstance_delete.html", {
        "title": "Delete BookInstance",
        "book_instance": book_instance,
    })


@router.post("/bookinstance/{bookinstance_id:int}/delete")
def bookinstance_delete_post(
    bookinstance_id: int,
    data: Dict[str, Any] = Depends(submitted_form),
    db: Session = Depends(get_db)
):
    repo = BookInstanceRepository(db)
    target_id = submitted_id(data, "bookinstanceid")
    if target_id is not None and repo.delete_instance(target_id):
        logger.info(f"Deleted copy {target_id}")
    return RedirectResponse(BOOK_INSTANCE_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/bookinstance/{bookinstance_id:int}/update")
def bookinstance_update_get(bookinstance_id: int, request: Request, db: Session = Depends(get_db)):
    repo = BookInstanceRepository(db)
    book_instance = repo.get_by_id(bookinstance_id)
    if book_instance is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book copy not found")

    return _render_instance_form(
        request, db, "Update BookInstance",
        book_instance=book_instance,
        selected_book=str(book_instance.book_id),
    )


@router.post("/bookinstance/{bookinstance_id:int}/update")
def bookinstance_update_post(
    bookinstance_id: int,
    request: Request,
    data: Dict[str, Any] = Depends(submitted_form),
    db: Session = Depends(get_db)
):
    repo = BookInstanceRepository(db)
    if repo.get_by_id(bookinstance_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book copy not found")

    form, errors = _validate_instance(db, data)
    if errors:
        return _render_invalid_instance_form(request, db, "Update BookInstance", data, errors)

    book_instance = repo.update_instance(
        bookinstance_id,
        book_id=form.book,
        imprint=form.imprint,
        status=form.status,
        due_back=form.due_back,
    )
    if book_instance is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book copy not found")

    logger.info(f"Updated copy {book_instance.id}")
    return RedirectResponse(book_instance.url, status_code=status.HTTP_303_SEE_OTHER)
