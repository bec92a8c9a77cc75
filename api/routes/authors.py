# api/routes/authors.py

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from api.dependencies import submitted_form, submitted_id
from api.schemas import AuthorForm, sanitize_values, validate_form
from api.templating import templates
from core.sa.database import get_db
from core.sa.repositories import AuthorRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authors"])

AUTHOR_LIST_URL = "/catalog/authors"


@router.get("/authors")
def author_list(request: Request, db: Session = Depends(get_db)):
    """Display list of all authors, sorted by family name."""
    repo = AuthorRepository(db)
    return templates.TemplateResponse(request, "author_list.html", {
        "title": "Author List",
        "author_list": repo.list_authors(),
    })


@router.get("/author/create")
def author_create_get(request: Request):
    return templates.TemplateResponse(request, "author_form.html", {
        "title": "Create Author",
        "author": None,
        "errors": [],
    })


@router.post("/author/create")
def author_create_post(
    request: Request,
    data: Dict[str, Any] = Depends(submitted_form),
    db: Session = Depends(get_db)
):
    """
    Handle author create on POST.

    Invalid submissions re-render the form with the sanitized values and
    the error list; valid ones redirect to the new author's page.
    """
    form, errors = validate_form(AuthorForm, data)
    if errors:
        return templates.TemplateResponse(request, "author_form.html", {
            "title": "Create Author",
            "author": sanitize_values(data),
            "errors": errors,
        })

    repo = AuthorRepository(db)
    author = repo.create_author(
        first_name=form.first_name,
        family_name=form.family_name,
        date_of_birth=form.date_of_birth,
        date_of_death=form.date_of_death,
    )
    logger.info(f"Created author {author.id}: {author.name}")
    return RedirectResponse(author.url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/author/{author_id:int}")
def author_detail(author_id: int, request: Request, db: Session = Depends(get_db)):
    """Display detail page for a specific author with their books."""
    repo = AuthorRepository(db)
    author = repo.get_by_id(author_id)
    if author is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")

    return templates.TemplateResponse(request, "author_detail.html", {
        "title": "Author Detail",
        "author": author,
        "author_books": repo.get_books(author_id),
    })


@router.get("/author/{author_id:int}/delete")
def author_delete_get(author_id: int, request: Request, db: Session = Depends(get_db)):
    repo = AuthorRepository(db)
    author = repo.get_by_id(author_id)
    if author is None:
        return RedirectResponse(AUTHOR_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)

    return templates.TemplateResponse(request, "author_delete.html", {
        "title": "Delete Author",
        "author": author,
        "author_books": repo.get_books(author_id),
    })


@router.post("/author/{author_id:int}/delete")
def author_delete_post(
    author_id: int,
    request: Request,
    data: Dict[str, Any] = Depends(submitted_form),
    db: Session = Depends(get_db)
):
    """
    Handle author delete on POST.

    The author to delete is the one named by the form's authorid field. An
    author who still has books is not deleted; the confirmation page is
    shown again listing those books.
    """
    repo = AuthorRepository(db)
    target_id = submitted_id(data, "authorid")
    author = repo.get_by_id(target_id) if target_id is not None else None
    if author is None:
        return RedirectResponse(AUTHOR_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)

    author_books = repo.get_books(author.id)
    if author_books:
        logger.warning(f"Refusing to delete author {author.id}: {len(author_books)} book(s) reference it")
        return templates.TemplateResponse(request, "author_delete.html", {
            "title": "Delete Author",
            "author": author,
            "author_books": author_books,
        })

    repo.delete_author(author.id)
    logger.info(f"Deleted author {target_id}")
    return RedirectResponse(AUTHOR_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/author/{author_id:int}/update")
def author_update_get(author_id: int, request: Request, db: Session = Depends(get_db)):
    repo = AuthorRepository(db)
    author = repo.get_by_id(author_id)
    if author is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")

    return templates.TemplateResponse(request, "author_form.html", {
        "title": "Update Author",
        "author": author,
        "errors": [],
    })


@router.post("/author/{author_id:int}/update")
def author_update_post(
    author_id: int,
    request: Request,
    data: Dict[str, Any] = Depends(submitted_form),
    db: Session = Depends(get_db)
):
    repo = AuthorRepository(db)
    if repo.get_by_id(author_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")

    form, errors = validate_form(AuthorForm, data)
    if errors:
        return templates.TemplateResponse(request, "author_form.html", {
            "title": "Update Author",
            "author": sanitize_values(data),
            "errors": errors,
        })

    author = repo.update_author(
        author_id,
        first_name=form.first_name,
        family_name=form.family_name,
        date_of_birth=form.date_of_birth,
        date_of_death=form.date_of_death,
    )
    if author is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")

    logger.info(f"Updated author {author.id}")
    return RedirectResponse(author.url, status_code=status.HTTP_303_SEE_OTHER)
