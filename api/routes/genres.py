# api/routes/genres.py

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from api.dependencies import submitted_form, submitted_id
from api.schemas import GenreForm, sanitize_values, validate_form
from api.templating import templates
from core.sa.database import get_db
from core.sa.repositories import BookRepository, DuplicateGenreError, GenreRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["genres"])

GENRE_LIST_URL = "/catalog/genres"


@router.get("/genres")
def genre_list(request: Request, db: Session = Depends(get_db)):
    repo = GenreRepository(db)
    return templates.TemplateResponse(request, "genre_list.html", {
        "title": "Genre List",
        "genre_list": repo.list_genres(),
    })


@router.get("/genre/create")
def genre_create_get(request: Request):
    return templates.TemplateResponse(request, "genre_form.html", {
        "title": "Create Genre",
        "genre": None,
        "errors": [],
    })


@router.post("/genre/create")
def genre_create_post(
    request: Request,
    data: Dict[str, Any] = Depends(submitted_form),
    db: Session = Depends(get_db)
):
    """
    Handle genre create on POST.

    A genre whose name is already taken is not created again; the client
    is redirected to the existing one.
    """
    form, errors = validate_form(GenreForm, data)
    if errors:
        return templates.TemplateResponse(request, "genre_form.html", {
            "title": "Create Genre",
            "genre": sanitize_values(data),
            "errors": errors,
        })

    repo = GenreRepository(db)
    genre, created = repo.get_or_create(form.name)
    if created:
        logger.info(f"Created genre {genre.id}: {genre.name}")
    else:
        logger.info(f"Genre '{genre.name}' already exists as {genre.id}")
    return RedirectResponse(genre.url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/genre/{genre_id:int}")
def genre_detail(genre_id: int, request: Request, db: Session = Depends(get_db)):
    """Display a genre with every book tagged with it."""
    repo = GenreRepository(db)
    genre = repo.get_by_id(genre_id)
    if genre is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Genre not found")

    return templates.TemplateResponse(request, "genre_detail.html", {
        "title": "Genre Detail",
        "genre": genre,
        "genre_books": BookRepository(db).get_books_by_genre(genre_id),
    })


@router.get("/genre/{genre_id:int}/delete")
def genre_delete_get(genre_id: int, request: Request, db: Session = Depends(get_db)):
    repo = GenreRepository(db)
    genre = repo.get_by_id(genre_id)
    if genre is None:
        return RedirectResponse(GENRE_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)

    return templates.TemplateResponse(request, "genre_delete.html", {
        "title": "Delete Genre",
        "genre": genre,
        "genre_books": BookRepository(db).get_books_by_genre(genre_id),
    })


@router.post("/genre/{genre_id:int}/delete")
def genre_delete_post(
    genre_id: int,
    request: Request,
    data: Dict[str, Any] = Depends(submitted_form),
    db: Session = Depends(get_db)
):
    repo = GenreRepository(db)
    target_id = submitted_id(data, "genreid")
    genre = repo.get_by_id(target_id) if target_id is not None else None
    if genre is None:
        return RedirectResponse(GENRE_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)

    # Books still tagged with the genre block the delete
    genre_books = BookRepository(db).get_books_by_genre(genre.id)
    if genre_books:
        logger.warning(f"Refusing to delete genre {genre.id}: {len(genre_books)} book(s) reference it")
        return templates.TemplateResponse(request, "genre_delete.html", {
            "title": "Delete Genre",
            "genre": genre,
            "genre_books": genre_books,
        })

    repo.delete_genre(genre.id)
    logger.info(f"Deleted genre {target_id}")
    return RedirectResponse(GENRE_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/genre/{genre_id:int}/update")
def genre_update_get(genre_id: int, request: Request, db: Session = Depends(get_db)):
    repo = GenreRepository(db)
    genre = repo.get_by_id(genre_id)
    if genre is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Genre not found")

    return templates.TemplateResponse(request, "genre_form.html", {
        "title": "Update Genre",
        "genre": genre,
        "errors": [],
    })


@router.post("/genre/{genre_id:int}/update")
def genre_update_post(
    genre_id: int,
    request: Request,
    data: Dict[str, Any] = Depends(submitted_form),
    db: Session = Depends(get_db)
):
    repo = GenreRepository(db)
    if repo.get_by_id(genre_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Genre not found")

    form, errors = validate_form(GenreForm, data)
    if not errors:
        try:
            genre = repo.update_genre(genre_id, form.name)
        except DuplicateGenreError:
            errors = [{
                "msg": "Genre with that name already exists.",
                "param": "name",
                "value": form.name,
                "location": "body",
            }]
    if errors:
        return templates.TemplateResponse(request, "genre_form.html", {
            "title": "Update Genre",
            "genre": sanitize_values(data),
            "errors": errors,
        })

    if genre is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Genre not found")

    logger.info(f"Updated genre {genre.id}")
    return RedirectResponse(genre.url, status_code=status.HTTP_303_SEE_OTHER)
