from fastapi import APIRouter

from .authors import router as authors_router
from .book_instances import router as book_instances_router
from .books import router as books_router
from .catalog import router as catalog_router
from .genres import router as genres_router

catalog = APIRouter(prefix="/catalog")
catalog.include_router(catalog_router)
catalog.include_router(authors_router)
catalog.include_router(books_router)
catalog.include_router(genres_router)
catalog.include_router(book_instances_router)

__all__ = ['catalog']
