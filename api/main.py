# api/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import catalog
from api.templating import templates
from core.config import configure_logging, settings
from core.sa.database import db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize database schema on startup
    configure_logging()
    db.init_db()
    logger.info("Local library started")
    yield


app = FastAPI(title="Local Library", lifespan=lifespan)
app.include_router(catalog)


@app.get("/")
async def root():
    return RedirectResponse("/catalog/", status_code=status.HTTP_303_SEE_OTHER)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors (404 in particular) as the error page."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.warning(f"{request.method} {request.url.path}: {exc.detail}")
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": "Error", "message": exc.detail, "status_code": exc.status_code},
        status_code=exc.status_code,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return templates.TemplateResponse(
        request,
        "error.html",
        {"title": "Error", "message": "Internal Server Error", "status_code": 500},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# Main execution
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,  # Enable auto-reload
        reload_dirs=["api", "core"]  # Watch both api and core directories for changes
    )
