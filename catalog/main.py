"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from catalog import __version__
from catalog.api.authors import router as authors_router
from catalog.api.books import router as books_router
from catalog.api.publishers import router as publishers_router
from catalog.core.config import get_settings
from catalog.core.database import engine, init_db
from catalog.core.exceptions import CatalogError
from catalog.core.logging import configure_logging
from catalog.core.tracing import setup_tracing, shutdown_tracing

settings = get_settings()

configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    await init_db()
    yield
    # Shutdown
    shutdown_tracing()
    await engine.dispose()


app = FastAPI(
    title="Book Catalog",
    description="CRUD API for books, authors and publishers",
    version=__version__,
    lifespan=lifespan,
)

# Setup OpenTelemetry tracing (must be done before adding routes)
setup_tracing(app)


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError) -> PlainTextResponse:
    """Translate domain errors into their HTTP status with a readable message."""
    logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


# Include routers
app.include_router(authors_router)
app.include_router(publishers_router)
app.include_router(books_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )
