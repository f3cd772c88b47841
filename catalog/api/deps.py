"""Service dependencies for the API routers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.database import get_db
from catalog.services.authors import AuthorService
from catalog.services.books import BookService
from catalog.services.publishers import PublisherService


def get_author_service(db: AsyncSession = Depends(get_db)) -> AuthorService:
    """Dependency that provides the author service."""
    return AuthorService(db)


def get_publisher_service(db: AsyncSession = Depends(get_db)) -> PublisherService:
    """Dependency that provides the publisher service."""
    return PublisherService(db)


def get_book_service(db: AsyncSession = Depends(get_db)) -> BookService:
    """Dependency that provides the book service."""
    return BookService(db)
