"""Author service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.schemas import AuthorResponse, BookResponse
from catalog.core.database import transaction
from catalog.core.exceptions import DuplicateNameError, HasDependentsError, NotFoundError
from catalog.core.tracing import get_tracer
from catalog.models.author import Author
from catalog.repositories.authors import AuthorRepository
from catalog.repositories.books import BookRepository
from catalog.services.assembler import to_author_response, to_book_response

logger = logging.getLogger(__name__)

tracer = get_tracer(__name__)


class AuthorService:
    """Business rules for authors: unique names and the has-books delete guard."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.authors = AuthorRepository(db)
        self.books = BookRepository(db)

    async def _get_or_raise(self, author_id: int) -> Author:
        author = await self.authors.get(author_id)
        if author is None:
            raise NotFoundError("Author", author_id)
        return author

    async def list_all(self) -> list[AuthorResponse]:
        rows = await self.authors.list_with_book_counts()
        return [to_author_response(author, book_count) for author, book_count in rows]

    async def get(self, author_id: int) -> AuthorResponse:
        author = await self._get_or_raise(author_id)
        return to_author_response(author, await self.authors.book_count(author_id))

    async def create(self, full_name: str) -> AuthorResponse:
        if await self.authors.find_by_name(full_name) is not None:
            raise DuplicateNameError("Author", full_name)

        async with transaction(self.db):
            author = await self.authors.add(Author(full_name=full_name))

        logger.info(f"Created author {author.id}")
        return to_author_response(author, 0)

    async def update(self, author_id: int, full_name: str) -> None:
        author = await self._get_or_raise(author_id)
        if await self.authors.find_by_name(full_name, exclude_id=author_id) is not None:
            raise DuplicateNameError("Author", full_name, rename=True)

        async with transaction(self.db):
            author.full_name = full_name

        logger.info(f"Renamed author {author_id}")

    async def delete(self, author_id: int) -> None:
        with tracer.start_as_current_span("author_service.delete") as span:
            span.set_attribute("author.id", author_id)
            author = await self._get_or_raise(author_id)
            book_count = await self.authors.book_count(author_id)
            span.set_attribute("author.book_count", book_count)
            if book_count > 0:
                raise HasDependentsError("Author", author.full_name)

            async with transaction(self.db):
                await self.authors.delete(author)

        logger.info(f"Deleted author {author_id}")

    async def list_books(self, author_id: int) -> list[BookResponse]:
        """List every book linked to the author, fully denormalized."""
        await self._get_or_raise(author_id)
        records = await self.books.list_records_for_author(author_id)
        return [to_book_response(record) for record in records]
