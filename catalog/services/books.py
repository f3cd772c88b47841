"""Book service."""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.schemas import BookCreate, BookResponse, BookUpdate
from catalog.core.database import transaction
from catalog.core.exceptions import NotFoundError
from catalog.core.tracing import get_tracer
from catalog.models.book import Book
from catalog.repositories.book_authors import BookAuthorRepository
from catalog.repositories.books import BookRepository
from catalog.services.assembler import to_book_response
from catalog.services.relationships import RelationshipManager

logger = logging.getLogger(__name__)

tracer = get_tracer(__name__)


class BookService:
    """Business rules for books and their author links."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.books = BookRepository(db)
        self.edges = BookAuthorRepository(db)
        self.relationships = RelationshipManager(db)

    async def list_all(self) -> list[BookResponse]:
        records = await self.books.list_records()
        return [to_book_response(record) for record in records]

    async def get(self, book_id: int) -> BookResponse:
        record = await self.books.get_record(book_id)
        if record is None:
            raise NotFoundError("Book", book_id)
        return to_book_response(record)

    async def create(self, data: BookCreate) -> BookResponse:
        """Create a book and link it to its authors in one transaction.

        The publisher and all authors are validated before anything is written.
        ``date_added`` is always the current time.
        """
        with tracer.start_as_current_span("book_service.create") as span:
            span.set_attribute("book.publisher_id", data.publisher_id)
            span.set_attribute("book.author_count", len(data.author_ids))

            await self.relationships.validate_publisher_exists(data.publisher_id)
            await self.relationships.validate_authors_exist(data.author_ids)

            book = Book(
                **data.model_dump(exclude={"author_ids"}),
                date_added=datetime.now(tz=timezone.utc),
            )
            async with transaction(self.db):
                await self.books.add(book)
                await self.relationships.create_book_authors(book.id, data.author_ids)

            span.set_attribute("book.id", book.id)

        logger.info(f"Created book {book.id} with {len(data.author_ids)} author link(s)")
        return await self.get(book.id)

    async def update(self, book_id: int, data: BookUpdate) -> None:
        """Replace a book's fields and its complete set of author links."""
        with tracer.start_as_current_span("book_service.update") as span:
            span.set_attribute("book.id", book_id)

            book = await self.books.get(book_id)
            if book is None:
                raise NotFoundError("Book", book_id)

            await self.relationships.validate_publisher_exists(data.publisher_id)
            await self.relationships.validate_authors_exist(data.author_ids)

            async with transaction(self.db):
                for field, value in data.model_dump(exclude={"author_ids"}).items():
                    setattr(book, field, value)
                await self.relationships.replace_book_authors(book_id, data.author_ids)

        logger.info(f"Updated book {book_id}")

    async def delete(self, book_id: int) -> None:
        book = await self.books.get(book_id)
        if book is None:
            raise NotFoundError("Book", book_id)

        async with transaction(self.db):
            await self.edges.delete_for_book(book_id)
            await self.books.delete(book)

        logger.info(f"Deleted book {book_id}")
