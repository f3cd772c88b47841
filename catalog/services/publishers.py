"""Publisher service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.schemas import BookResponse, PublisherResponse
from catalog.core.database import transaction
from catalog.core.exceptions import DuplicateNameError, HasDependentsError, NotFoundError
from catalog.core.tracing import get_tracer
from catalog.models.publisher import Publisher
from catalog.repositories.books import BookRepository
from catalog.repositories.publishers import PublisherRepository
from catalog.services.assembler import to_book_response, to_publisher_response

logger = logging.getLogger(__name__)

tracer = get_tracer(__name__)


class PublisherService:
    """Business rules for publishers: unique names and the has-books delete guard."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.publishers = PublisherRepository(db)
        self.books = BookRepository(db)

    async def _get_or_raise(self, publisher_id: int) -> Publisher:
        publisher = await self.publishers.get(publisher_id)
        if publisher is None:
            raise NotFoundError("Publisher", publisher_id)
        return publisher

    async def list_all(self) -> list[PublisherResponse]:
        rows = await self.publishers.list_with_book_counts()
        return [to_publisher_response(publisher, book_count) for publisher, book_count in rows]

    async def get(self, publisher_id: int) -> PublisherResponse:
        publisher = await self._get_or_raise(publisher_id)
        return to_publisher_response(publisher, await self.publishers.book_count(publisher_id))

    async def create(self, name: str) -> PublisherResponse:
        if await self.publishers.find_by_name(name) is not None:
            raise DuplicateNameError("Publisher", name)

        async with transaction(self.db):
            publisher = await self.publishers.add(Publisher(name=name))

        logger.info(f"Created publisher {publisher.id}")
        return to_publisher_response(publisher, 0)

    async def update(self, publisher_id: int, name: str) -> None:
        publisher = await self._get_or_raise(publisher_id)
        if await self.publishers.find_by_name(name, exclude_id=publisher_id) is not None:
            raise DuplicateNameError("Publisher", name, rename=True)

        async with transaction(self.db):
            publisher.name = name

        logger.info(f"Renamed publisher {publisher_id}")

    async def delete(self, publisher_id: int) -> None:
        with tracer.start_as_current_span("publisher_service.delete") as span:
            span.set_attribute("publisher.id", publisher_id)
            publisher = await self._get_or_raise(publisher_id)
            book_count = await self.publishers.book_count(publisher_id)
            span.set_attribute("publisher.book_count", book_count)
            if book_count > 0:
                raise HasDependentsError("Publisher", publisher.name)

            async with transaction(self.db):
                await self.publishers.delete(publisher)

        logger.info(f"Deleted publisher {publisher_id}")

    async def list_books(self, publisher_id: int) -> list[BookResponse]:
        await self._get_or_raise(publisher_id)
        records = await self.books.list_records_for_publisher(publisher_id)
        return [to_book_response(record) for record in records]
