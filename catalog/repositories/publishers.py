"""Publisher repository."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.book import Book
from catalog.models.naming import normalize_name
from catalog.models.publisher import Publisher


class PublisherRepository:
    """Data access for publishers."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get(self, publisher_id: int) -> Publisher | None:
        result = await self.db.execute(select(Publisher).where(Publisher.id == publisher_id))
        return result.scalar_one_or_none()

    async def find_by_name(self, name: str, exclude_id: int | None = None) -> Publisher | None:
        """Find a publisher by name ignoring case, optionally skipping one id."""
        query = select(Publisher).where(Publisher.name_key == normalize_name(name))
        if exclude_id is not None:
            query = query.where(Publisher.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def list_with_book_counts(self) -> list[tuple[Publisher, int]]:
        """List all publishers with the number of books each one publishes."""
        book_count_subq = (
            select(Book.publisher_id, func.count(Book.id).label("count"))
            .group_by(Book.publisher_id)
            .subquery()
        )

        query = (
            select(Publisher, func.coalesce(book_count_subq.c.count, 0).label("book_count"))
            .outerjoin(book_count_subq, Publisher.id == book_count_subq.c.publisher_id)
            .order_by(Publisher.id)
        )

        result = await self.db.execute(query)
        return [(publisher, book_count) for publisher, book_count in result.all()]

    async def book_count(self, publisher_id: int) -> int:
        result = await self.db.execute(
            select(func.count(Book.id)).where(Book.publisher_id == publisher_id)
        )
        return result.scalar() or 0

    async def add(self, publisher: Publisher) -> Publisher:
        self.db.add(publisher)
        await self.db.flush()
        return publisher

    async def delete(self, publisher: Publisher) -> None:
        await self.db.delete(publisher)
        await self.db.flush()
