"""Book-author edge repository."""

from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.book_author import BookAuthor


class BookAuthorRepository:
    """Data access for the book-author join table."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def book_ids_for_author(self, author_id: int) -> list[int]:
        """Return the linked book ids in edge order, repeated once per edge."""
        result = await self.db.execute(
            select(BookAuthor.book_id)
            .where(BookAuthor.author_id == author_id)
            .order_by(BookAuthor.id)
        )
        return list(result.scalars().all())

    async def add_edges(self, book_id: int, author_ids: Iterable[int]) -> list[BookAuthor]:
        """Insert one edge per author id, in the given order."""
        edges = [BookAuthor(book_id=book_id, author_id=author_id) for author_id in author_ids]
        self.db.add_all(edges)
        await self.db.flush()
        return edges

    async def delete_for_book(self, book_id: int) -> None:
        await self.db.execute(delete(BookAuthor).where(BookAuthor.book_id == book_id))
