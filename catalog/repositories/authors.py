"""Author repository."""

from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.author import Author
from catalog.models.book_author import BookAuthor
from catalog.models.naming import normalize_name


class AuthorRepository:
    """Data access for authors."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get(self, author_id: int) -> Author | None:
        result = await self.db.execute(select(Author).where(Author.id == author_id))
        return result.scalar_one_or_none()

    async def get_many(self, author_ids: Iterable[int]) -> list[Author]:
        """Return the authors matching any of the ids, each at most once."""
        ids = set(author_ids)
        if not ids:
            return []
        result = await self.db.execute(select(Author).where(Author.id.in_(ids)))
        return list(result.scalars().all())

    async def find_by_name(self, full_name: str, exclude_id: int | None = None) -> Author | None:
        """Find an author by name ignoring case, optionally skipping one id."""
        query = select(Author).where(Author.full_name_key == normalize_name(full_name))
        if exclude_id is not None:
            query = query.where(Author.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def list_with_book_counts(self) -> list[tuple[Author, int]]:
        """List all authors with the number of book links each one has."""
        book_count_subq = (
            select(BookAuthor.author_id, func.count(BookAuthor.id).label("count"))
            .group_by(BookAuthor.author_id)
            .subquery()
        )

        query = (
            select(Author, func.coalesce(book_count_subq.c.count, 0).label("book_count"))
            .outerjoin(book_count_subq, Author.id == book_count_subq.c.author_id)
            .order_by(Author.id)
        )

        result = await self.db.execute(query)
        return [(author, book_count) for author, book_count in result.all()]

    async def book_count(self, author_id: int) -> int:
        result = await self.db.execute(
            select(func.count(BookAuthor.id)).where(BookAuthor.author_id == author_id)
        )
        return result.scalar() or 0

    async def add(self, author: Author) -> Author:
        self.db.add(author)
        await self.db.flush()
        return author

    async def delete(self, author: Author) -> None:
        await self.db.delete(author)
        await self.db.flush()
