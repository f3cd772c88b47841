"""Book repository and book graph loading."""

from collections import defaultdict
from dataclasses import dataclass, field

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.models.book_author import BookAuthor
from catalog.models.publisher import Publisher
from catalog.repositories.book_authors import BookAuthorRepository


@dataclass
class BookRecord:
    """A book together with its publisher name and linked authors."""

    book: Book
    publisher_name: str
    authors: list[Author] = field(default_factory=list)


class BookRepository:
    """Data access for books.

    Related publishers and authors are fetched with explicit joins and grouped
    into ``BookRecord`` objects rather than navigated through ORM relationships.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get(self, book_id: int) -> Book | None:
        result = await self.db.execute(select(Book).where(Book.id == book_id))
        return result.scalar_one_or_none()

    async def add(self, book: Book) -> Book:
        self.db.add(book)
        await self.db.flush()
        return book

    async def delete(self, book: Book) -> None:
        await self.db.delete(book)
        await self.db.flush()

    async def list_records(self) -> list[BookRecord]:
        return await self._load_records(self._records_query().order_by(Book.id))

    async def get_record(self, book_id: int) -> BookRecord | None:
        records = await self._load_records(self._records_query().where(Book.id == book_id))
        return records[0] if records else None

    async def list_records_for_publisher(self, publisher_id: int) -> list[BookRecord]:
        query = self._records_query().where(Book.publisher_id == publisher_id).order_by(Book.id)
        return await self._load_records(query)

    async def list_records_for_author(self, author_id: int) -> list[BookRecord]:
        """List the books linked to an author, once per linking edge."""
        book_ids = await BookAuthorRepository(self.db).book_ids_for_author(author_id)
        if not book_ids:
            return []

        records = await self._load_records(self._records_query().where(Book.id.in_(set(book_ids))))
        by_id = {record.book.id: record for record in records}
        return [by_id[book_id] for book_id in book_ids if book_id in by_id]

    @staticmethod
    def _records_query() -> Select:
        return select(Book, Publisher.name).join(Publisher, Publisher.id == Book.publisher_id)

    async def _load_records(self, query: Select) -> list[BookRecord]:
        result = await self.db.execute(query)
        rows = result.all()
        if not rows:
            return []

        book_ids = [book.id for book, _ in rows]
        authors_query = (
            select(BookAuthor.book_id, Author)
            .join(Author, Author.id == BookAuthor.author_id)
            .where(BookAuthor.book_id.in_(book_ids))
            .order_by(BookAuthor.id)
        )
        authors_result = await self.db.execute(authors_query)

        authors_by_book: dict[int, list[Author]] = defaultdict(list)
        for book_id, author in authors_result.all():
            authors_by_book[book_id].append(author)

        return [
            BookRecord(book=book, publisher_name=publisher_name, authors=authors_by_book[book.id])
            for book, publisher_name in rows
        ]
