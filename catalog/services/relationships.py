"""Book-author relationship management."""

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import ReferentialViolationError
from catalog.models.publisher import Publisher
from catalog.repositories.authors import AuthorRepository
from catalog.repositories.book_authors import BookAuthorRepository
from catalog.repositories.publishers import PublisherRepository


class RelationshipManager:
    """Keeps a book's author links and foreign references consistent.

    None of the methods commit; writes join the caller's transaction.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.authors = AuthorRepository(db)
        self.publishers = PublisherRepository(db)
        self.edges = BookAuthorRepository(db)

    async def validate_authors_exist(self, author_ids: Sequence[int]) -> None:
        """Check that every requested author id exists.

        Repeated ids are allowed and only counted once.
        """
        requested = set(author_ids)
        found = await self.authors.get_many(requested)
        if len({author.id for author in found}) != len(requested):
            raise ReferentialViolationError("One or more author IDs are invalid.")

    async def validate_publisher_exists(self, publisher_id: int) -> Publisher:
        publisher = await self.publishers.get(publisher_id)
        if publisher is None:
            raise ReferentialViolationError(f"Publisher with ID {publisher_id} does not exist.")
        return publisher

    async def create_book_authors(self, book_id: int, author_ids: Sequence[int]) -> None:
        """Link a newly inserted book to its authors."""
        await self.edges.add_edges(book_id, author_ids)

    async def replace_book_authors(self, book_id: int, author_ids: Sequence[int]) -> None:
        """Replace every author link of a book with one link per listed id.

        Repeated ids produce repeated links.
        """
        await self.edges.delete_for_book(book_id)
        await self.edges.add_edges(book_id, author_ids)
