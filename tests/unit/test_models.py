"""Unit tests for database models."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.models.book_author import BookAuthor
from catalog.models.publisher import Publisher
from catalog.models.types import UTCDateTime


class TestAuthorModel:
    """Tests for the Author model."""

    async def test_create_author(self, test_session):
        """Test creating an author fills the normalized name key."""
        author = Author(full_name="Octavia E. Butler")
        test_session.add(author)
        await test_session.flush()

        assert author.id is not None
        assert author.full_name_key == "octavia e. butler"

    async def test_rename_updates_name_key(self, sample_author):
        """Test that assigning a new name keeps the key in sync."""
        sample_author.full_name = "PRATCHETT"
        assert sample_author.full_name_key == "pratchett"

    async def test_name_key_unique(self, test_session, sample_author):
        """Test the store rejects a second author with the same name ignoring case."""
        test_session.add(Author(full_name="terry PRATCHETT"))
        with pytest.raises(IntegrityError):
            await test_session.flush()
        await test_session.rollback()

    async def test_author_repr(self, sample_author):
        """Test author string representation."""
        assert "Terry Pratchett" in repr(sample_author)


class TestPublisherModel:
    """Tests for the Publisher model."""

    async def test_create_publisher(self, test_session):
        """Test creating a publisher fills the normalized name key."""
        publisher = Publisher(name="Faber & Faber")
        test_session.add(publisher)
        await test_session.flush()

        assert publisher.id is not None
        assert publisher.name_key == "faber & faber"

    async def test_publisher_repr(self, sample_publisher):
        """Test publisher string representation."""
        assert "Penguin Books" in repr(sample_publisher)


class TestBookModel:
    """Tests for the Book model."""

    async def test_create_book_minimal(self, test_session, sample_publisher):
        """Test creating a book with only required fields."""
        book = Book(
            title="Minimal Book",
            description="Nothing much.",
            genre="Essay",
            date_added=datetime.now(tz=timezone.utc),
            publisher_id=sample_publisher.id,
        )
        test_session.add(book)
        await test_session.flush()

        assert book.id is not None
        assert book.is_read is False
        assert book.date_read is None
        assert book.rate is None
        assert book.cover_url is None

    async def test_book_has_no_navigation_collections(self):
        """Test that links to authors are not mapped as ORM relationships."""
        assert not Book.__mapper__.relationships
        assert not BookAuthor.__mapper__.relationships

    async def test_book_repr(self, sample_book):
        """Test book string representation."""
        repr_str = repr(sample_book)
        assert "Book" in repr_str
        assert "Good Omens" in repr_str


class TestUTCDateTime:
    """Tests for the UTCDateTime column type."""

    def test_bind_converts_aware_value_to_utc(self):
        """Test an offset value is converted to the same instant in UTC."""
        value = datetime(2024, 5, 1, 10, 0, tzinfo=timezone(timedelta(hours=2)))
        bound = UTCDateTime().process_bind_param(value, None)
        assert bound == datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)
        assert bound.utcoffset() == timedelta(0)

    def test_bind_treats_naive_value_as_utc(self):
        """Test a naive value is taken to be UTC."""
        bound = UTCDateTime().process_bind_param(datetime(2024, 5, 1, 10, 0), None)
        assert bound == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)

    def test_none_passes_through(self):
        """Test NULL values are left alone."""
        column_type = UTCDateTime()
        assert column_type.process_bind_param(None, None) is None
        assert column_type.process_result_value(None, None) is None

    async def test_stored_book_reads_back_aware(self, test_engine, test_session, sample_publisher):
        """Test a book loaded in a new session keeps the exact instants."""
        date_read = datetime(2024, 5, 1, 10, 0, tzinfo=timezone(timedelta(hours=2)))
        date_added = datetime(2025, 3, 2, 12, 30, 15, 123456, tzinfo=timezone.utc)
        book = Book(
            title="Stored",
            description="Round trip.",
            genre="Essay",
            date_read=date_read,
            date_added=date_added,
            publisher_id=sample_publisher.id,
        )
        test_session.add(book)
        await test_session.commit()
        book_id = book.id

        async_session = async_sessionmaker(test_engine, class_=AsyncSession)
        async with async_session() as session:
            result = await session.execute(select(Book).where(Book.id == book_id))
            loaded = result.scalar_one()

        assert loaded.date_read == date_read
        assert loaded.date_read.utcoffset() == timedelta(0)
        assert loaded.date_added == date_added
        assert loaded.date_added.tzinfo is not None
