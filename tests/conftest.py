"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import catalog.models  # noqa: F401
from catalog.core.database import Base, get_db
from catalog.main import app
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.models.book_author import BookAuthor
from catalog.models.publisher import Publisher

# Use an in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Create a test database engine."""
    # A single shared connection keeps the in-memory database alive across commits
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session() as session:
        yield session


@pytest.fixture
async def override_get_db(test_session: AsyncSession):
    """Override the get_db dependency for testing."""

    async def _override_get_db():
        yield test_session

    return _override_get_db


@pytest.fixture
async def client(override_get_db) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def fresh_session_client(test_engine) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client that opens a new database session for every request.

    Nothing is shared between requests through the identity map, so each
    response reflects what was actually stored.
    """
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def _fresh_get_db():
        async with async_session() as session:
            yield session

    app.dependency_overrides[get_db] = _fresh_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def sample_publisher(test_session: AsyncSession) -> Publisher:
    """Create a sample publisher for testing."""
    publisher = Publisher(name="Penguin Books")
    test_session.add(publisher)
    await test_session.commit()
    return publisher


@pytest.fixture
async def sample_authors(test_session: AsyncSession) -> list[Author]:
    """Create three sample authors for testing."""
    authors = [
        Author(full_name="Terry Pratchett"),
        Author(full_name="Neil Gaiman"),
        Author(full_name="Ursula K. Le Guin"),
    ]
    test_session.add_all(authors)
    await test_session.commit()
    return authors


@pytest.fixture
async def sample_author(sample_authors: list[Author]) -> Author:
    return sample_authors[0]


@pytest.fixture
async def sample_book(
    test_session: AsyncSession,
    sample_publisher: Publisher,
    sample_authors: list[Author],
) -> Book:
    """Create a book co-written by the first two sample authors."""
    book = Book(
        title="Good Omens",
        description="The end of the world, handled badly.",
        is_read=True,
        date_read=datetime(2024, 5, 1, tzinfo=timezone.utc),
        rate=5,
        genre="Fantasy",
        cover_url="https://example.com/good-omens.jpg",
        date_added=datetime.now(tz=timezone.utc),
        publisher_id=sample_publisher.id,
    )
    test_session.add(book)
    await test_session.flush()
    test_session.add_all(
        [
            BookAuthor(book_id=book.id, author_id=sample_authors[0].id),
            BookAuthor(book_id=book.id, author_id=sample_authors[1].id),
        ]
    )
    await test_session.commit()
    return book


@pytest.fixture
def book_payload():
    """Factory for valid book request bodies."""

    def _book_payload(publisher_id: int, author_ids: list[int], **overrides) -> dict:
        payload = {
            "title": "Small Gods",
            "description": "A tortoise, a novice and a god.",
            "isRead": False,
            "genre": "Fantasy",
            "publisherId": publisher_id,
            "authorIds": author_ids,
        }
        payload.update(overrides)
        return payload

    return _book_payload
