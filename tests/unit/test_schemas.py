"""Unit tests for Pydantic schemas."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from catalog.api.schemas import (
    AuthorCreate,
    AuthorResponse,
    BookCreate,
    BookResponse,
    PublisherCreate,
)


class TestAuthorSchemas:
    """Tests for Author schemas."""

    def test_author_create_camel_case(self):
        """Test AuthorCreate accepts the camelCase key."""
        author = AuthorCreate.model_validate({"fullName": "Mary Shelley"})
        assert author.full_name == "Mary Shelley"

    def test_author_create_snake_case(self):
        """Test AuthorCreate also accepts the field name."""
        author = AuthorCreate.model_validate({"full_name": "Mary Shelley"})
        assert author.full_name == "Mary Shelley"

    def test_author_create_too_long(self):
        """Test AuthorCreate with a name over 100 characters fails."""
        with pytest.raises(ValidationError):
            AuthorCreate(full_name="x" * 101)

    def test_author_response_serializes_camel_case(self):
        """Test AuthorResponse dumps camelCase keys."""
        response = AuthorResponse(id=1, full_name="Mary Shelley", book_count=3)
        assert response.model_dump(by_alias=True) == {
            "id": 1,
            "fullName": "Mary Shelley",
            "bookCount": 3,
        }


class TestPublisherSchemas:
    """Tests for Publisher schemas."""

    def test_publisher_create_empty_name(self):
        """Test PublisherCreate with an empty name fails."""
        with pytest.raises(ValidationError):
            PublisherCreate(name="")


class TestBookSchemas:
    """Tests for Book schemas."""

    def test_book_create_defaults(self):
        """Test BookCreate with only required fields."""
        book = BookCreate.model_validate(
            {"title": "T", "description": "D", "genre": "G", "publisherId": 7}
        )
        assert book.is_read is False
        assert book.date_read is None
        assert book.rate is None
        assert book.cover_url is None
        assert book.author_ids == []

    @pytest.mark.parametrize("rate", [0, 6])
    def test_book_create_rate_out_of_range(self, rate):
        """Test BookCreate rejects ratings outside 1-5."""
        with pytest.raises(ValidationError):
            BookCreate(title="T", description="D", genre="G", publisher_id=1, rate=rate)

    def test_book_create_requires_publisher(self):
        """Test BookCreate without a publisher id fails."""
        with pytest.raises(ValidationError):
            BookCreate(title="T", description="D", genre="G")

    def test_book_create_genre_too_long(self):
        """Test BookCreate with a genre over 100 characters fails."""
        with pytest.raises(ValidationError):
            BookCreate(title="T", description="D", genre="g" * 101, publisher_id=1)

    def test_book_response_keys(self):
        """Test BookResponse dumps the denormalized camelCase shape."""
        response = BookResponse(
            id=1,
            title="T",
            description="D",
            is_read=False,
            date_read=None,
            rate=None,
            genre="G",
            cover_url=None,
            date_added=datetime(2025, 1, 1, tzinfo=timezone.utc),
            publisher_id=7,
            publisher_name="P",
            authors=[{"id": 3, "full_name": "A"}],
        )
        data = response.model_dump(by_alias=True)
        assert data["publisherId"] == 7
        assert data["publisherName"] == "P"
        assert data["authors"] == [{"id": 3, "fullName": "A"}]
        assert "dateAdded" in data

    def test_book_create_long_cover_url(self):
        """Test cover URLs are not length limited."""
        url = "https://example.com/covers/" + "a" * 2000 + ".jpg"
        book = BookCreate(title="T", description="D", genre="G", publisher_id=1, cover_url=url)
        assert book.cover_url == url
