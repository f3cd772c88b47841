"""Mapping of stored entities to API response records."""

from catalog.api.schemas import (
    AuthorResponse,
    BookAuthorResponse,
    BookResponse,
    PublisherResponse,
)
from catalog.models.author import Author
from catalog.models.publisher import Publisher
from catalog.repositories.books import BookRecord


def to_book_response(record: BookRecord) -> BookResponse:
    """Flatten a book record into a response with publisher and authors inlined."""
    book = record.book
    return BookResponse(
        id=book.id,
        title=book.title,
        description=book.description,
        is_read=book.is_read,
        date_read=book.date_read,
        rate=book.rate,
        genre=book.genre,
        cover_url=book.cover_url,
        date_added=book.date_added,
        publisher_id=book.publisher_id,
        publisher_name=record.publisher_name,
        authors=[
            BookAuthorResponse(id=author.id, full_name=author.full_name)
            for author in record.authors
        ],
    )


def to_author_response(author: Author, book_count: int = 0) -> AuthorResponse:
    return AuthorResponse(id=author.id, full_name=author.full_name, book_count=book_count)


def to_publisher_response(publisher: Publisher, book_count: int = 0) -> PublisherResponse:
    return PublisherResponse(id=publisher.id, name=publisher.name, book_count=book_count)
