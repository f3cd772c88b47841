"""Database models."""

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.models.book_author import BookAuthor
from catalog.models.publisher import Publisher

__all__ = ["Author", "Book", "BookAuthor", "Publisher"]
