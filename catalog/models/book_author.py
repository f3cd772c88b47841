"""Book-author link model."""

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from catalog.core.database import Base


class BookAuthor(Base):
    """One edge of the many-to-many relation between books and authors.

    The same (book_id, author_id) pair may appear more than once.
    """

    __tablename__ = "book_authors"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    book_id: Mapped[int] = mapped_column(ForeignKey("books.id"), nullable=False, index=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("authors.id"), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<BookAuthor(id={self.id}, book_id={self.book_id}, author_id={self.author_id})>"
