"""Book model."""

from datetime import datetime

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.core.database import Base
from catalog.models.types import UTCDateTime


class Book(Base):
    """Model representing a book.

    Authors are linked through ``BookAuthor`` rows and loaded with explicit
    queries; the model itself only stores the publisher foreign key.
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    date_read: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    rate: Mapped[int | None] = mapped_column(Integer, nullable=True)
    genre: Mapped[str] = mapped_column(String(100), nullable=False)
    cover_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    date_added: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    publisher_id: Mapped[int] = mapped_column(
        ForeignKey("publishers.id"), nullable=False, index=True
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}', publisher_id={self.publisher_id})>"
