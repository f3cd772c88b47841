"""Author model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, validates

from catalog.core.database import Base
from catalog.models.naming import normalize_name


class Author(Base):
    """Model representing an author."""

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    # Lowercased full_name, kept in sync on assignment
    full_name_key: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True
    )

    @validates("full_name")
    def _sync_name_key(self, key: str, value: str) -> str:
        self.full_name_key = normalize_name(value)
        return value

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, full_name='{self.full_name}')>"
