"""Publisher model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, validates

from catalog.core.database import Base
from catalog.models.naming import normalize_name


class Publisher(Base):
    """Model representing a publisher."""

    __tablename__ = "publishers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    name_key: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)

    @validates("name")
    def _sync_name_key(self, key: str, value: str) -> str:
        self.name_key = normalize_name(value)
        return value

    def __repr__(self) -> str:
        return f"<Publisher(id={self.id}, name='{self.name}')>"
