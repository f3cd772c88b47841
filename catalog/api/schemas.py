"""Pydantic schemas for API request/response validation.

JSON bodies use camelCase keys; requests also accept the snake_case field names.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that serializes fields with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Author schemas
class AuthorCreate(CamelModel):
    """Schema for creating an author."""

    full_name: str = Field(..., min_length=1, max_length=100)


class AuthorUpdate(AuthorCreate):
    """Schema for renaming an author."""


class AuthorResponse(CamelModel):
    """Schema for author response."""

    id: int
    full_name: str
    book_count: int = 0


# Publisher schemas
class PublisherCreate(CamelModel):
    """Schema for creating a publisher."""

    name: str = Field(..., min_length=1, max_length=100)


class PublisherUpdate(PublisherCreate):
    """Schema for renaming a publisher."""


class PublisherResponse(CamelModel):
    """Schema for publisher response."""

    id: int
    name: str
    book_count: int = 0


# Book schemas
class BookCreate(CamelModel):
    """Schema for creating a book together with its author links."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    is_read: bool = False
    date_read: datetime | None = None
    rate: int | None = Field(None, ge=1, le=5)
    genre: str = Field(..., min_length=1, max_length=100)
    cover_url: str | None = None
    publisher_id: int
    author_ids: list[int] = Field(default_factory=list)


class BookUpdate(BookCreate):
    """Schema for replacing a book's fields and its full author list."""


class BookAuthorResponse(CamelModel):
    """Author entry embedded in a book response."""

    id: int
    full_name: str


class BookResponse(CamelModel):
    """Schema for book response with publisher and authors denormalized."""

    id: int
    title: str
    description: str
    is_read: bool
    date_read: datetime | None
    rate: int | None
    genre: str
    cover_url: str | None
    date_added: datetime
    publisher_id: int
    publisher_name: str
    authors: list[BookAuthorResponse] = Field(default_factory=list)
