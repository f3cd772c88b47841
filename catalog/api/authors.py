"""Author API routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from catalog.api.deps import get_author_service
from catalog.api.schemas import AuthorCreate, AuthorResponse, AuthorUpdate, BookResponse
from catalog.services.authors import AuthorService

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get("", response_model=list[AuthorResponse])
async def list_authors(
    service: AuthorService = Depends(get_author_service),
) -> list[AuthorResponse]:
    """List all authors with their book counts."""
    return await service.list_all()


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
) -> AuthorResponse:
    """Get a specific author by ID."""
    return await service.get(author_id)


@router.post("", response_model=AuthorResponse, status_code=status.HTTP_201_CREATED)
async def create_author(
    author_data: AuthorCreate,
    request: Request,
    response: Response,
    service: AuthorService = Depends(get_author_service),
) -> AuthorResponse:
    """Create a new author. Names must be unique ignoring case."""
    author = await service.create(author_data.full_name)
    response.headers["Location"] = str(request.url_for("get_author", author_id=author.id))
    return author


@router.put("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_author(
    author_id: int,
    author_data: AuthorUpdate,
    service: AuthorService = Depends(get_author_service),
) -> None:
    """Rename an author."""
    await service.update(author_id, author_data.full_name)


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
) -> None:
    """Delete an author that has no linked books."""
    await service.delete(author_id)


@router.get("/{author_id}/books", response_model=list[BookResponse])
async def list_author_books(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
) -> list[BookResponse]:
    """List all books linked to an author."""
    return await service.list_books(author_id)
