"""Book API routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from catalog.api.deps import get_book_service
from catalog.api.schemas import BookCreate, BookResponse, BookUpdate
from catalog.services.books import BookService

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("", response_model=list[BookResponse])
async def list_books(
    service: BookService = Depends(get_book_service),
) -> list[BookResponse]:
    """List all books with publisher and authors."""
    return await service.list_all()


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Get a specific book by ID."""
    return await service.get(book_id)


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
async def create_book(
    book_data: BookCreate,
    request: Request,
    response: Response,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Create a new book linked to an existing publisher and authors."""
    book = await service.create(book_data)
    response.headers["Location"] = str(request.url_for("get_book", book_id=book.id))
    return book


@router.put("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_book(
    book_id: int,
    book_data: BookUpdate,
    service: BookService = Depends(get_book_service),
) -> None:
    """Replace a book, including its full list of authors."""
    await service.update(book_id, book_data)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> None:
    """Delete a book and its author links."""
    await service.delete(book_id)
