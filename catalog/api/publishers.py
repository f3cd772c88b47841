"""Publisher API routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from catalog.api.deps import get_publisher_service
from catalog.api.schemas import BookResponse, PublisherCreate, PublisherResponse, PublisherUpdate
from catalog.services.publishers import PublisherService

router = APIRouter(prefix="/api/publishers", tags=["publishers"])


@router.get("", response_model=list[PublisherResponse])
async def list_publishers(
    service: PublisherService = Depends(get_publisher_service),
) -> list[PublisherResponse]:
    """List all publishers with their book counts."""
    return await service.list_all()


@router.get("/{publisher_id}", response_model=PublisherResponse)
async def get_publisher(
    publisher_id: int,
    service: PublisherService = Depends(get_publisher_service),
) -> PublisherResponse:
    """Get a specific publisher by ID."""
    return await service.get(publisher_id)


@router.post("", response_model=PublisherResponse, status_code=status.HTTP_201_CREATED)
async def create_publisher(
    publisher_data: PublisherCreate,
    request: Request,
    response: Response,
    service: PublisherService = Depends(get_publisher_service),
) -> PublisherResponse:
    """Create a new publisher."""
    publisher = await service.create(publisher_data.name)
    response.headers["Location"] = str(
        request.url_for("get_publisher", publisher_id=publisher.id)
    )
    return publisher


@router.put("/{publisher_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_publisher(
    publisher_id: int,
    publisher_data: PublisherUpdate,
    service: PublisherService = Depends(get_publisher_service),
) -> None:
    """Rename a publisher."""
    await service.update(publisher_id, publisher_data.name)


@router.delete("/{publisher_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_publisher(
    publisher_id: int,
    service: PublisherService = Depends(get_publisher_service),
) -> None:
    """Delete a publisher that has no books."""
    await service.delete(publisher_id)


@router.get("/{publisher_id}/books", response_model=list[BookResponse])
async def list_publisher_books(
    publisher_id: int,
    service: PublisherService = Depends(get_publisher_service),
) -> list[BookResponse]:
    """List all books of a publisher."""
    return await service.list_books(publisher_id)
