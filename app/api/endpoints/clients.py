"""
Client management endpoints.
CRUD operations for clients, plus bulk delete.
"""

from uuid import UUID

from fastapi import APIRouter, Query, status

from app.api.deps import DbSession, CurrentUser, Pagination
from app.models.client import ClientStatus
from app.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientListResponse,
    ClientBulkDelete,
    ClientBulkDeleteResponse,
)
from app.schemas.base import MessageResponse, PaginationMeta
from app.services.client import ClientService


router = APIRouter()


@router.get(
    "",
    response_model=ClientListResponse,
    summary="List clients",
    description="Paginated list of the user's clients, newest first",
)
async def list_clients(
    current_user: CurrentUser,
    db: DbSession,
    pagination: Pagination,
    status: ClientStatus | None = Query(None, description="Filter by status"),
    search: str | None = Query(None, description="Search company name or email"),
) -> ClientListResponse:
    """List all clients with pagination."""
    service = ClientService(db)
    clients, total = await service.list(
        owner_id=current_user.id,
        pagination=pagination,
        status=status,
        search=search,
    )

    return ClientListResponse(
        clients=[ClientResponse.model_validate(c) for c in clients],
        pagination=PaginationMeta.create(total, pagination),
    )


@router.post(
    "",
    response_model=ClientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a client",
)
async def create_client(
    data: ClientCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> ClientResponse:
    """Create a new client."""
    service = ClientService(db)
    client = await service.create(current_user.id, data)
    return ClientResponse.model_validate(client)


@router.post(
    "/bulk-delete",
    response_model=ClientBulkDeleteResponse,
    summary="Delete several clients",
    description="Ids that are unknown or belong to another user are skipped",
)
async def bulk_delete_clients(
    data: ClientBulkDelete,
    current_user: CurrentUser,
    db: DbSession,
) -> ClientBulkDeleteResponse:
    service = ClientService(db)
    deleted_ids = await service.bulk_delete(current_user.id, data.clientIds)
    return ClientBulkDeleteResponse(
        message="Clients deleted successfully",
        deletedCount=len(deleted_ids),
        deletedIds=deleted_ids,
    )


@router.get(
    "/{client_id}",
    response_model=ClientResponse,
    summary="Get a client",
)
async def get_client(
    client_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> ClientResponse:
    """Get client by ID."""
    service = ClientService(db)
    client = await service.get_or_404(client_id, current_user.id)
    return ClientResponse.model_validate(client)


@router.put(
    "/{client_id}",
    response_model=ClientResponse,
    summary="Update a client",
)
async def update_client(
    client_id: UUID,
    data: ClientUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> ClientResponse:
    """Update a client."""
    service = ClientService(db)
    client = await service.get_or_404(client_id, current_user.id)
    client = await service.update(client, data)
    return ClientResponse.model_validate(client)


@router.delete(
    "/{client_id}",
    response_model=MessageResponse,
    summary="Delete a client",
    description="Delete a client together with its invoices",
)
async def delete_client(
    client_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> MessageResponse:
    """Delete a client."""
    service = ClientService(db)
    client = await service.get_or_404(client_id, current_user.id)
    await service.delete(client)
    return MessageResponse(message="Client deleted successfully")
