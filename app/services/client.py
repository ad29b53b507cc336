"""
Client service.
Handles client CRUD operations, always scoped to the owning user.
"""

import logging
from typing import List, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete, select, func, or_

from app.core.errors import NotFoundError
from app.models.client import Client, ClientStatus
from app.schemas.base import PaginationParams
from app.schemas.client import ClientCreate, ClientUpdate


logger = logging.getLogger(__name__)

# Optional fields where "" means "not provided"
BLANK_AS_NULL_FIELDS = ("email", "avatar_url")


def _blank_to_null(values: dict) -> dict:
    for field in BLANK_AS_NULL_FIELDS:
        if values.get(field) == "":
            values[field] = None
    return values


class ClientService:
    """Service for client operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, owner_id: UUID, data: ClientCreate) -> Client:
        """
        Create a new client.

        Args:
            owner_id: Owning user's ID
            data: Client data

        Returns:
            Created client
        """
        client = Client(
            user_id=owner_id,
            **_blank_to_null(data.model_dump()),
        )

        self.db.add(client)
        await self.db.flush()
        await self.db.refresh(client)

        logger.info("Client %s created for user %s", client.id, owner_id)
        return client

    async def get_by_id(self, client_id: UUID, owner_id: UUID) -> Client | None:
        """
        Get client by ID, ensuring owner access.

        Returns:
            Client if found and owned by user, None otherwise
        """
        result = await self.db.execute(
            select(Client).where(
                Client.id == client_id,
                Client.user_id == owner_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_or_404(self, client_id: UUID, owner_id: UUID) -> Client:
        """
        Get client by ID or raise 404.

        Raises:
            NotFoundError: If client not found or owned by someone else
        """
        client = await self.get_by_id(client_id, owner_id)
        if not client:
            logger.warning("Client %s not found for user %s", client_id, owner_id)
            raise NotFoundError("Client not found")
        return client

    async def list(
        self,
        owner_id: UUID,
        pagination: PaginationParams,
        status: ClientStatus | None = None,
        search: str | None = None,
    ) -> Tuple[List[Client], int]:
        """
        List clients with pagination, status filter and search.

        Args:
            owner_id: Owner's user ID
            pagination: Page and page size
            status: Only clients with this status
            search: Search term for company name/email

        Returns:
            Tuple of (clients list, total count)
        """
        conditions = [Client.user_id == owner_id]

        if status:
            conditions.append(Client.status == status)

        if search:
            search_filter = f"%{search}%"
            conditions.append(
                or_(
                    Client.company_name.ilike(search_filter),
                    Client.email.ilike(search_filter),
                )
            )

        total_result = await self.db.execute(
            select(func.count(Client.id)).where(*conditions)
        )
        total = total_result.scalar() or 0

        result = await self.db.execute(
            select(Client)
            .where(*conditions)
            .order_by(Client.created_at.desc(), Client.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        clients = list(result.scalars().all())

        return clients, total

    async def update(self, client: Client, data: ClientUpdate) -> Client:
        """Apply the provided fields to the client."""
        update_data = _blank_to_null(data.model_dump(exclude_unset=True))

        for field, value in update_data.items():
            setattr(client, field, value)

        await self.db.flush()
        await self.db.refresh(client)

        logger.info("Client %s updated", client.id)
        return client

    async def delete(self, client: Client) -> None:
        """Delete client. Its invoices go with it (FK cascade)."""
        await self.db.delete(client)
        await self.db.flush()
        logger.info("Client %s deleted", client.id)

    async def bulk_delete(self, owner_id: UUID, client_ids: List[UUID]) -> List[UUID]:
        """
        Delete the requested clients the user owns.

        Ids that do not exist or belong to someone else are skipped.

        Returns:
            IDs actually deleted
        """
        result = await self.db.execute(
            select(Client.id).where(
                Client.id.in_(client_ids),
                Client.user_id == owner_id,
            )
        )
        owned_ids = list(result.scalars().all())

        if owned_ids:
            await self.db.execute(
                delete(Client).where(
                    Client.id.in_(owned_ids),
                    Client.user_id == owner_id,
                )
            )

        logger.info(
            "Bulk deleted %d of %d clients for user %s",
            len(owned_ids), len(client_ids), owner_id,
        )
        return owned_ids
