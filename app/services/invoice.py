"""
Invoice service.
Handles invoice CRUD, line items, sending and bulk actions.
"""

import logging
from datetime import date
from typing import List, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete, select, func, or_, update

from app.core.errors import NotFoundError
from app.models.client import Client
from app.models.invoice import Invoice, InvoiceItem, InvoiceStatus
from app.schemas.base import PaginationParams
from app.schemas.invoice import (
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceItemCreate,
    InvoiceItemUpdate,
)
from app.services.client import ClientService


logger = logging.getLogger(__name__)


class InvoiceService:
    """Service for invoice operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _ensure_client_owned(self, client_id: UUID, owner_id: UUID) -> None:
        """Raise NotFoundError unless the client belongs to the owner."""
        await ClientService(self.db).get_or_404(client_id, owner_id)

    async def _reload(self, invoice_id: UUID) -> Invoice:
        """Fetch the invoice again so the embedded client reflects client_id."""
        result = await self.db.execute(
            select(Invoice)
            .where(Invoice.id == invoice_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    async def create(self, owner_id: UUID, data: InvoiceCreate) -> Invoice:
        """
        Create a new invoice.

        The client must belong to the same user; nothing is written
        otherwise.

        Raises:
            NotFoundError: If the client is not found
        """
        await self._ensure_client_owned(data.client_id, owner_id)

        invoice = Invoice(user_id=owner_id, **data.model_dump())

        self.db.add(invoice)
        await self.db.flush()

        logger.info("Invoice %s created for user %s", invoice.id, owner_id)
        return await self._reload(invoice.id)

    async def get_by_id(self, invoice_id: UUID, owner_id: UUID) -> Invoice | None:
        """Get invoice by ID, ensuring owner access."""
        result = await self.db.execute(
            select(Invoice).where(
                Invoice.id == invoice_id,
                Invoice.user_id == owner_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_or_404(self, invoice_id: UUID, owner_id: UUID) -> Invoice:
        """
        Get invoice by ID or raise 404.

        Raises:
            NotFoundError: If invoice not found or owned by someone else
        """
        invoice = await self.get_by_id(invoice_id, owner_id)
        if not invoice:
            logger.warning("Invoice %s not found for user %s", invoice_id, owner_id)
            raise NotFoundError("Invoice not found")
        return invoice

    async def list(
        self,
        owner_id: UUID,
        pagination: PaginationParams,
        status: InvoiceStatus | None = None,
        client_id: UUID | None = None,
        issue_date_from: date | None = None,
        issue_date_to: date | None = None,
        due_date_from: date | None = None,
        due_date_to: date | None = None,
        search: str | None = None,
    ) -> Tuple[List[Invoice], int]:
        """
        List invoices with pagination and filters.

        Date bounds are inclusive. `search` matches the invoice number or
        the client's company name.

        Returns:
            Tuple of (invoices list, total count)
        """
        conditions = [Invoice.user_id == owner_id]

        if status:
            conditions.append(Invoice.status == status)
        if client_id:
            conditions.append(Invoice.client_id == client_id)
        if issue_date_from:
            conditions.append(Invoice.issue_date >= issue_date_from)
        if issue_date_to:
            conditions.append(Invoice.issue_date <= issue_date_to)
        if due_date_from:
            conditions.append(Invoice.due_date >= due_date_from)
        if due_date_to:
            conditions.append(Invoice.due_date <= due_date_to)
        if search:
            search_filter = f"%{search}%"
            conditions.append(
                or_(
                    Invoice.invoice_number.ilike(search_filter),
                    Client.company_name.ilike(search_filter),
                )
            )

        count_query = (
            select(func.count(Invoice.id))
            .select_from(Invoice)
            .outerjoin(Client, Invoice.client_id == Client.id)
            .where(*conditions)
        )
        total_result = await self.db.execute(count_query)
        total = total_result.scalar() or 0

        query = (
            select(Invoice)
            .outerjoin(Client, Invoice.client_id == Client.id)
            .where(*conditions)
            .order_by(Invoice.created_at.desc(), Invoice.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        result = await self.db.execute(query)
        invoices = list(result.scalars().all())

        return invoices, total

    async def update(
        self, invoice: Invoice, owner_id: UUID, data: InvoiceUpdate
    ) -> Invoice:
        """
        Apply the provided fields to the invoice.

        Raises:
            NotFoundError: If a new client_id is not owned by the user
        """
        update_data = data.model_dump(exclude_unset=True)

        if update_data.get("client_id"):
            await self._ensure_client_owned(update_data["client_id"], owner_id)

        for field, value in update_data.items():
            setattr(invoice, field, value)

        await self.db.flush()

        logger.info("Invoice %s updated", invoice.id)
        return await self._reload(invoice.id)

    async def send(self, invoice: Invoice) -> Invoice:
        """Mark invoice as sent. Delivery happens outside this service."""
        invoice.status = InvoiceStatus.SENT
        await self.db.flush()

        logger.info("Invoice %s marked as sent", invoice.id)
        return await self._reload(invoice.id)

    async def delete(self, invoice: Invoice) -> None:
        """Delete invoice. Items and payments go with it (FK cascade)."""
        await self.db.delete(invoice)
        await self.db.flush()
        logger.info("Invoice %s deleted", invoice.id)

    async def _owned_ids(self, owner_id: UUID, invoice_ids: List[UUID]) -> List[UUID]:
        result = await self.db.execute(
            select(Invoice.id).where(
                Invoice.id.in_(invoice_ids),
                Invoice.user_id == owner_id,
            )
        )
        return list(result.scalars().all())

    async def bulk_delete(self, owner_id: UUID, invoice_ids: List[UUID]) -> int:
        """Delete the requested invoices the user owns; returns the count."""
        owned_ids = await self._owned_ids(owner_id, invoice_ids)
        if owned_ids:
            await self.db.execute(
                delete(Invoice).where(
                    Invoice.id.in_(owned_ids),
                    Invoice.user_id == owner_id,
                )
            )
        logger.info("Bulk deleted %d invoices for user %s", len(owned_ids), owner_id)
        return len(owned_ids)

    async def bulk_update_status(
        self,
        owner_id: UUID,
        invoice_ids: List[UUID],
        status: InvoiceStatus,
    ) -> int:
        """Set the status on the requested invoices the user owns; returns the count."""
        owned_ids = await self._owned_ids(owner_id, invoice_ids)
        if owned_ids:
            await self.db.execute(
                update(Invoice)
                .where(
                    Invoice.id.in_(owned_ids),
                    Invoice.user_id == owner_id,
                )
                .values(status=status)
            )
        logger.info(
            "Bulk set status %s on %d invoices for user %s",
            status.value, len(owned_ids), owner_id,
        )
        return len(owned_ids)

    # Line items. The parent invoice is always resolved through
    # get_or_404 first, so an item is only reachable by its invoice's owner.

    async def list_items(self, invoice: Invoice) -> List[InvoiceItem]:
        """Items of an invoice, oldest first."""
        result = await self.db.execute(
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id == invoice.id)
            .order_by(InvoiceItem.created_at.asc(), InvoiceItem.id)
        )
        return list(result.scalars().all())

    async def add_item(self, invoice: Invoice, data: InvoiceItemCreate) -> InvoiceItem:
        """Add a line item. Invoice totals are not recomputed."""
        item = InvoiceItem(invoice_id=invoice.id, **data.model_dump())

        self.db.add(item)
        await self.db.flush()
        await self.db.refresh(item)

        logger.info("Item %s added to invoice %s", item.id, invoice.id)
        return item

    async def get_item_or_404(self, invoice: Invoice, item_id: UUID) -> InvoiceItem:
        """
        Get a line item of the given invoice.

        Raises:
            NotFoundError: If the item does not exist on this invoice
        """
        result = await self.db.execute(
            select(InvoiceItem).where(
                InvoiceItem.id == item_id,
                InvoiceItem.invoice_id == invoice.id,
            )
        )
        item = result.scalar_one_or_none()
        if not item:
            logger.warning("Item %s not found on invoice %s", item_id, invoice.id)
            raise NotFoundError("Invoice item not found")
        return item

    async def update_item(
        self, item: InvoiceItem, data: InvoiceItemUpdate
    ) -> InvoiceItem:
        """Replace the item's fields."""
        for field, value in data.model_dump().items():
            setattr(item, field, value)

        await self.db.flush()
        await self.db.refresh(item)

        logger.info("Item %s updated", item.id)
        return item

    async def delete_item(self, item: InvoiceItem) -> None:
        """Delete a line item."""
        await self.db.delete(item)
        await self.db.flush()
        logger.info("Item %s deleted", item.id)
