"""
Invoice management endpoints.
CRUD, line items, sending and bulk actions.
"""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Query, status

from app.api.deps import DbSession, CurrentUser, Pagination
from app.models.invoice import InvoiceStatus
from app.schemas.invoice import (
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceResponse,
    InvoiceListResponse,
    InvoiceItemCreate,
    InvoiceItemUpdate,
    InvoiceItemResponse,
    InvoiceBulkAction,
    InvoiceBulkActionResponse,
)
from app.schemas.base import MessageResponse, PaginationMeta
from app.services.invoice import InvoiceService


router = APIRouter()


@router.get(
    "",
    response_model=InvoiceListResponse,
    summary="List invoices",
    description="Paginated list of the user's invoices, newest first, client embedded",
)
async def list_invoices(
    current_user: CurrentUser,
    db: DbSession,
    pagination: Pagination,
    status: InvoiceStatus | None = Query(None, description="Filter by status"),
    client_id: UUID | None = Query(None, description="Filter by client"),
    issue_date_from: date | None = Query(None),
    issue_date_to: date | None = Query(None),
    due_date_from: date | None = Query(None),
    due_date_to: date | None = Query(None),
    search: str | None = Query(None, description="Search invoice number or client name"),
) -> InvoiceListResponse:
    """List all invoices with pagination and filters."""
    service = InvoiceService(db)
    invoices, total = await service.list(
        owner_id=current_user.id,
        pagination=pagination,
        status=status,
        client_id=client_id,
        issue_date_from=issue_date_from,
        issue_date_to=issue_date_to,
        due_date_from=due_date_from,
        due_date_to=due_date_to,
        search=search,
    )

    return InvoiceListResponse(
        invoices=[InvoiceResponse.model_validate(i) for i in invoices],
        pagination=PaginationMeta.create(total, pagination),
    )


@router.post(
    "",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an invoice",
    description="The referenced client must belong to the user",
)
async def create_invoice(
    data: InvoiceCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> InvoiceResponse:
    """Create a new invoice."""
    service = InvoiceService(db)
    invoice = await service.create(current_user.id, data)
    return InvoiceResponse.model_validate(invoice)


@router.post(
    "/bulk-actions",
    response_model=InvoiceBulkActionResponse,
    summary="Bulk delete or status change",
    description="Only the user's own invoices are affected",
)
async def bulk_invoice_action(
    data: InvoiceBulkAction,
    current_user: CurrentUser,
    db: DbSession,
) -> InvoiceBulkActionResponse:
    service = InvoiceService(db)

    if data.action == "delete":
        affected = await service.bulk_delete(current_user.id, data.ids)
        verb = "Deleted"
    else:
        affected = await service.bulk_update_status(current_user.id, data.ids, data.status)
        verb = "Updated"

    return InvoiceBulkActionResponse(
        message=f"{verb} {affected} invoice(s) successfully",
        affected=affected,
    )


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    summary="Get an invoice",
)
async def get_invoice(
    invoice_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> InvoiceResponse:
    """Get invoice by ID."""
    service = InvoiceService(db)
    invoice = await service.get_or_404(invoice_id, current_user.id)
    return InvoiceResponse.model_validate(invoice)


@router.put(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    summary="Update an invoice",
)
async def update_invoice(
    invoice_id: UUID,
    data: InvoiceUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> InvoiceResponse:
    """Update an invoice."""
    service = InvoiceService(db)
    invoice = await service.get_or_404(invoice_id, current_user.id)
    invoice = await service.update(invoice, current_user.id, data)
    return InvoiceResponse.model_validate(invoice)


@router.delete(
    "/{invoice_id}",
    response_model=MessageResponse,
    summary="Delete an invoice",
)
async def delete_invoice(
    invoice_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> MessageResponse:
    """Delete an invoice and its items and payments."""
    service = InvoiceService(db)
    invoice = await service.get_or_404(invoice_id, current_user.id)
    await service.delete(invoice)
    return MessageResponse(message="Invoice deleted successfully")


@router.post(
    "/{invoice_id}/send",
    response_model=InvoiceResponse,
    summary="Send an invoice",
    description="Mark the invoice as sent",
)
async def send_invoice(
    invoice_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> InvoiceResponse:
    service = InvoiceService(db)
    invoice = await service.get_or_404(invoice_id, current_user.id)
    invoice = await service.send(invoice)
    return InvoiceResponse.model_validate(invoice)


# Line items

@router.get(
    "/{invoice_id}/items",
    response_model=list[InvoiceItemResponse],
    summary="List invoice items",
)
async def list_invoice_items(
    invoice_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> list[InvoiceItemResponse]:
    service = InvoiceService(db)
    invoice = await service.get_or_404(invoice_id, current_user.id)
    items = await service.list_items(invoice)
    return [InvoiceItemResponse.model_validate(item) for item in items]


@router.post(
    "/{invoice_id}/items",
    response_model=InvoiceItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an invoice item",
)
async def add_invoice_item(
    invoice_id: UUID,
    data: InvoiceItemCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> InvoiceItemResponse:
    service = InvoiceService(db)
    invoice = await service.get_or_404(invoice_id, current_user.id)
    item = await service.add_item(invoice, data)
    return InvoiceItemResponse.model_validate(item)


@router.put(
    "/{invoice_id}/items/{item_id}",
    response_model=InvoiceItemResponse,
    summary="Update an invoice item",
)
async def update_invoice_item(
    invoice_id: UUID,
    item_id: UUID,
    data: InvoiceItemUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> InvoiceItemResponse:
    service = InvoiceService(db)
    invoice = await service.get_or_404(invoice_id, current_user.id)
    item = await service.get_item_or_404(invoice, item_id)
    item = await service.update_item(item, data)
    return InvoiceItemResponse.model_validate(item)


@router.delete(
    "/{invoice_id}/items/{item_id}",
    response_model=MessageResponse,
    summary="Delete an invoice item",
)
async def delete_invoice_item(
    invoice_id: UUID,
    item_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> MessageResponse:
    service = InvoiceService(db)
    invoice = await service.get_or_404(invoice_id, current_user.id)
    item = await service.get_item_or_404(invoice, item_id)
    await service.delete_item(item)
    return MessageResponse(message="Invoice item deleted successfully")
