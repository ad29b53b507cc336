"""
Payment endpoints.
Payments are recorded against invoices owned by the user.
"""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Query, status

from app.api.deps import DbSession, CurrentUser, Pagination
from app.models.payment import PaymentMethod
from app.schemas.payment import (
    PaymentCreate,
    PaymentUpdate,
    PaymentResponse,
    PaymentListResponse,
)
from app.schemas.base import MessageResponse, PaginationMeta
from app.services.payment import PaymentService


router = APIRouter()


@router.get(
    "",
    response_model=PaymentListResponse,
    summary="List payments",
)
async def list_payments(
    current_user: CurrentUser,
    db: DbSession,
    pagination: Pagination,
    invoice_id: UUID | None = Query(None, description="Filter by invoice"),
    payment_date_from: date | None = Query(None),
    payment_date_to: date | None = Query(None),
    payment_method: PaymentMethod | None = Query(None),
) -> PaymentListResponse:
    """List all payments with pagination and filters."""
    service = PaymentService(db)
    payments, total = await service.list(
        owner_id=current_user.id,
        pagination=pagination,
        invoice_id=invoice_id,
        payment_date_from=payment_date_from,
        payment_date_to=payment_date_to,
        payment_method=payment_method,
    )

    return PaymentListResponse(
        payments=[PaymentResponse.model_validate(p) for p in payments],
        pagination=PaginationMeta.create(total, pagination),
    )


@router.post(
    "",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a payment",
    description="The referenced invoice must belong to the user",
)
async def create_payment(
    data: PaymentCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> PaymentResponse:
    """Record a payment."""
    service = PaymentService(db)
    payment = await service.create(current_user.id, data)
    return PaymentResponse.model_validate(payment)


@router.get(
    "/{payment_id}",
    response_model=PaymentResponse,
    summary="Get a payment",
)
async def get_payment(
    payment_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> PaymentResponse:
    service = PaymentService(db)
    payment = await service.get_or_404(payment_id, current_user.id)
    return PaymentResponse.model_validate(payment)


@router.put(
    "/{payment_id}",
    response_model=PaymentResponse,
    summary="Update a payment",
)
async def update_payment(
    payment_id: UUID,
    data: PaymentUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> PaymentResponse:
    service = PaymentService(db)
    payment = await service.get_or_404(payment_id, current_user.id)
    payment = await service.update(payment, data)
    return PaymentResponse.model_validate(payment)


@router.delete(
    "/{payment_id}",
    response_model=MessageResponse,
    summary="Delete a payment",
)
async def delete_payment(
    payment_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> MessageResponse:
    service = PaymentService(db)
    payment = await service.get_or_404(payment_id, current_user.id)
    await service.delete(payment)
    return MessageResponse(message="Payment deleted successfully")
