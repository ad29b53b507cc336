"""
Payment schemas for request/response validation.
"""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID
from pydantic import Field

from app.models.payment import PaymentMethod
from app.schemas.base import BaseSchema, Money, PaginationMeta


class PaymentCreate(BaseSchema):
    """Schema for creating a payment."""

    invoice_id: UUID
    amount: Money = Field(..., ge=Decimal("0.01"))
    payment_date: date
    payment_method: PaymentMethod
    reference_number: str | None = Field(None, max_length=100)
    notes: str | None = None


class PaymentUpdate(BaseSchema):
    """Schema for updating a payment. The invoice cannot change."""

    amount: Money = Field(None, ge=Decimal("0.01"))
    payment_date: date = None
    payment_method: PaymentMethod = None
    reference_number: str | None = Field(None, max_length=100)
    notes: str | None = None


class PaymentResponse(BaseSchema):
    """Payment response schema."""

    id: UUID
    invoice_id: UUID
    amount: Money
    payment_date: date
    payment_method: PaymentMethod
    reference_number: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime


class PaymentListResponse(BaseSchema):
    """Paginated payment list response."""

    payments: list[PaymentResponse]
    pagination: PaginationMeta
