"""
Invoice schemas for request/response validation.
"""

from datetime import date, datetime
from typing import Literal, Optional
from uuid import UUID
from decimal import Decimal
from pydantic import Field, model_validator

from app.models.invoice import InvoiceStatus
from app.schemas.base import BaseSchema, Money, PaginationMeta
from app.schemas.client import ClientSummary


class InvoiceItemCreate(BaseSchema):
    """Schema for creating an invoice item."""

    description: str = Field(..., min_length=1)
    quantity: Money = Field(..., ge=Decimal("0.01"))
    rate: Money = Field(..., ge=0)
    amount: Money = Field(..., ge=0)


class InvoiceItemUpdate(InvoiceItemCreate):
    """Items are replaced as a whole on update."""
    pass


class InvoiceItemResponse(BaseSchema):
    """Invoice item response schema."""

    id: UUID
    invoice_id: UUID
    description: str
    quantity: Money
    rate: Money
    amount: Money
    created_at: datetime
    updated_at: datetime


class InvoiceCreate(BaseSchema):
    """
    Schema for creating an invoice.

    Amounts are computed by the caller; they are only bounds-checked here.
    """

    client_id: UUID
    invoice_number: str = Field(..., min_length=1, max_length=50)
    issue_date: date
    due_date: date
    payment_terms: str = Field(..., min_length=1, max_length=50)
    status: InvoiceStatus = InvoiceStatus.DRAFT
    subtotal: Money = Field(..., ge=0)
    tax_rate: Money = Field(..., ge=0)
    tax_amount: Money = Field(..., ge=0)
    discount: Money = Field(..., ge=0)
    total_amount: Money = Field(..., ge=0)
    currency: str = Field(..., min_length=1, max_length=10)
    notes: str | None = None
    terms: str | None = None
    payment_instructions: str | None = None
    template: str = Field(..., min_length=1, max_length=50)


class InvoiceUpdate(BaseSchema):
    """Only provided fields change; null is accepted for the free-text fields only."""

    client_id: UUID = None
    invoice_number: str = Field(None, min_length=1, max_length=50)
    issue_date: date = None
    due_date: date = None
    payment_terms: str = Field(None, min_length=1, max_length=50)
    status: InvoiceStatus = None
    subtotal: Money = Field(None, ge=0)
    tax_rate: Money = Field(None, ge=0)
    tax_amount: Money = Field(None, ge=0)
    discount: Money = Field(None, ge=0)
    total_amount: Money = Field(None, ge=0)
    currency: str = Field(None, min_length=1, max_length=10)
    notes: str | None = None
    terms: str | None = None
    payment_instructions: str | None = None
    template: str = Field(None, min_length=1, max_length=50)


class InvoiceResponse(BaseSchema):
    """Invoice response schema."""

    id: UUID
    user_id: UUID
    client_id: UUID
    invoice_number: str
    issue_date: date
    due_date: date
    payment_terms: str
    status: InvoiceStatus
    subtotal: Money
    tax_rate: Money
    tax_amount: Money
    discount: Money
    total_amount: Money
    currency: str
    notes: str | None
    terms: str | None
    payment_instructions: str | None
    template: str
    client: Optional[ClientSummary] = None
    created_at: datetime
    updated_at: datetime


class InvoiceListResponse(BaseSchema):
    """Paginated invoice list response."""

    invoices: list[InvoiceResponse]
    pagination: PaginationMeta


class InvoiceBulkAction(BaseSchema):
    """Bulk delete or status change over a set of invoice ids."""

    action: Literal["delete", "update_status"]
    ids: list[UUID] = Field(..., min_length=1)
    status: InvoiceStatus | None = None

    @model_validator(mode="after")
    def status_required_for_update(self) -> "InvoiceBulkAction":
        if self.action == "update_status" and self.status is None:
            raise ValueError("Status is required when action is update_status")
        return self


class InvoiceBulkActionResponse(BaseSchema):
    """Bulk action result; `affected` counts only the caller's invoices."""

    message: str
    affected: int
