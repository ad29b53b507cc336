"""
Client schemas for request/response validation.
"""

from datetime import date, datetime
from typing import Literal
from uuid import UUID
from pydantic import EmailStr, Field

from app.models.client import BillingFrequency, ClientStatus
from app.schemas.base import BaseSchema, HttpUrlStr, Money, PaginationMeta


class ClientCreate(BaseSchema):
    """
    Schema for creating a new client.

    `email` and `avatar_url` accept "" as "not provided"; the service
    stores it as null.
    """

    company_name: str = Field(..., min_length=1, max_length=255)
    contact_person: str | None = Field(None, max_length=255)
    email: EmailStr | Literal[""] | None = None
    phone: str | None = Field(None, max_length=50)
    address: str | None = None
    status: ClientStatus = ClientStatus.ACTIVE
    avatar_url: HttpUrlStr | Literal[""] | None = None
    billing_frequency: BillingFrequency = BillingFrequency.MONTHLY


class ClientUpdate(BaseSchema):
    """
    Schema for updating a client. Only provided fields change.

    Required columns may be omitted but not set to null.
    """

    company_name: str = Field(None, min_length=1, max_length=255)
    contact_person: str | None = Field(None, max_length=255)
    email: EmailStr | Literal[""] | None = None
    phone: str | None = Field(None, max_length=50)
    address: str | None = None
    status: ClientStatus = None
    avatar_url: HttpUrlStr | Literal[""] | None = None
    billing_frequency: BillingFrequency = None


class ClientResponse(BaseSchema):
    """Client response schema."""

    id: UUID
    user_id: UUID
    company_name: str
    contact_person: str | None
    email: str | None
    phone: str | None
    address: str | None
    avatar_url: str | None
    status: ClientStatus
    billing_frequency: BillingFrequency
    total_billed: Money
    outstanding_balance: Money
    last_invoice_date: date | None
    created_at: datetime
    updated_at: datetime


class ClientSummary(BaseSchema):
    """Client fields embedded in invoice payloads."""

    id: UUID
    company_name: str


class ClientListResponse(BaseSchema):
    """Paginated client list response."""

    clients: list[ClientResponse]
    pagination: PaginationMeta


class ClientBulkDelete(BaseSchema):
    """Bulk delete request."""

    clientIds: list[UUID] = Field(..., min_length=1, max_length=50)


class ClientBulkDeleteResponse(BaseSchema):
    """Bulk delete result. Only ids owned by the caller are deleted."""

    message: str
    deletedCount: int
    deletedIds: list[UUID]
