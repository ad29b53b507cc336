"""
Client model for managing customers.
Each client belongs to a user (the tenant).
"""

import uuid
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlalchemy import String, Text, ForeignKey, Numeric, Date, Uuid, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class ClientStatus(str, Enum):
    """Client status enumeration."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class BillingFrequency(str, Enum):
    """How often a client is billed."""
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"
    ONE_TIME = "one-time"


class Client(BaseModel):
    """
    Client model representing a customer.

    Attributes:
        user_id: Owner of the client
        company_name: Company or person name
        contact_person: Person to address invoices to
        status: active, inactive or pending
        billing_frequency: Billing cadence
        total_billed: Running total, maintained outside this API
        outstanding_balance: Running balance, maintained outside this API
    """

    __tablename__ = "clients"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    company_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    contact_person: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    email: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    phone: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )
    address: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    avatar_url: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )
    status: Mapped[ClientStatus] = mapped_column(
        SQLEnum(ClientStatus, values_callable=lambda e: [m.value for m in e]),
        default=ClientStatus.ACTIVE,
        nullable=False,
    )
    billing_frequency: Mapped[BillingFrequency] = mapped_column(
        SQLEnum(BillingFrequency, values_callable=lambda e: [m.value for m in e]),
        default=BillingFrequency.MONTHLY,
        nullable=False,
    )

    total_billed: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        default=Decimal("0.00"),
        nullable=False,
    )
    outstanding_balance: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        default=Decimal("0.00"),
        nullable=False,
    )
    last_invoice_date: Mapped[Optional[date]] = mapped_column(
        Date,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, company='{self.company_name}', user_id={self.user_id})>"
