"""
Payment model for tracking invoice payments.
A payment has no owner column: it belongs to whoever owns its invoice.
"""

import uuid
from typing import Optional
from decimal import Decimal
from datetime import date
from enum import Enum
from sqlalchemy import String, Text, ForeignKey, Numeric, Date, Uuid, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class PaymentMethod(str, Enum):
    """Payment method enumeration."""
    BANK_TRANSFER = "bank_transfer"
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    CHECK = "check"
    CASH = "cash"
    OTHER = "other"


class Payment(BaseModel):
    """
    Payment model.

    Attributes:
        invoice_id: Foreign key to the invoice
        amount: Payment amount
        payment_date: Date of payment
        payment_method: Method of payment
        reference_number: Check number, transaction ID, etc.
        notes: Additional notes about the payment
    """

    __tablename__ = "payments"

    invoice_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("invoices.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    amount: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False,
    )
    payment_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
    )
    payment_method: Mapped[PaymentMethod] = mapped_column(
        SQLEnum(PaymentMethod, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    reference_number: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )
    notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Payment(id={self.id}, amount={self.amount}, method='{self.payment_method}')>"
