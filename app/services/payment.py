"""
Payment service.
Payments belong to invoices; ownership is always checked through the invoice.
"""

import logging
from datetime import date
from typing import List, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from app.core.errors import NotFoundError
from app.models.invoice import Invoice
from app.models.payment import Payment, PaymentMethod
from app.schemas.base import PaginationParams
from app.schemas.payment import PaymentCreate, PaymentUpdate
from app.services.invoice import InvoiceService


logger = logging.getLogger(__name__)


class PaymentService:
    """Service for payment operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, owner_id: UUID, data: PaymentCreate) -> Payment:
        """
        Record a payment against an invoice.

        Invoice status and client balances are left untouched.

        Raises:
            NotFoundError: If the invoice is not found or not owned
        """
        await InvoiceService(self.db).get_or_404(data.invoice_id, owner_id)

        payment = Payment(**data.model_dump())

        self.db.add(payment)
        await self.db.flush()
        await self.db.refresh(payment)

        logger.info("Payment %s recorded on invoice %s", payment.id, payment.invoice_id)
        return payment

    async def get_by_id(self, payment_id: UUID, owner_id: UUID) -> Payment | None:
        """Get payment by ID, ensuring owner access through invoice."""
        result = await self.db.execute(
            select(Payment)
            .join(Invoice)
            .where(
                Payment.id == payment_id,
                Invoice.user_id == owner_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_or_404(self, payment_id: UUID, owner_id: UUID) -> Payment:
        """Get payment by ID or raise 404."""
        payment = await self.get_by_id(payment_id, owner_id)
        if not payment:
            logger.warning("Payment %s not found for user %s", payment_id, owner_id)
            raise NotFoundError("Payment not found")
        return payment

    async def list(
        self,
        owner_id: UUID,
        pagination: PaginationParams,
        invoice_id: UUID | None = None,
        payment_date_from: date | None = None,
        payment_date_to: date | None = None,
        payment_method: PaymentMethod | None = None,
    ) -> Tuple[List[Payment], int]:
        """List all payments with pagination and filters."""
        conditions = [Invoice.user_id == owner_id]

        if invoice_id:
            conditions.append(Payment.invoice_id == invoice_id)
        if payment_date_from:
            conditions.append(Payment.payment_date >= payment_date_from)
        if payment_date_to:
            conditions.append(Payment.payment_date <= payment_date_to)
        if payment_method:
            conditions.append(Payment.payment_method == payment_method)

        total_result = await self.db.execute(
            select(func.count(Payment.id)).join(Invoice).where(*conditions)
        )
        total = total_result.scalar() or 0

        result = await self.db.execute(
            select(Payment)
            .join(Invoice)
            .where(*conditions)
            .order_by(Payment.created_at.desc(), Payment.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        payments = list(result.scalars().all())

        return payments, total

    async def update(self, payment: Payment, data: PaymentUpdate) -> Payment:
        """Apply the provided fields to the payment."""
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(payment, field, value)

        await self.db.flush()
        await self.db.refresh(payment)

        logger.info("Payment %s updated", payment.id)
        return payment

    async def delete(self, payment: Payment) -> None:
        """Delete a payment."""
        await self.db.delete(payment)
        await self.db.flush()
        logger.info("Payment %s deleted", payment.id)
