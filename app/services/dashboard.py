"""
Dashboard Service.
Headline counts, recent invoices and the revenue chart.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Literal, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from app.models.invoice import Invoice, InvoiceStatus


RECENT_INVOICES_LIMIT = 10

Period = Literal["monthly", "yearly"]


def period_key(day: date, period: Period) -> str:
    """Bucket label: YYYY-MM for monthly, YYYY for yearly."""
    if period == "yearly":
        return f"{day.year:04d}"
    return f"{day.year:04d}-{day.month:02d}"


def group_revenue_by_period(
    rows: Iterable[Tuple[date, Decimal]],
    period: Period,
) -> List[Dict[str, Any]]:
    """Sum (issue_date, amount) pairs per period, sorted by period."""
    grouped: Dict[str, Decimal] = {}
    for issue_date, amount in rows:
        key = period_key(issue_date, period)
        grouped[key] = grouped.get(key, Decimal("0")) + amount

    return [
        {"period": key, "revenue": float(grouped[key])}
        for key in sorted(grouped)
    ]


class DashboardService:
    """Service for dashboard statistics."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _count(self, owner_id: UUID, *conditions) -> int:
        result = await self.db.execute(
            select(func.count(Invoice.id)).where(Invoice.user_id == owner_id, *conditions)
        )
        return result.scalar() or 0

    async def get_metrics(self, owner_id: UUID) -> Dict[str, Any]:
        """
        Invoice counts and paid revenue.

        Returns:
            totalInvoices, paidInvoices, pendingInvoices (sent or overdue)
            and totalRevenue (sum of paid totals)
        """
        revenue_result = await self.db.execute(
            select(func.sum(Invoice.total_amount)).where(
                Invoice.user_id == owner_id,
                Invoice.status == InvoiceStatus.PAID,
            )
        )
        total_revenue = revenue_result.scalar() or Decimal("0.00")

        return {
            "totalInvoices": await self._count(owner_id),
            "paidInvoices": await self._count(
                owner_id, Invoice.status == InvoiceStatus.PAID
            ),
            "pendingInvoices": await self._count(
                owner_id,
                Invoice.status.in_([InvoiceStatus.SENT, InvoiceStatus.OVERDUE]),
            ),
            "totalRevenue": float(total_revenue),
        }

    async def get_recent_invoices(
        self, owner_id: UUID, limit: int = RECENT_INVOICES_LIMIT
    ) -> List[Invoice]:
        """Newest invoices first, client embedded."""
        result = await self.db.execute(
            select(Invoice)
            .where(Invoice.user_id == owner_id)
            .order_by(Invoice.created_at.desc(), Invoice.id)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_revenue_chart(
        self, owner_id: UUID, period: Period = "monthly"
    ) -> List[Dict[str, Any]]:
        """Paid revenue grouped by issue date."""
        result = await self.db.execute(
            select(Invoice.issue_date, Invoice.total_amount).where(
                Invoice.user_id == owner_id,
                Invoice.status == InvoiceStatus.PAID,
            )
        )
        return group_revenue_by_period(result.all(), period)
