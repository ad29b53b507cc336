"""
Reports service.

Loads the user's invoices and clients once, then aggregates in memory.
The builder functions are pure so they can be exercised without a database.
"""

import logging
from collections import OrderedDict
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Iterable, NamedTuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.client import Client
from app.models.invoice import Invoice, InvoiceStatus


logger = logging.getLogger(__name__)

DATE_RANGE_DAYS = {
    "last-30-days": 30,
    "last-3-months": 90,
    "last-6-months": 180,
    "last-year": 365,
}
DEFAULT_DATE_RANGE = "last-6-months"

UNKNOWN_CLIENT = "Unknown"
PENDING_STATUSES = (InvoiceStatus.SENT, InvoiceStatus.OVERDUE)


class InvoiceRow(NamedTuple):
    status: InvoiceStatus
    total_amount: Decimal
    created_at: datetime
    client_name: str | None


def range_start(date_range: str | None, now: datetime | None = None) -> datetime:
    """Start of the reporting window. Unknown presets mean the last 6 months."""
    days = DATE_RANGE_DAYS.get(date_range or DEFAULT_DATE_RANGE)
    if days is None:
        days = DATE_RANGE_DAYS[DEFAULT_DATE_RANGE]
    return (now or datetime.now(timezone.utc)) - timedelta(days=days)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _month_key(value: datetime) -> tuple[int, int]:
    return value.year, value.month


def month_label(value: datetime) -> str:
    """e.g. "Jan 2025"."""
    return value.strftime("%b %Y")


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


def _percent(numerator: float, denominator: float) -> float:
    return numerator * 100 / denominator if denominator else 0.0


def _in_range(invoices: Iterable[InvoiceRow], start: datetime) -> list[InvoiceRow]:
    return [inv for inv in invoices if _as_utc(inv.created_at) >= start]


def _paid(invoices: Iterable[InvoiceRow]) -> list[InvoiceRow]:
    return [inv for inv in invoices if inv.status == InvoiceStatus.PAID]


def build_revenue_chart(invoices: list[InvoiceRow], start: datetime) -> list[dict]:
    """Paid revenue per month over the window, oldest month first."""
    months: dict[tuple[int, int], dict[str, Any]] = {}
    for inv in _paid(_in_range(invoices, start)):
        key = _month_key(inv.created_at)
        if key not in months:
            months[key] = {"month": month_label(inv.created_at), "revenue": Decimal("0")}
        months[key]["revenue"] += inv.total_amount

    return [
        {"month": months[key]["month"], "revenue": float(months[key]["revenue"])}
        for key in sorted(months)
    ]


def build_payment_status_chart(invoices: list[InvoiceRow]) -> list[dict]:
    """Amount totals over all invoices. Overdue amounts also count as pending."""
    totals: dict[InvoiceStatus, Decimal] = {}
    for inv in invoices:
        totals[inv.status] = totals.get(inv.status, Decimal("0")) + inv.total_amount

    def total(*statuses: InvoiceStatus) -> float:
        return float(sum((totals.get(s, Decimal("0")) for s in statuses), Decimal("0")))

    return [
        {"name": "Paid", "value": total(InvoiceStatus.PAID)},
        {"name": "Pending", "value": total(*PENDING_STATUSES)},
        {"name": "Overdue", "value": total(InvoiceStatus.OVERDUE)},
    ]


def build_client_performance_chart(
    client_created: Iterable[datetime], start: datetime
) -> list[dict]:
    """New clients per month in the window, with a running total."""
    counts: dict[tuple[int, int], int] = {}
    labels: dict[tuple[int, int], str] = {}
    for created_at in client_created:
        if _as_utc(created_at) < start:
            continue
        key = _month_key(created_at)
        counts[key] = counts.get(key, 0) + 1
        labels[key] = month_label(created_at)

    chart = []
    cumulative = 0
    for key in sorted(counts):
        cumulative += counts[key]
        chart.append({
            "month": labels[key],
            "newClients": counts[key],
            "activeClients": cumulative,
        })
    return chart


def build_kpis(invoices: list[InvoiceRow], start: datetime) -> dict:
    """
    Headline numbers.

    `totalRevenue` only counts paid invoices in the window; the average and
    the collection rate are taken over every invoice.
    """
    total_revenue = float(sum(
        (inv.total_amount for inv in _paid(_in_range(invoices, start))),
        Decimal("0"),
    ))
    total_count = len(invoices)
    paid_count = len(_paid(invoices))
    outstanding = float(sum(
        (inv.total_amount for inv in invoices if inv.status in PENDING_STATUSES),
        Decimal("0"),
    ))

    return {
        "totalRevenue": total_revenue,
        "averageInvoiceValue": _ratio(total_revenue, total_count),
        "collectionRate": _percent(paid_count, total_count),
        "outstandingAmount": outstanding,
    }


def build_reports_table(invoices: list[InvoiceRow]) -> list[dict]:
    """Per-client summary, in order of each client's first invoice."""
    groups: "OrderedDict[str, dict[str, Any]]" = OrderedDict()
    for inv in invoices:
        name = inv.client_name or UNKNOWN_CLIENT
        group = groups.setdefault(name, {
            "count": 0,
            "total": Decimal("0"),
            "paid": Decimal("0"),
            "outstanding": Decimal("0"),
        })
        group["count"] += 1
        group["total"] += inv.total_amount
        if inv.status == InvoiceStatus.PAID:
            group["paid"] += inv.total_amount
        else:
            group["outstanding"] += inv.total_amount

    return [
        {
            "id": index,
            "client": name,
            "invoiceCount": group["count"],
            "totalRevenue": float(group["total"]),
            "avgInvoiceValue": _ratio(float(group["total"]), group["count"]),
            "paymentRate": _percent(float(group["paid"]), float(group["total"])),
            "outstanding": float(group["outstanding"]),
        }
        for index, (name, group) in enumerate(groups.items(), start=1)
    ]


class ReportService:
    """Service for the reports page."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _invoice_rows(self, owner_id: UUID) -> list[InvoiceRow]:
        result = await self.db.execute(
            select(
                Invoice.status,
                Invoice.total_amount,
                Invoice.created_at,
                Client.company_name,
            )
            .outerjoin(Client, Invoice.client_id == Client.id)
            .where(Invoice.user_id == owner_id)
            .order_by(Invoice.created_at, Invoice.id)
        )
        return [InvoiceRow(*row) for row in result.all()]

    async def _client_created_dates(self, owner_id: UUID) -> list[datetime]:
        result = await self.db.execute(
            select(Client.created_at).where(Client.user_id == owner_id)
        )
        return list(result.scalars().all())

    async def get_report(
        self,
        owner_id: UUID,
        date_range: str | None = None,
        now: datetime | None = None,
    ) -> dict:
        """Build every chart, KPI and table for the requested window."""
        start = range_start(date_range, now)
        invoices = await self._invoice_rows(owner_id)
        client_created = await self._client_created_dates(owner_id)

        logger.debug(
            "Report for user %s from %s over %d invoices",
            owner_id, start.isoformat(), len(invoices),
        )
        return {
            "revenueChart": build_revenue_chart(invoices, start),
            "paymentStatusChart": build_payment_status_chart(invoices),
            "clientPerformanceChart": build_client_performance_chart(client_created, start),
            "kpis": build_kpis(invoices, start),
            "reportsTable": build_reports_table(invoices),
        }
