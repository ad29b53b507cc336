"""
Dashboard endpoints.
Headline metrics, recent invoices and the revenue chart.
"""

from typing import Literal

from fastapi import APIRouter, Query

from app.api.deps import DbSession, CurrentUser
from app.schemas.invoice import InvoiceResponse
from app.services.dashboard import DashboardService


router = APIRouter()


@router.get(
    "/metrics",
    summary="Dashboard metrics",
    description="Invoice counts and paid revenue",
)
async def get_metrics(
    current_user: CurrentUser,
    db: DbSession,
) -> dict:
    service = DashboardService(db)
    return await service.get_metrics(current_user.id)


@router.get(
    "/recent-invoices",
    summary="Recent invoices",
    description="The 10 most recently created invoices",
)
async def get_recent_invoices(
    current_user: CurrentUser,
    db: DbSession,
) -> dict:
    service = DashboardService(db)
    invoices = await service.get_recent_invoices(current_user.id)
    return {
        "invoices": [
            InvoiceResponse.model_validate(i).model_dump(mode="json") for i in invoices
        ],
    }


@router.get(
    "/revenue-chart",
    summary="Revenue chart",
    description="Paid revenue grouped by month or year of issue",
)
async def get_revenue_chart(
    current_user: CurrentUser,
    db: DbSession,
    period: Literal["monthly", "yearly"] = Query("monthly"),
) -> dict:
    service = DashboardService(db)
    return {"chartData": await service.get_revenue_chart(current_user.id, period)}
