"""
Reports endpoint.
Charts, KPIs and the per-client table for a preset date window.
"""

from fastapi import APIRouter, Query

from app.api.deps import DbSession, CurrentUser
from app.services.reports import ReportService


router = APIRouter()


@router.get(
    "",
    summary="Reports",
    description=(
        "dateRange is one of last-30-days, last-3-months, last-6-months "
        "or last-year; anything else means last-6-months"
    ),
)
async def get_reports(
    current_user: CurrentUser,
    db: DbSession,
    date_range: str | None = Query(None, alias="dateRange"),
) -> dict:
    service = ReportService(db)
    return await service.get_report(current_user.id, date_range)
