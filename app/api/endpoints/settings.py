"""
Settings endpoints.
Full settings, business and notification subsets, and the user profile.
Rows are created with defaults on first access.
"""

from fastapi import APIRouter

from app.api.deps import DbSession, CurrentUser
from app.schemas.settings import (
    SettingsUpdate,
    SettingsResponse,
    BusinessSettingsUpdate,
    BusinessSettingsResponse,
    NotificationSettingsUpdate,
    NotificationSettingsResponse,
    ProfileUpdate,
    ProfileResponse,
)
from app.services.settings import SettingsService


router = APIRouter()


@router.get("", response_model=SettingsResponse, summary="Get settings")
async def get_settings(
    current_user: CurrentUser,
    db: DbSession,
) -> SettingsResponse:
    service = SettingsService(db)
    user_settings = await service.get_or_create(current_user.id)
    return SettingsResponse.model_validate(user_settings)


@router.put("", response_model=SettingsResponse, summary="Update settings")
async def update_settings(
    data: SettingsUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> SettingsResponse:
    service = SettingsService(db)
    user_settings = await service.update(current_user.id, data)
    return SettingsResponse.model_validate(user_settings)


@router.get(
    "/business",
    response_model=BusinessSettingsResponse,
    summary="Get business settings",
)
async def get_business_settings(
    current_user: CurrentUser,
    db: DbSession,
) -> BusinessSettingsResponse:
    service = SettingsService(db)
    user_settings = await service.get_or_create(current_user.id)
    return BusinessSettingsResponse.model_validate(user_settings)


@router.put(
    "/business",
    response_model=BusinessSettingsResponse,
    summary="Update business settings",
)
async def update_business_settings(
    data: BusinessSettingsUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> BusinessSettingsResponse:
    service = SettingsService(db)
    user_settings = await service.update(current_user.id, data)
    return BusinessSettingsResponse.model_validate(user_settings)


@router.get(
    "/notifications",
    response_model=NotificationSettingsResponse,
    summary="Get notification settings",
)
async def get_notification_settings(
    current_user: CurrentUser,
    db: DbSession,
) -> NotificationSettingsResponse:
    service = SettingsService(db)
    user_settings = await service.get_or_create(current_user.id)
    return NotificationSettingsResponse.model_validate(user_settings)


@router.put(
    "/notifications",
    response_model=NotificationSettingsResponse,
    summary="Update notification settings",
)
async def update_notification_settings(
    data: NotificationSettingsUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> NotificationSettingsResponse:
    service = SettingsService(db)
    user_settings = await service.update(current_user.id, data)
    return NotificationSettingsResponse.model_validate(user_settings)


@router.get("/profile", response_model=ProfileResponse, summary="Get profile")
async def get_profile(
    current_user: CurrentUser,
    db: DbSession,
) -> ProfileResponse:
    service = SettingsService(db)
    profile = await service.get_or_create_profile(current_user.id)
    return ProfileResponse.model_validate(profile)


@router.put("/profile", response_model=ProfileResponse, summary="Update profile")
async def update_profile(
    data: ProfileUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> ProfileResponse:
    service = SettingsService(db)
    profile = await service.update_profile(current_user.id, data)
    return ProfileResponse.model_validate(profile)
