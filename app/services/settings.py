"""
Settings service.
User settings and profile rows are created lazily, on first access.
"""

import logging
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.profile import Profile
from app.models.settings import UserSettings, default_settings


logger = logging.getLogger(__name__)


class SettingsService:
    """Service for user settings and profile."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_or_create(self, owner_id: UUID) -> UserSettings:
        """Return the user's settings, creating them with defaults if absent."""
        result = await self.db.execute(
            select(UserSettings).where(UserSettings.user_id == owner_id)
        )
        user_settings = result.scalar_one_or_none()
        if user_settings:
            return user_settings

        user_settings = UserSettings(user_id=owner_id, **default_settings())
        self.db.add(user_settings)
        await self.db.flush()
        await self.db.refresh(user_settings)

        logger.info("Default settings created for user %s", owner_id)
        return user_settings

    async def update(self, owner_id: UUID, data: BaseModel) -> UserSettings:
        """
        Write the fields of `data` onto the user's settings.

        Works for the full settings body as well as the business and
        notification subsets.
        """
        user_settings = await self.get_or_create(owner_id)

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(user_settings, field, value)

        await self.db.flush()
        await self.db.refresh(user_settings)

        logger.info("Settings updated for user %s", owner_id)
        return user_settings

    async def get_or_create_profile(self, owner_id: UUID) -> Profile:
        """Return the user's profile, creating an empty one if absent."""
        result = await self.db.execute(
            select(Profile).where(Profile.id == owner_id)
        )
        profile = result.scalar_one_or_none()
        if profile:
            return profile

        profile = Profile(id=owner_id)
        self.db.add(profile)
        await self.db.flush()
        await self.db.refresh(profile)

        logger.info("Empty profile created for user %s", owner_id)
        return profile

    async def update_profile(self, owner_id: UUID, data: BaseModel) -> Profile:
        """Apply the provided profile fields."""
        profile = await self.get_or_create_profile(owner_id)

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(profile, field, value)

        await self.db.flush()
        await self.db.refresh(profile)

        logger.info("Profile updated for user %s", owner_id)
        return profile
