"""
Authentication service.
Handles user registration, login, and token management.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.core.errors import AuthenticationError, ConflictError
from app.models.user import User
from app.schemas.auth import RegisterRequest, LoginRequest
from app.core.security import (
    get_password_hash,
    verify_password,
    create_token_pair,
    decode_token,
    TokenPair,
)


logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def register(self, data: RegisterRequest) -> User:
        """
        Register a new user.

        Raises:
            ConflictError: If email already exists
        """
        if await self.get_user_by_email(data.email):
            raise ConflictError("An account with this email already exists")

        user = User(
            email=data.email,
            hashed_password=get_password_hash(data.password),
            full_name=data.full_name,
        )

        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)

        logger.info("User registered: %s", user.id)
        return user

    async def login(self, data: LoginRequest) -> tuple[User, TokenPair]:
        """
        Authenticate user and generate tokens.

        Raises:
            AuthenticationError: If credentials are invalid or the account
                is deactivated
        """
        user = await self.get_user_by_email(data.email)

        if not user or not verify_password(data.password, user.hashed_password):
            logger.warning("Failed login for %s", data.email)
            raise AuthenticationError("Invalid email or password")

        if not user.is_active:
            logger.warning("Login attempt on inactive account %s", user.id)
            raise AuthenticationError("Account is deactivated")

        return user, create_token_pair(user.id, user.email)

    async def refresh_token(self, refresh_token: str) -> TokenPair:
        """
        Generate new token pair from refresh token.

        Raises:
            AuthenticationError: If refresh token is invalid or its user is
                gone or inactive
        """
        token_data = decode_token(refresh_token)

        if token_data is None or token_data.token_type != "refresh":
            raise AuthenticationError("Invalid refresh token")

        user = await self.get_user_by_id(token_data.user_id)
        if not user or not user.is_active:
            raise AuthenticationError()

        return create_token_pair(user.id, user.email)

    async def get_user_by_id(self, user_id: UUID) -> User | None:
        """Get user by ID."""
        result = await self.db.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email."""
        result = await self.db.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()
