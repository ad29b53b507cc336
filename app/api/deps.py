"""
API Dependencies.
Common dependencies for authentication, database sessions and pagination.
"""

import logging
from typing import Annotated
from fastapi import Depends, Query, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.core.config import settings
from app.core.database import get_db
from app.core.errors import AuthenticationError
from app.core.security import decode_token
from app.models.user import User
from app.schemas.base import PaginationParams, coerce_limit, coerce_page


logger = logging.getLogger(__name__)

# Bearer token scheme; the auth cookie is accepted as a fallback
security = HTTPBearer(auto_error=False)


def _extract_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    if credentials:
        return credentials.credentials
    return request.cookies.get(settings.AUTH_COOKIE_NAME)


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Resolve the authenticated user from the JWT access token.

    The token is read from the Authorization header, or from the auth
    cookie set at login when no header is sent.

    Raises:
        AuthenticationError: missing/invalid/expired token, a refresh
            token used as access token, or an unknown or inactive user
    """
    token = _extract_token(request, credentials)
    if not token:
        logger.warning("Request without credentials")
        raise AuthenticationError()

    token_data = decode_token(token)
    if token_data is None:
        logger.warning("Invalid or expired token")
        raise AuthenticationError()

    if token_data.token_type != "access":
        logger.warning("Wrong token type: %s", token_data.token_type)
        raise AuthenticationError()

    result = await db.execute(
        select(User).where(User.id == token_data.user_id)
    )
    user = result.scalar_one_or_none()

    if user is None:
        logger.warning("User %s not found", token_data.user_id)
        raise AuthenticationError()

    if not user.is_active:
        logger.warning("Inactive account: %s", user.email)
        raise AuthenticationError()

    logger.debug("Authenticated user: %s", user.email)
    return user


def get_pagination(
    page: str | None = Query(None, description="Page number (defaults to 1)"),
    limit: str | None = Query(None, description="Page size, 1-100 (defaults to 10)"),
) -> PaginationParams:
    """Pagination never rejects a request; bad values fall back to defaults."""
    return PaginationParams(page=coerce_page(page), limit=coerce_limit(limit))


# Type aliases for cleaner route signatures
CurrentUser = Annotated[User, Depends(get_current_user)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
Pagination = Annotated[PaginationParams, Depends(get_pagination)]
