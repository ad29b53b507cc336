"""
Authentication endpoints.
Register, login, refresh token, logout.
"""

from fastapi import APIRouter, Response, status

from app.api.deps import DbSession, CurrentUser
from app.core.config import settings
from app.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenPair,
    RefreshTokenRequest,
)
from app.schemas.base import MessageResponse
from app.schemas.user import UserResponse
from app.services.auth import AuthService


router = APIRouter()


def _set_auth_cookie(response: Response, access_token: str) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=access_token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite="lax",
    )


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Create a new user account",
)
async def register(
    data: RegisterRequest,
    db: DbSession,
) -> UserResponse:
    """Register a new user."""
    service = AuthService(db)
    user = await service.register(data)
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    response_model=TokenPair,
    summary="Login",
    description="Log in with email and password; also sets the session cookie",
)
async def login(
    data: LoginRequest,
    response: Response,
    db: DbSession,
) -> TokenPair:
    """Log in and obtain JWT tokens."""
    service = AuthService(db)
    _, tokens = await service.login(data)
    _set_auth_cookie(response, tokens.access_token)
    return tokens


@router.post(
    "/refresh",
    response_model=TokenPair,
    summary="Refresh tokens",
    description="Exchange a refresh token for a new token pair",
)
async def refresh_token(
    data: RefreshTokenRequest,
    response: Response,
    db: DbSession,
) -> TokenPair:
    """Refresh JWT tokens."""
    service = AuthService(db)
    tokens = await service.refresh_token(data.refresh_token)
    _set_auth_cookie(response, tokens.access_token)
    return tokens


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Logout",
    description="Clear the session cookie",
)
async def logout(response: Response) -> MessageResponse:
    response.delete_cookie(settings.AUTH_COOKIE_NAME)
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Current user",
    description="Information about the logged-in user",
)
async def get_current_user(
    current_user: CurrentUser,
) -> UserResponse:
    """Return the logged-in user."""
    return UserResponse.model_validate(current_user)
