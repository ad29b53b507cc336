"""
Authentication endpoint tests.
"""

import pytest
from httpx import AsyncClient

from app.core.security import create_token_pair


@pytest.mark.asyncio
async def test_register_user(client: AsyncClient):
    """Test user registration."""
    response = await client.post(
        "/api/auth/register",
        json={
            "email": "newuser@example.com",
            "password": "password123",
            "full_name": "New User",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "newuser@example.com"
    assert data["full_name"] == "New User"
    assert "hashed_password" not in data


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, test_user):
    """Test registration with duplicate email."""
    response = await client.post(
        "/api/auth/register",
        json={
            "email": "test@example.com",  # Same as test_user
            "password": "password123",
        },
    )

    assert response.status_code == 409
    assert "already exists" in response.json()["error"]


@pytest.mark.asyncio
async def test_register_invalid_body(client: AsyncClient):
    """Every invalid field is reported."""
    response = await client.post(
        "/api/auth/register",
        json={"email": "not-an-email", "password": "short"},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Invalid input"
    fields = {d["field"] for d in data["details"]}
    assert {"email", "password"} <= fields


@pytest.mark.asyncio
async def test_login_success(client: AsyncClient, test_user):
    """Test successful login."""
    response = await client.post(
        "/api/auth/login",
        json={
            "email": "test@example.com",
            "password": "testpassword123",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert "access_token" in data
    assert "refresh_token" in data
    assert data["token_type"] == "bearer"
    assert "access_token=" in response.headers["set-cookie"]


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, test_user):
    """Test login with wrong password."""
    response = await client.post(
        "/api/auth/login",
        json={
            "email": "test@example.com",
            "password": "wrongpassword",
        },
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}


@pytest.mark.asyncio
async def test_refresh_token(client: AsyncClient, test_user):
    """A refresh token yields a new pair."""
    tokens = create_token_pair(test_user.id, test_user.email)

    response = await client.post(
        "/api/auth/refresh",
        json={"refresh_token": tokens.refresh_token},
    )

    assert response.status_code == 200
    assert "access_token" in response.json()


@pytest.mark.asyncio
async def test_refresh_with_access_token_rejected(client: AsyncClient, test_user):
    tokens = create_token_pair(test_user.id, test_user.email)

    response = await client.post(
        "/api/auth/refresh",
        json={"refresh_token": tokens.access_token},
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_get_current_user(auth_client: AsyncClient):
    """Test getting current user profile."""
    response = await auth_client.get("/api/auth/me")

    assert response.status_code == 200
    data = response.json()
    assert data["email"] == "test@example.com"


@pytest.mark.asyncio
async def test_protected_route_without_token(client: AsyncClient):
    """Test accessing protected route without token."""
    response = await client.get("/api/clients")

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


@pytest.mark.asyncio
async def test_invalid_token(client: AsyncClient):
    response = await client.get(
        "/api/clients",
        headers={"Authorization": "Bearer not-a-jwt"},
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


@pytest.mark.asyncio
async def test_refresh_token_used_as_access_token(client: AsyncClient, test_user):
    tokens = create_token_pair(test_user.id, test_user.email)

    response = await client.get(
        "/api/clients",
        headers={"Authorization": f"Bearer {tokens.refresh_token}"},
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_session_cookie_authenticates(client: AsyncClient, test_user):
    """The access_token cookie works without an Authorization header."""
    tokens = create_token_pair(test_user.id, test_user.email)

    response = await client.get(
        "/api/auth/me",
        headers={"Cookie": f"access_token={tokens.access_token}"},
    )

    assert response.status_code == 200
    assert response.json()["email"] == "test@example.com"


@pytest.mark.asyncio
async def test_inactive_user_rejected(client: AsyncClient, test_user, db_session):
    """A deactivated account gets 401, not 403."""
    tokens = create_token_pair(test_user.id, test_user.email)
    test_user.is_active = False
    await db_session.flush()

    response = await client.get(
        "/api/auth/me",
        headers={"Authorization": f"Bearer {tokens.access_token}"},
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_logout_clears_cookie(client: AsyncClient):
    response = await client.post("/api/auth/logout")

    assert response.status_code == 200
    assert "access_token=" in response.headers["set-cookie"]
