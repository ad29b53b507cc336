"""
Pytest configuration and fixtures.
"""

from datetime import date
from typing import AsyncGenerator
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401  registers every table on Base.metadata
from app.core.database import Base, get_db
from app.core.security import create_token_pair, get_password_hash
from app.main import app
from app.models.user import User


# In-memory SQLite, one connection shared by the whole test
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_PASSWORD = "testpassword123"


def _enable_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless asked
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        echo=False,
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database session override."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


async def _create_user(db_session: AsyncSession, email: str, full_name: str) -> User:
    user = User(
        email=email,
        hashed_password=get_password_hash(TEST_PASSWORD),
        full_name=full_name,
        is_active=True,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user."""
    return await _create_user(db_session, "test@example.com", "Test User")


@pytest.fixture
async def other_user(db_session: AsyncSession) -> User:
    """A second tenant, to check isolation."""
    return await _create_user(db_session, "other@example.com", "Other User")


@pytest.fixture
def other_headers(other_user: User) -> dict:
    """Authorization header for the second tenant."""
    tokens = create_token_pair(other_user.id, other_user.email)
    return {"Authorization": f"Bearer {tokens.access_token}"}


@pytest.fixture
async def auth_client(
    client: AsyncClient,
    test_user: User,
) -> AsyncClient:
    """Create authenticated test client."""
    response = await client.post(
        "/api/auth/login",
        json={
            "email": "test@example.com",
            "password": TEST_PASSWORD,
        },
    )
    tokens = response.json()

    client.headers["Authorization"] = f"Bearer {tokens['access_token']}"

    return client


def invoice_payload(client_id: str, **overrides) -> dict:
    """Valid invoice body for the given client."""
    payload = {
        "client_id": client_id,
        "invoice_number": "INV-001",
        "issue_date": date(2025, 1, 10).isoformat(),
        "due_date": date(2025, 2, 9).isoformat(),
        "payment_terms": "net30",
        "status": "draft",
        "subtotal": 1000,
        "tax_rate": 10,
        "tax_amount": 100,
        "discount": 0,
        "total_amount": 1100,
        "currency": "USD",
        "template": "professional",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_invoice():
    """Factory for valid invoice bodies."""
    return invoice_payload


@pytest.fixture
async def test_client_id(auth_client: AsyncClient) -> str:
    """A client owned by the test user."""
    response = await auth_client.post(
        "/api/clients",
        json={"company_name": "Acme Corp", "email": "billing@acme.com"},
    )
    return response.json()["id"]


@pytest.fixture
async def test_invoice_id(auth_client: AsyncClient, test_client_id: str) -> str:
    """An invoice owned by the test user."""
    response = await auth_client.post(
        "/api/invoices",
        json=invoice_payload(test_client_id),
    )
    return response.json()["id"]


@pytest.fixture
async def other_client_id(client: AsyncClient, other_headers: dict) -> str:
    """A client owned by the second tenant."""
    response = await client.post(
        "/api/clients",
        json={"company_name": "Other Co"},
        headers=other_headers,
    )
    return response.json()["id"]


@pytest.fixture
async def other_invoice_id(
    client: AsyncClient, other_headers: dict, other_client_id: str
) -> str:
    """An invoice owned by the second tenant."""
    response = await client.post(
        "/api/invoices",
        json=invoice_payload(other_client_id, invoice_number="OTHER-001"),
        headers=other_headers,
    )
    return response.json()["id"]
