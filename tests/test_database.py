"""
Request session scope and service module tests.
"""

import typing
from uuid import UUID

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core import database
from app.models.user import User
from app.services.client import ClientService
from app.services.invoice import InvoiceService


@pytest.fixture
def session_factory(test_engine, monkeypatch):
    """Point get_db at the test engine."""
    factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr(database, "AsyncSessionLocal", factory)
    return factory


async def _stored_emails(factory) -> set:
    async with factory() as session:
        result = await session.execute(select(User.email))
        return set(result.scalars().all())


def _user(email: str) -> User:
    return User(email=email, hashed_password="not-a-hash", full_name="Scope", is_active=True)


@pytest.mark.asyncio
async def test_get_db_commits_when_handler_returns(session_factory):
    scope = database.get_db()
    session = await scope.__anext__()
    session.add(_user("kept@example.com"))
    await session.flush()

    with pytest.raises(StopAsyncIteration):
        await scope.__anext__()

    assert "kept@example.com" in await _stored_emails(session_factory)


@pytest.mark.asyncio
async def test_get_db_rolls_back_when_handler_fails(session_factory):
    scope = database.get_db()
    session = await scope.__anext__()
    session.add(_user("discarded@example.com"))
    await session.flush()

    with pytest.raises(RuntimeError):
        await scope.athrow(RuntimeError("handler failed"))

    assert "discarded@example.com" not in await _stored_emails(session_factory)


def test_bulk_signatures_resolve():
    """Services define a `list` method; later annotations must still resolve."""
    hints = typing.get_type_hints(ClientService.bulk_delete)
    assert hints["client_ids"] == typing.List[UUID]

    hints = typing.get_type_hints(InvoiceService.bulk_update_status)
    assert hints["invoice_ids"] == typing.List[UUID]
