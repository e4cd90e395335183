"""Test fixtures for the boarding house backend."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from boardinghouse.core.config import get_settings
from boardinghouse.db.base import Base
from boardinghouse.db.session import dispose_engine, get_sessionmaker
from boardinghouse.main import app
from boardinghouse.models import Caretaker, Owner, Room, RoomStatus


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()

    await dispose_engine(db_url)
    engine = create_async_engine(db_url, future=True)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    yield
    await dispose_engine(db_url)


@pytest_asyncio.fixture()
async def session(reset_database: None, db_url: str) -> AsyncIterator[AsyncSession]:
    """Yield a session on a database seeded with staff and three rooms."""
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as db_session:
        owner = Owner(owner_id="O001", first_name="Olivia", last_name="Reyes")
        caretaker = Caretaker(
            caretaker_id="C001",
            owner_id="O001",
            first_name="Carlos",
            last_name="Santos",
        )
        db_session.add_all([owner, caretaker])
        db_session.add_all(
            [
                Room(room_id="R101", floor="1", rent_amount=Decimal("3500.00")),
                Room(room_id="R102", floor="1", rent_amount=Decimal("3500.00")),
                Room(
                    room_id="R201",
                    floor="2",
                    rent_amount=Decimal("4200.00"),
                    status=RoomStatus.MAINTENANCE,
                ),
            ]
        )
        await db_session.commit()
        yield db_session


@pytest_asyncio.fixture()
async def client(session: AsyncSession) -> AsyncIterator[AsyncClient]:
    """Yield an async client against the seeded database."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
