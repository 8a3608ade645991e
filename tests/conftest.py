"""Shared test fixtures: in-memory SQLite database and FastAPI test clients.

Every test gets a fresh database; the get_db dependency is overridden so
routes use it. Clients can be created with a chosen peer address to
exercise fingerprinting.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import app.models  # noqa: E402,F401
from app.database import Base, get_db  # noqa: E402
from app.main import app as fastapi_app  # noqa: E402
from app.services.endpoint_service import EndpointRegistry  # noqa: E402
from app.services.request_log_service import RequestLogService  # noqa: E402
from app.services.store import HttpLogStore  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def store(test_db):
    return HttpLogStore(test_db)


@pytest.fixture
def registry(store):
    return EndpointRegistry(store)


@pytest.fixture
def request_log(store):
    return RequestLogService(store, page_size=10)


@pytest.fixture
async def make_client(test_session_factory):
    """Factory for test clients; make_client("10.0.0.1") sets the peer address."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    clients = []

    def _make(address: str = "127.0.0.1") -> AsyncClient:
        c = AsyncClient(
            transport=ASGITransport(app=fastapi_app, client=(address, 50000)),
            base_url="http://test",
        )
        clients.append(c)
        return c

    yield _make

    for c in clients:
        await c.aclose()
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client()
