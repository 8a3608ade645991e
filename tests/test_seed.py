"""Seed script: registers sample endpoints once."""

from scripts.seed import SAMPLE_ENDPOINTS, seed_database
from app.services.store import HttpLogStore


async def test_seed_creates_sample_endpoints(test_session_factory, test_db):
    created = await seed_database(test_session_factory)

    assert created == list(SAMPLE_ENDPOINTS)
    assert await HttpLogStore(test_db).get_current_endpoint("greet") is not None


async def test_seed_is_idempotent(test_session_factory):
    await seed_database(test_session_factory)

    assert await seed_database(test_session_factory) == []
