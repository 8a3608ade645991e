"""EndpointRegistry: create/fetch semantics with latest-wins keys."""

import pytest

from app.services.exceptions import EndpointNotFoundError
from app.services.fingerprint import fingerprint


async def test_create_then_fetch_round_trips_bytes(registry):
    payload = b'{"hello":"world"}'
    await registry.create("greet", payload, "10.0.0.1")

    endpoint = await registry.fetch("greet")

    assert endpoint.response == payload


async def test_create_stores_creator_fingerprint_not_address(registry):
    endpoint = await registry.create("greet", b"{}", "10.0.0.1")

    assert endpoint.created_by_sha == fingerprint("10.0.0.1")
    assert "10.0.0.1" not in endpoint.created_by_sha


async def test_non_utf8_payload_is_kept_verbatim(registry):
    payload = b"\xff\xfe\x00binary"
    await registry.create("blob", payload, "10.0.0.1")

    assert (await registry.fetch("blob")).response == payload


async def test_second_create_shadows_first(registry):
    await registry.create("k", b"v1", "10.0.0.1")
    await registry.create("k", b"v2", "10.0.0.2")

    assert (await registry.fetch("k")).response == b"v2"


async def test_fetch_unknown_key_raises(registry):
    with pytest.raises(EndpointNotFoundError) as exc_info:
        await registry.fetch("unknown")

    assert exc_info.value.key == "unknown"
    assert str(exc_info.value) == "No entry: unknown"
