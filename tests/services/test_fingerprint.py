"""Fingerprint: deterministic SHA-256 hex digests of caller addresses."""

import hashlib
import re

from app.services.fingerprint import fingerprint

HEX64 = re.compile(r"^[0-9a-f]{64}$")


def test_same_input_same_digest():
    assert fingerprint("192.168.0.1") == fingerprint("192.168.0.1")


def test_digest_is_64_lowercase_hex():
    for value in ["127.0.0.1", "::1", "", "unknown"]:
        assert HEX64.match(fingerprint(value))


def test_different_inputs_differ():
    assert fingerprint("10.0.0.1") != fingerprint("10.0.0.2")


def test_matches_plain_sha256():
    """No salt: digest equals the plain SHA-256 of the address."""
    expected = hashlib.sha256(b"203.0.113.7").hexdigest()
    assert fingerprint("203.0.113.7") == expected
