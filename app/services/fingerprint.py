"""Fingerprinting of caller addresses before they are persisted"""
import hashlib


def fingerprint(value: str) -> str:
    """Return the SHA-256 hex digest of value.

    No salt is applied, so the same address always maps to the same
    64-character digest across restarts.
    """
    return hashlib.sha256(value.encode("utf-8")).hexdigest()
