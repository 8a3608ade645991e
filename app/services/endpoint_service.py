import logging

from app.models import Endpoint
from app.services.exceptions import EndpointNotFoundError
from app.services.fingerprint import fingerprint
from app.services.store import HttpLogStore

logger = logging.getLogger(__name__)


class EndpointRegistry:
    """Endpoint Registry - registers and looks up canned responses by key"""

    def __init__(self, store: HttpLogStore):
        self.store = store

    async def create(self, key: str, payload: bytes, creator_address: str) -> Endpoint:
        """
        Register payload under key.

        No uniqueness check: a second create for the same key inserts a new
        row which becomes the current endpoint.
        """
        endpoint = await self.store.insert_endpoint(
            key=key,
            response=payload,
            creator_sha=fingerprint(creator_address)
        )
        logger.info(f"Created endpoint '{key}' ({len(payload)} bytes)")
        return endpoint

    async def fetch(self, key: str) -> Endpoint:
        """Return the current endpoint for key. Does not log the access."""
        endpoint = await self.store.get_current_endpoint(key)
        if endpoint is None:
            raise EndpointNotFoundError(key)
        return endpoint
