"""Request Log Service - records and lists accesses to endpoints"""
import json
from typing import Optional, List, Dict, Any

from app.config import settings
from app.models import RequestLog
from app.services.fingerprint import fingerprint
from app.services.store import HttpLogStore


class RequestLogService:
    """Append-only access history per key"""

    def __init__(self, store: HttpLogStore, page_size: int = settings.PAGE_SIZE):
        self.store = store
        self.page_size = page_size

    async def record(self, key: str, requester_address: str, metadata: Dict[str, Any]) -> RequestLog:
        """
        Log one access to key.

        Must only be called after a successful fetch of the endpoint.
        Metadata is stored as JSON with sorted keys.
        """
        return await self.store.insert_log_entry(
            key=key,
            request_sha=fingerprint(requester_address),
            metadata=json.dumps(metadata, sort_keys=True)
        )

    async def query(
        self,
        key: str,
        offset: int = 0,
        request_sha: Optional[str] = None
    ) -> List[RequestLog]:
        """One page of entries for key, newest first, optionally for a single fingerprint"""
        return await self.store.list_log_entries(
            key=key,
            limit=self.page_size,
            offset=offset,
            request_sha=request_sha
        )

    @staticmethod
    def decode_metadata(entry: RequestLog) -> Dict[str, Any]:
        return json.loads(entry.meta_data)
