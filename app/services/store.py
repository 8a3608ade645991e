"""Persistence queries for endpoints and request logs"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional, List
import logging

from app.models import Endpoint, RequestLog
from app.services.exceptions import StorageError

logger = logging.getLogger(__name__)


class HttpLogStore:
    """Store - the four query shapes used by the registry and the request log

    Every insert is committed on its own. Any SQLAlchemy failure is rolled
    back and surfaced as StorageError.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _fail(self, exc: SQLAlchemyError, operation: str):
        await self.db.rollback()
        logger.error(f"Storage error during {operation}: {exc}")
        raise StorageError(f"Storage failure during {operation}", operation) from exc

    async def insert_endpoint(self, key: str, response: bytes, creator_sha: str) -> Endpoint:
        """Insert a new endpoint row and return it with server-assigned fields"""
        endpoint = Endpoint(key=key, response=response, created_by_sha=creator_sha)
        try:
            self.db.add(endpoint)
            await self.db.commit()
            await self.db.refresh(endpoint)
        except SQLAlchemyError as e:
            await self._fail(e, "insert_endpoint")
        return endpoint

    async def insert_log_entry(self, key: str, request_sha: str, metadata: str) -> RequestLog:
        """Append one request log row"""
        entry = RequestLog(key=key, request_sha=request_sha, meta_data=metadata)
        try:
            self.db.add(entry)
            await self.db.commit()
            await self.db.refresh(entry)
        except SQLAlchemyError as e:
            await self._fail(e, "insert_log_entry")
        return entry

    async def get_current_endpoint(self, key: str) -> Optional[Endpoint]:
        """Latest endpoint row for key (highest id), or None"""
        stmt = (
            select(Endpoint)
            .where(Endpoint.key == key)
            .order_by(Endpoint.id.desc())
            .limit(1)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            await self._fail(e, "get_current_endpoint")
        return result.scalar_one_or_none()

    async def list_log_entries(
        self,
        key: str,
        limit: int,
        offset: int = 0,
        request_sha: Optional[str] = None
    ) -> List[RequestLog]:
        """Log rows for key, newest first. Empty list when nothing matches."""
        conditions = [RequestLog.key == key]
        if request_sha:
            conditions.append(RequestLog.request_sha == request_sha)

        stmt = select(RequestLog).where(
            and_(*conditions)
        ).order_by(
            RequestLog.created_at.desc(),
            RequestLog.id.desc()
        ).limit(limit).offset(offset)

        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            await self._fail(e, "list_log_entries")
        return list(result.scalars().all())
