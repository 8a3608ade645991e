from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.requests import ClientDisconnect
from datetime import datetime, timezone
from typing import Optional, List
import logging

from app.database import get_db
from app.schemas.endpoint import RequestLogResponse, MessageResponse
from app.services.endpoint_service import EndpointRegistry
from app.services.exceptions import EndpointNotFoundError, TransportReadError
from app.services.request_log_service import RequestLogService
from app.services.store import HttpLogStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Endpoints"])

JSON_MEDIA_TYPE = "application/json"


def get_store(db: AsyncSession = Depends(get_db)) -> HttpLogStore:
    return HttpLogStore(db)


def get_registry(store: HttpLogStore = Depends(get_store)) -> EndpointRegistry:
    return EndpointRegistry(store)


def get_request_log(store: HttpLogStore = Depends(get_store)) -> RequestLogService:
    return RequestLogService(store)


def as_utc(value: datetime) -> datetime:
    """Database timestamps are UTC; SQLite hands them back without tzinfo"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def caller_address(request: Request) -> str:
    """Peer address of the caller as seen by the transport"""
    if request.client is None or not request.client.host:
        return "unknown"
    return request.client.host


async def read_payload(request: Request, key: str) -> bytes:
    """Read the complete request body, or fail before anything is stored"""
    try:
        return await request.body()
    except ClientDisconnect as e:
        logger.warning(f"Client disconnected while sending body for '{key}'")
        raise TransportReadError(f"Incomplete request body for: {key}") from e


@router.post("/{key}", status_code=status.HTTP_201_CREATED)
@router.post("/{key}/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_endpoint(
    key: str,
    request: Request,
    registry: EndpointRegistry = Depends(get_registry)
):
    """
    Register the raw request body as the response for key

    The body is stored as-is and echoed back.

    Example:
    ```
    POST /api/greet
    Body: {"hello": "world"}
    ```
    """
    payload = await read_payload(request, key)
    await registry.create(key, payload, caller_address(request))

    return Response(
        content=payload,
        status_code=status.HTTP_201_CREATED,
        media_type=JSON_MEDIA_TYPE
    )


@router.get("/{key}", responses={404: {"model": MessageResponse}})
@router.get("/{key}/", include_in_schema=False)
async def fetch_endpoint(
    key: str,
    request: Request,
    registry: EndpointRegistry = Depends(get_registry),
    request_log: RequestLogService = Depends(get_request_log)
):
    """
    Replay the current response for key and log the access

    Example:
    ```
    GET /api/greet
    ```
    """
    try:
        endpoint = await registry.fetch(key)
    except EndpointNotFoundError as e:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": str(e)}
        )

    await request_log.record(key, caller_address(request), dict(request.headers))

    return Response(content=endpoint.response, media_type=JSON_MEDIA_TYPE)


@router.get(
    "/{key}/logs",
    response_model=List[RequestLogResponse],
    responses={404: {"model": MessageResponse}}
)
@router.get("/{key}/logs/", response_model=List[RequestLogResponse], include_in_schema=False)
async def list_request_logs(
    key: str,
    offset: int = Query(0, ge=0, description="Number of newest entries to skip"),
    sha: Optional[str] = Query(None, description="Only entries from this requester fingerprint"),
    request_log: RequestLogService = Depends(get_request_log)
):
    """
    List recent accesses to key, newest first, one page at a time

    Example:
    ```
    GET /api/greet/logs?offset=10&sha=9f86d081...
    ```
    """
    entries = await request_log.query(key, offset=offset, request_sha=sha)

    if not entries:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": f"No entry (or logs): {key}"}
        )

    return [
        RequestLogResponse(
            created_at=as_utc(entry.created_at),
            request_sha=entry.request_sha,
            metadata=request_log.decode_metadata(entry)
        )
        for entry in entries
    ]


@router.get("/{key}/logs.txt", response_class=PlainTextResponse)
@router.get("/{key}/logs.txt/", response_class=PlainTextResponse, include_in_schema=False)
async def list_request_logs_text(
    key: str,
    offset: int = Query(0, ge=0, description="Number of newest entries to skip"),
    sha: Optional[str] = Query(None, description="Only entries from this requester fingerprint"),
    request_log: RequestLogService = Depends(get_request_log)
):
    """
    Plain-text variant of the log listing: one `created_at<TAB>request_sha` line per entry
    """
    entries = await request_log.query(key, offset=offset, request_sha=sha)

    if not entries:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    lines = [f"{as_utc(entry.created_at).isoformat()}\t{entry.request_sha}" for entry in entries]
    return PlainTextResponse("\n".join(lines))
