"""Endpoint Schemas - Response Models"""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Any, Dict


class RequestLogResponse(BaseModel):
    """One entry of an endpoint's request log"""
    created_at: datetime
    request_sha: str = Field(..., description="SHA-256 fingerprint of the requester address")
    metadata: Dict[str, Any] = Field(..., description="Request headers captured at access time")


class MessageResponse(BaseModel):
    """Error body for missing endpoints or logs"""
    message: str
