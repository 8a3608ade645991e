"""Pydantic Schemas for Responses"""
from app.schemas.endpoint import (
    RequestLogResponse,
    MessageResponse,
)

__all__ = [
    "RequestLogResponse",
    "MessageResponse",
]
