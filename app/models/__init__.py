"""Database Models"""
from app.models.endpoint import Endpoint
from app.models.request_log import RequestLog

__all__ = [
    "Endpoint",
    "RequestLog",
]
