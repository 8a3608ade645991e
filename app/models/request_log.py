from sqlalchemy import Column, Integer, String, Text, DateTime, Index
from sqlalchemy.sql import func
from app.database import Base


class RequestLog(Base):
    """Request Log Model

    Append-only record of one successful fetch of an endpoint.
    Only the requester's fingerprint is stored, never the raw address.
    """
    __tablename__ = "requests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(Text, nullable=False, index=True)
    request_sha = Column(String(64), nullable=False)
    meta_data = Column("metadata", Text, nullable=False)  # JSON string of request headers
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index('idx_requests_key_sha', 'key', 'request_sha'),
    )

    def __repr__(self):
        return f"<RequestLog(id={self.id}, key='{self.key}', request_sha='{self.request_sha[:12]}')>"
