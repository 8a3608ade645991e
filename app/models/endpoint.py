"""Endpoint Model - A registered key and its replayable response"""
from sqlalchemy import Column, Integer, String, Text, LargeBinary, DateTime
from sqlalchemy.sql import func
from app.database import Base


class Endpoint(Base):
    """Endpoint Model

    One row per create request. Keys are not unique: the row with the
    highest id for a key is the current response, older rows are history.
    """
    __tablename__ = "endpoints"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(Text, nullable=False, index=True)
    response = Column(LargeBinary, nullable=False)
    created_by_sha = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Endpoint(id={self.id}, key='{self.key}')>"
