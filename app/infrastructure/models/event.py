"""SQLAlchemy model for ingested events."""

from sqlalchemy import JSON, Column, DateTime, Integer, String

from app.infrastructure.database import Base


class EventModel(Base):
    """Database representation of an ingested event."""

    __tablename__ = "event"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(String(36), nullable=False, unique=True, index=True)
    type = Column(String(50), nullable=False)
    source_user_id = Column(String(64), nullable=False)
    target_user_id = Column(String(64), nullable=False, index=True)
    data = Column(JSON, nullable=False, default=dict)
    timestamp = Column(DateTime(), nullable=False)


__all__ = ["EventModel"]
