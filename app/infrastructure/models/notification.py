"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from app.domain.entities import NOTIFICATION_STATUS_SENT
from app.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    notification_id = Column(String(36), nullable=False, unique=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    type = Column(String(50), nullable=False)
    content = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=NOTIFICATION_STATUS_SENT)
    timestamp = Column(DateTime(), nullable=False, index=True)


__all__ = ["NotificationModel"]
