"""SQLAlchemy model for the user directory."""

from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.sql import expression

from app.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a directory user."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, unique=True, index=True)
    username = Column(String(100), nullable=False)
    email = Column(String(120), nullable=False)
    pref_in_app = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    pref_email = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
