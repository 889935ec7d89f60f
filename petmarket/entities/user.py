# petmarket/entities/user.py

from sqlalchemy import Column, String, JSON, DateTime
from datetime import datetime, timezone
import uuid

from ..database.core import Base


class User(Base):
    """
    The user aggregate: credentials plus every list of mutable profile state.

    List columns are JSON and must be reassigned, not mutated in place,
    for SQLAlchemy to persist the change.
    """
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    liked_pets = Column(JSON, nullable=False, default=list)
    addresses = Column(JSON, nullable=False, default=list)
    cart = Column(JSON, nullable=False, default=list)
    card_entries = Column(JSON, nullable=False, default=list)
    orders = Column(JSON, nullable=False, default=list)

    def __repr__(self):
        return f"<User(username='{self.username}')>"
