# petmarket/entities/pet.py

from sqlalchemy import Column, String, Text, DateTime
from datetime import datetime, timezone
import uuid

from ..database.core import Base


class Pet(Base):
    """
    SQLAlchemy model for a pet listing.

    `added_by` is the owner's user id as plain text, not a foreign key.
    `price` is free text.
    """
    __tablename__ = 'pets'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    pname = Column(String, nullable=True)
    pdesc = Column(Text, nullable=True)
    price = Column(String, nullable=True)
    category = Column(String, nullable=True)
    contact_number = Column(String, nullable=True)
    pimage = Column(String, nullable=True)
    added_by = Column(String, nullable=True, index=True)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    def __repr__(self):
        return f"<Pet(pname='{self.pname}', added_by='{self.added_by}')>"
