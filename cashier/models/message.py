import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, String, Text

from cashier.core.constants import MESSAGES_TABLE
from cashier.database.base import Base


class Message(Base):
    __tablename__ = MESSAGES_TABLE

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    message = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (Index("idx_messages_timestamp", "timestamp"),)


__all__ = ["Message"]
