from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, String

from cashier.core.constants import ACTIVATION_TABLE
from cashier.database.base import Base


class ActivationRecord(Base):
    """Single-row table: at most one activation per installation."""

    __tablename__ = ACTIVATION_TABLE

    id = Column(String(36), primary_key=True)
    is_activated = Column(Boolean, nullable=False, default=False)
    activation_key = Column(String)
    activated_at = Column(DateTime(timezone=True))
    computer_fingerprint = Column(String)
    expires_at = Column(DateTime(timezone=True))

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    last_updated_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))


__all__ = ["ActivationRecord"]
