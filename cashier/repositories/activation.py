import uuid
from typing import Optional

from sqlalchemy import delete, select

from cashier.core.dates import ensure_utc
from cashier.models.activation import ActivationRecord
from cashier.repositories.base import SqlRepository
from cashier.schemas.activation import ActivationStatus

_DATETIME_FIELDS = ("activated_at", "expires_at", "created_at", "last_updated_at")


def _to_status(row: ActivationRecord) -> ActivationStatus:
    status = ActivationStatus.model_validate(row)
    for field in _DATETIME_FIELDS:
        setattr(status, field, ensure_utc(getattr(status, field)))
    return status


class ActivationRepository(SqlRepository):
    resource = "activation"

    def get(self) -> Optional[ActivationStatus]:
        with self._session() as db:
            row = db.execute(select(ActivationRecord).limit(1)).scalars().first()
            return _to_status(row) if row is not None else None

    def save_singleton(self, status: ActivationStatus) -> ActivationStatus:
        """Replace whatever is stored with ``status`` in one transaction."""
        now = self._clock()
        with self._session() as db:
            db.execute(delete(ActivationRecord))
            row = ActivationRecord(
                id=str(uuid.uuid4()),
                is_activated=status.is_activated,
                activation_key=status.activation_key,
                activated_at=status.activated_at,
                computer_fingerprint=status.computer_fingerprint,
                expires_at=status.expires_at,
                created_at=now,
                last_updated_at=now,
            )
            db.add(row)
            db.commit()
            return _to_status(row)

    def delete_all(self) -> int:
        with self._session() as db:
            result = db.execute(delete(ActivationRecord))
            db.commit()
            return result.rowcount


__all__ = ["ActivationRepository"]
