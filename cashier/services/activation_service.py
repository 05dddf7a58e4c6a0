import logging
from datetime import datetime, timedelta
from typing import Optional

from cashier.config import get_settings
from cashier.core.dates import ensure_utc, utc_now
from cashier.core.errors import PersistenceError, ValidationError
from cashier.repositories.activation import ActivationRepository
from cashier.schemas.activation import ActivationStatus

logger = logging.getLogger(__name__)


def license_expired(expires_at: Optional[datetime], now: datetime) -> bool:
    """Expiry is strict: a license is still valid at exactly ``expires_at``."""
    if expires_at is None:
        return False
    return ensure_utc(now) > ensure_utc(expires_at)


class ActivationService:
    """Single-seat license stored as one activation record.

    Store failures never escape from here; they are logged and the
    installation is treated as not activated.
    """

    def __init__(
        self,
        repository: Optional[ActivationRepository] = None,
        *,
        validity_days: Optional[int] = None,
        clock=utc_now,
    ):
        self._repository = repository or ActivationRepository()
        if validity_days is None:
            validity_days = get_settings().LICENSE_VALIDITY_DAYS
        self._validity = timedelta(days=validity_days)
        self._clock = clock

    def get_status(self) -> Optional[ActivationStatus]:
        try:
            return self._repository.get()
        except PersistenceError:
            logger.exception("Error reading activation status")
            return None

    def is_license_valid(self) -> bool:
        status = self.get_status()
        if status is None or not status.is_activated:
            return False
        if license_expired(status.expires_at, self._clock()):
            logger.warning("License has expired")
            return False
        return True

    def activate(self, activation_key: Optional[str], computer_fingerprint: Optional[str] = None) -> Optional[ActivationStatus]:
        """Store a fresh license; returns None when it could not be saved."""
        if activation_key is None or not activation_key.strip():
            raise ValidationError("Activation key is required")

        now = self._clock()
        status = ActivationStatus(
            is_activated=True,
            activation_key=activation_key.strip(),
            activated_at=now,
            computer_fingerprint=(computer_fingerprint or "").strip() or None,
            expires_at=now + self._validity,
        )
        try:
            saved = self._repository.save_singleton(status)
        except PersistenceError:
            logger.exception("Error saving activation status")
            return None
        logger.info("Application activated, license expires %s", saved.expires_at)
        return saved

    def deactivate(self) -> bool:
        try:
            self._repository.delete_all()
        except PersistenceError:
            logger.exception("Error resetting activation")
            return False
        logger.info("Activation removed")
        return True


__all__ = ["ActivationService", "license_expired"]
