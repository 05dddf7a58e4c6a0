import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from cashier.core.dates import utc_now
from cashier.core.errors import PersistenceError
from cashier.database.session import SessionLocal

logger = logging.getLogger(__name__)


class SqlRepository:
    """Opens one session per operation; nothing is held between calls."""

    resource = "records"

    def __init__(self, session_factory=None, *, clock=utc_now):
        self._session_factory = session_factory or SessionLocal
        self._clock = clock

    @contextmanager
    def _session(self):
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Store operation on %s failed", self.resource)
            raise PersistenceError(f"Database error while accessing {self.resource}") from exc
        finally:
            db.close()
