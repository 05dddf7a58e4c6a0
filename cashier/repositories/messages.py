from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import func, select

from cashier.core.dates import ensure_utc
from cashier.models.message import Message
from cashier.repositories.base import SqlRepository
from cashier.schemas.message import MessageRead


def _to_read(row: Message) -> MessageRead:
    read = MessageRead.model_validate(row)
    read.timestamp = ensure_utc(read.timestamp)
    return read


class MessageRepository(SqlRepository):
    resource = "messages"

    def add(self, text: str, timestamp: Optional[datetime] = None) -> MessageRead:
        with self._session() as db:
            row = Message(message=text, timestamp=timestamp or self._clock())
            db.add(row)
            db.commit()
            return _to_read(row)

    def add_many(self, entries: Iterable[tuple[str, datetime]]) -> int:
        with self._session() as db:
            rows = [Message(message=text, timestamp=timestamp) for text, timestamp in entries]
            db.add_all(rows)
            db.commit()
            return len(rows)

    def list_newest_first(self) -> list[MessageRead]:
        with self._session() as db:
            rows = db.execute(select(Message).order_by(Message.timestamp.desc())).scalars().all()
            return [_to_read(row) for row in rows]

    def count(self) -> int:
        with self._session() as db:
            return db.execute(select(func.count(Message.id))).scalar_one()


__all__ = ["MessageRepository"]
