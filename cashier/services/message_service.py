from typing import Optional

from cashier.core.errors import ValidationError
from cashier.repositories.messages import MessageRepository
from cashier.schemas.message import MessageRead


class MessageService:
    def __init__(self, repository: Optional[MessageRepository] = None):
        self._repository = repository or MessageRepository()

    def save_message(self, text: Optional[str]) -> MessageRead:
        if text is None or not text.strip():
            raise ValidationError("Message cannot be empty or whitespace.")
        return self._repository.add(text)

    def list_messages(self) -> list[MessageRead]:
        return self._repository.list_newest_first()
