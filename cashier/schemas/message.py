from datetime import datetime

from cashier.schemas.base import CamelModel


class MessageCreate(CamelModel):
    message: str = ""


class MessageRead(CamelModel):
    id: str
    message: str
    timestamp: datetime
