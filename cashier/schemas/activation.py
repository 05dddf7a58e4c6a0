from datetime import datetime
from typing import Optional

from cashier.schemas.base import CamelModel


class ActivationStatus(CamelModel):
    id: str = ""
    is_activated: bool = False
    activation_key: Optional[str] = None
    activated_at: Optional[datetime] = None
    computer_fingerprint: Optional[str] = None
    expires_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    last_updated_at: Optional[datetime] = None


class ActivationRequest(CamelModel):
    activation_key: str = ""
    computer_fingerprint: str = ""


class ActivationResponse(CamelModel):
    success: bool
    message: str
    activated_at: Optional[str] = None
    expiration_date: Optional[str] = None


class ActivationStatusResponse(CamelModel):
    is_activated: bool
    activation_key: Optional[str] = None
    activated_at: Optional[str] = None
    expiration_date: Optional[str] = None
    computer_fingerprint: Optional[str] = None
