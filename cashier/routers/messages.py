from fastapi import APIRouter, Depends

from cashier.dependencies import get_message_service
from cashier.schemas.base import ApiResult
from cashier.schemas.message import MessageCreate, MessageRead
from cashier.services.message_service import MessageService

router = APIRouter(prefix="/api/messages", tags=["Messages"])


@router.get("", response_model=list[MessageRead])
def list_messages(service: MessageService = Depends(get_message_service)):
    return service.list_messages()


@router.post("", response_model=ApiResult)
def save_message(payload: MessageCreate, service: MessageService = Depends(get_message_service)):
    service.save_message(payload.message)
    return ApiResult(message="Message saved successfully")


__all__ = ["router"]
