import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from cashier.core.activation_gate import ActivationGate
from cashier.core.dates import isoformat_z
from cashier.core.errors import ValidationError
from cashier.dependencies import get_activation_gate, get_activation_service
from cashier.schemas.activation import (
    ActivationRequest,
    ActivationResponse,
    ActivationStatusResponse,
)
from cashier.schemas.base import ApiResult
from cashier.services.activation_service import ActivationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/activation", tags=["Activation"])


def build_status_response(service: ActivationService) -> ActivationStatusResponse:
    license_record = service.get_status()
    return ActivationStatusResponse(
        is_activated=service.is_license_valid(),
        activation_key=license_record.activation_key if license_record else None,
        activated_at=isoformat_z(license_record.activated_at) if license_record else None,
        expiration_date=isoformat_z(license_record.expires_at) if license_record else None,
        computer_fingerprint=license_record.computer_fingerprint if license_record else None,
    )


@router.get("/status", response_model=ActivationStatusResponse)
def get_activation_status(service: ActivationService = Depends(get_activation_service)):
    return build_status_response(service)


@router.post("/activate", response_model=ActivationResponse)
def activate(
    payload: ActivationRequest,
    service: ActivationService = Depends(get_activation_service),
    gate: ActivationGate = Depends(get_activation_gate),
):
    if not payload.activation_key.strip():
        raise ValidationError("Clave de activación requerida")

    saved = service.activate(payload.activation_key, payload.computer_fingerprint)
    gate.reset()
    if saved is None:
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Error al guardar la licencia"},
        )
    return ActivationResponse(
        success=True,
        message="Aplicación activada exitosamente",
        activated_at=isoformat_z(saved.activated_at),
        expiration_date=isoformat_z(saved.expires_at),
    )


@router.delete("/deactivate", response_model=ApiResult)
def deactivate(
    service: ActivationService = Depends(get_activation_service),
    gate: ActivationGate = Depends(get_activation_gate),
):
    removed = service.deactivate()
    gate.reset()
    if not removed:
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Error al desactivar la aplicación"},
        )
    return ApiResult(message="Aplicación desactivada exitosamente")


__all__ = ["router"]
