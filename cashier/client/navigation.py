import logging
from typing import Optional

from cashier.client.api import ApiError, CashierApiClient
from cashier.config import get_settings
from cashier.core.activation_gate import ActivationGate, is_protected_page

logger = logging.getLogger(__name__)


def remote_license_check(api: CashierApiClient):
    def check() -> bool:
        try:
            return api.activation_status().is_activated
        except ApiError as exc:
            logger.warning("License check failed: %s", exc.message)
            return False

    return check


class NavigationGuard:
    """Decides where a client-side navigation lands."""

    def __init__(self, gate: Optional[ActivationGate] = None, api: Optional[CashierApiClient] = None):
        if gate is None:
            gate = ActivationGate(remote_license_check(api or CashierApiClient()))
        self._gate = gate

    def resolve(self, path: str) -> str:
        settings = get_settings()
        if not is_protected_page(path):
            return path
        if self._gate.is_licensed():
            return path
        return settings.ACTIVATION_PATH

    def reset(self) -> None:
        self._gate.reset()


__all__ = ["NavigationGuard", "remote_license_check"]
