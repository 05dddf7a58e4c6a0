from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from fastapi import Request
from fastapi.responses import RedirectResponse

from cashier.config import get_settings
from cashier.core.constants import PUBLIC_PAGE_PATHS
from cashier.core.errors import ActivationError

logger = logging.getLogger(__name__)


class ActivationGate:
    """Licensed/unlicensed decision consulted on every protected navigation.

    ``check`` must read the persisted license state. With the default
    ``cache_seconds=0`` every call reads it fresh; a positive value keeps the
    last answer for that long. ``reset()`` drops the cached answer at once and
    must be called after activating or deactivating.
    """

    def __init__(
        self,
        check: Callable[[], bool],
        *,
        cache_seconds: float = 0.0,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self._check = check
        self._cache_seconds = max(0.0, float(cache_seconds))
        self._monotonic = monotonic
        self._lock = threading.Lock()
        self._cached: Optional[bool] = None
        self._cached_at = 0.0

    def is_licensed(self) -> bool:
        with self._lock:
            if (
                self._cached is not None
                and self._monotonic() - self._cached_at < self._cache_seconds
            ):
                return self._cached

        licensed = bool(self._check())
        with self._lock:
            if self._cache_seconds:
                self._cached = licensed
                self._cached_at = self._monotonic()
        return licensed

    def require(self) -> None:
        if not self.is_licensed():
            raise ActivationError()

    def reset(self) -> None:
        with self._lock:
            self._cached = None
            self._cached_at = 0.0


def is_protected_page(path: str) -> bool:
    settings = get_settings()
    if path in PUBLIC_PAGE_PATHS or path == settings.ACTIVATION_PATH:
        return False
    if path.startswith("/api/") or path.startswith("/static/"):
        return False
    return True


def redirect_if_unlicensed(request: Request, gate: ActivationGate) -> Optional[RedirectResponse]:
    settings = get_settings()
    if not settings.ACTIVATION_ENFORCED:
        return None
    if not is_protected_page(request.url.path):
        return None
    try:
        gate.require()
    except ActivationError:
        logger.info("Unlicensed navigation to %s redirected", request.url.path)
        return RedirectResponse(url=settings.ACTIVATION_PATH, status_code=303)
    return None


__all__ = ["ActivationGate", "is_protected_page", "redirect_if_unlicensed"]
