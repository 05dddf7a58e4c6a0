import threading
from typing import Callable, Optional

_NOTHING = object()


class Debouncer:
    """Collapse bursts of calls into one callback after a quiet period.

    Each ``trigger`` cancels the pending timer and schedules a new one with the
    latest arguments. ``flush`` runs a pending call immediately.
    """

    def __init__(
        self,
        delay_seconds: float,
        callback: Callable[..., None],
        *,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        self._delay = max(0.0, float(delay_seconds))
        self._callback = callback
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._pending = _NOTHING

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not _NOTHING

    def trigger(self, *args) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending = args
            self._timer = self._timer_factory(self._delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def flush(self) -> bool:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
        return self._fire()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = _NOTHING

    def _fire(self) -> bool:
        with self._lock:
            args = self._pending
            self._pending = _NOTHING
            self._timer = None
        if args is _NOTHING:
            return False
        self._callback(*args)
        return True
