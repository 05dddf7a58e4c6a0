"""Error taxonomy shared by services, repositories and the HTTP layer.

Each class maps to one HTTP outcome: ``ValidationError`` -> 400,
``NotFoundError`` -> 404, ``PersistenceError`` -> 500. ``ActivationError``
never becomes a hard failure; callers turn it into a redirect to the
activation screen.
"""


class CashierError(Exception):
    default_message = "Unexpected error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CashierError, ValueError):
    default_message = "Invalid input"


class NotFoundError(CashierError, LookupError):
    default_message = "Not found"


class PersistenceError(CashierError, RuntimeError):
    default_message = "Database error"


class ActivationError(CashierError):
    default_message = "Application is not activated"


__all__ = [
    "ActivationError",
    "CashierError",
    "NotFoundError",
    "PersistenceError",
    "ValidationError",
]
