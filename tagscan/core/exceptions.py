"""
Exception hierarchy shared by the API, application and infrastructure layers.

Request-level errors (validation, authentication) abort a request and are
mapped to HTTP status codes by the controllers. Per-item errors (extraction,
persistence, delivery) are caught where they happen and recorded, so one bad
image or one broken listener never aborts the work for the others.
"""


class TagScanError(Exception):
    """Base class for all application errors"""


class InputValidationError(TagScanError, ValueError):
    """Request input rejected before any processing started"""


class AuthError(TagScanError, ValueError):
    """
    Authentication failure.

    ``reason`` is a stable machine-readable code that clients can switch on
    (the human-readable message may change).
    """

    reason = "auth_failed"

    def __init__(self, message: str, reason: str | None = None) -> None:
        super().__init__(message)
        if reason is not None:
            self.reason = reason


class MissingCredentialError(AuthError):
    reason = "token_missing"


class InvalidCredentialError(AuthError):
    reason = "token_invalid"


class ExpiredCredentialError(AuthError):
    reason = "token_expired"


class UserNotFoundError(AuthError):
    reason = "user_not_found"


class PermissionDeniedError(AuthError):
    reason = "forbidden"


class ExtractionError(TagScanError):
    """The vision capability failed for one image"""


class PersistenceError(TagScanError):
    """Storing one record failed"""


class DeliveryError(TagScanError):
    """Writing one event to one push channel failed"""
