"""Service-level errors.

Each error carries the HTTP status it maps to and a client-safe message.
Services raise these; `benefits.main` turns them into `{"message": ...}`
responses.
"""


class ServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Invalid request"


class ConflictError(ServiceError):
    status_code = 400
    default_message = "Resource already exists"


class InvalidCredentialsError(ServiceError):
    # Same message for unknown email and wrong password.
    status_code = 400
    default_message = "Invalid credentials"


class UnauthorizedError(ServiceError):
    status_code = 401
    default_message = "Access token required"


class ForbiddenError(ServiceError):
    status_code = 403
    default_message = "Invalid token"


class NotFoundError(ServiceError):
    status_code = 404
    default_message = "Not found"
