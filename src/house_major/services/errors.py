"""Domain exceptions raised by the service layer.

Routers translate these into HTTP errors; nothing here knows about HTTP.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base class for rule violations reported back to the caller."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateEmailError(ServiceError):
    def __init__(self, message: str = "Email already registered") -> None:
        super().__init__(message)


class InvalidCredentialsError(ServiceError):
    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class InvalidTokenError(ServiceError):
    """Raised when a bearer token cannot be verified."""


class PasswordResetError(ServiceError):
    """Raised when a reset code is missing, expired or wrong."""


class ProfileUpdateError(ServiceError):
    """Raised when a profile change breaks a rule (e.g. wrong current password)."""


class SelfDeletionError(ServiceError):
    def __init__(self, message: str = "You cannot delete your own account") -> None:
        super().__init__(message)


class CareerNotFoundError(ServiceError):
    def __init__(self, message: str = "Career not found") -> None:
        super().__init__(message)


class UploadRejectedError(ServiceError):
    """Raised when an uploaded file breaks the type or size rules."""


class MailDeliveryError(ServiceError):
    """Raised when an email could not be handed to the SMTP server."""
