"""
Session module exceptions.

These exceptions are raised by the session coordinator. SessionError
carries a stable AuthErrorCategory so the UI never sees provider codes.
"""

from typing import Optional

from shared.exceptions import (
    LanChatError,
    AuthenticationError,
    NotFoundError,
    ValidationError,
)

from .models import AuthErrorCategory, CATEGORY_MESSAGES


class SessionError(AuthenticationError):
    """Raised when a sign-in, registration or federated sign-in fails."""

    def __init__(self, category: AuthErrorCategory, message: Optional[str] = None):
        super().__init__(
            message or CATEGORY_MESSAGES[category],
            code=category.value.upper(),
            details={"category": category.value},
        )
        self.category = category


class InvalidVerificationCodeError(ValidationError):
    """Raised when a verification code has the wrong length."""

    def __init__(self, message: str = "Invalid verification code"):
        super().__init__(message, code="INVALID_CODE")


class NoActiveSessionError(NotFoundError):
    """Raised when an action needs a cached user and there is none."""

    def __init__(self, message: str = "No user found"):
        super().__init__(message, code="NO_ACTIVE_SESSION")


class SessionPersistenceError(LanChatError):
    """Raised when the session snapshot cannot be read or written."""

    def __init__(self, message: str):
        super().__init__(
            f"Session storage failed: {message}",
            code="SESSION_PERSISTENCE_ERROR",
        )
