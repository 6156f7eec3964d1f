"""
Error hierarchy shared by the LanChat session, accounts and translation code.

Session failures surface as AuthenticationError carrying an error category,
missing cached users as NotFoundError, and bad verification codes as
ValidationError. Account store and translation provider failures are
ExternalServiceError tagged with the failing service. The terminal client
prints `message`, and `to_dict` shapes the same error as a JSON body.
"""

from typing import Optional, Any


class LanChatError(Exception):
    """
    Root of every error the client can show to the user.

    `code` defaults to the class name and is what the UI keys off;
    `message` is safe to display as-is.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(LanChatError):
    """Something the action needs is absent, such as a signed-in user."""

    pass


class ValidationError(LanChatError):
    """User input was rejected before reaching a provider."""

    pass


class AuthenticationError(LanChatError):
    """A sign-in, sign-up or federated sign-in attempt failed."""

    pass


class ExternalServiceError(LanChatError):
    """A call to Supabase or the translation API failed."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
