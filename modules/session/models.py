"""
Session module data models.

Session is the in-memory authentication state the navigation guard
reads. StoredSession is the snapshot written to local storage after
every successful mutating action.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from modules.profiles.models import UserProfile


class SessionState(str, Enum):
    """Session state as observed from outside the coordinator."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    NEEDS_VERIFICATION = "needs_verification"
    NEEDS_PROFILE_SETUP = "needs_profile_setup"
    AUTHENTICATED = "authenticated"


class AuthErrorCategory(str, Enum):
    """Stable, user-facing failure categories for session actions."""

    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_NOT_FOUND = "account_not_found"
    RATE_LIMITED = "rate_limited"
    NETWORK = "network"
    ACCOUNT_DISABLED = "account_disabled"
    INVALID_EMAIL = "invalid_email"
    TIMEOUT = "timeout"
    EMAIL_IN_USE = "email_in_use"
    WEAK_PASSWORD = "weak_password"
    OPERATION_NOT_ALLOWED = "operation_not_allowed"
    CANCELLED = "cancelled"
    POPUP_BLOCKED = "popup_blocked"
    UNKNOWN = "unknown"


CATEGORY_MESSAGES: dict[AuthErrorCategory, str] = {
    AuthErrorCategory.INVALID_CREDENTIALS: "Invalid email or password. Please check your credentials.",
    AuthErrorCategory.ACCOUNT_NOT_FOUND: "No account found with this email. Please sign up first.",
    AuthErrorCategory.RATE_LIMITED: "Too many attempts. Please try again later.",
    AuthErrorCategory.NETWORK: "Network error. Please check your internet connection.",
    AuthErrorCategory.ACCOUNT_DISABLED: "This account has been disabled. Please contact support.",
    AuthErrorCategory.INVALID_EMAIL: "Invalid email address format.",
    AuthErrorCategory.TIMEOUT: "Login timed out or failed. Check your connection or try again.",
    AuthErrorCategory.EMAIL_IN_USE: "This email is already registered. Please sign in instead.",
    AuthErrorCategory.WEAK_PASSWORD: "Password is too weak. Please use at least 6 characters.",
    AuthErrorCategory.OPERATION_NOT_ALLOWED: "Email/password sign-up is not enabled. Please contact support.",
    AuthErrorCategory.CANCELLED: "Sign-in cancelled. Please try again.",
    AuthErrorCategory.POPUP_BLOCKED: "Popup was blocked. Please allow popups and try again.",
    AuthErrorCategory.UNKNOWN: "Something went wrong. Please try again.",
}


class StoredSession(BaseModel):
    """
    Session snapshot persisted under a single local storage key.

    Serialized with the camelCase keys the mobile client uses.
    """

    model_config = ConfigDict(populate_by_name=True)

    user: Optional[UserProfile] = None
    is_authenticated: bool = Field(default=False, alias="isAuthenticated")
    needs_profile_setup: bool = Field(default=False, alias="needsProfileSetup")
    needs_email_verification: bool = Field(default=False, alias="needsEmailVerification")
    verification_email: str = Field(default="", alias="verificationEmail")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class Session(BaseModel):
    """
    In-memory authentication/session state.

    Immutable: every transition produces a new Session.
    """

    model_config = ConfigDict(frozen=True)

    user: Optional[UserProfile] = None
    is_authenticated: bool = False
    is_loading: bool = False
    needs_profile_setup: bool = False
    needs_email_verification: bool = False
    verification_email: str = ""

    @property
    def state(self) -> SessionState:
        """Derived state, verification taking priority over profile setup."""
        if self.is_loading:
            return SessionState.LOADING
        if self.needs_email_verification:
            return SessionState.NEEDS_VERIFICATION
        if self.is_authenticated and self.needs_profile_setup:
            return SessionState.NEEDS_PROFILE_SETUP
        if self.is_authenticated:
            return SessionState.AUTHENTICATED
        return SessionState.UNAUTHENTICATED

    def to_snapshot(self) -> StoredSession:
        return StoredSession(
            user=self.user,
            is_authenticated=self.is_authenticated,
            needs_profile_setup=self.needs_profile_setup,
            needs_email_verification=self.needs_email_verification,
            verification_email=self.verification_email,
        )

    @classmethod
    def from_snapshot(cls, snapshot: StoredSession) -> "Session":
        return cls(
            user=snapshot.user,
            is_authenticated=snapshot.is_authenticated,
            is_loading=False,
            needs_profile_setup=snapshot.needs_profile_setup,
            needs_email_verification=snapshot.needs_email_verification,
            verification_email=snapshot.verification_email,
        )
