"""
Session module interfaces.

The navigation guard and the CLI depend on ISessionCoordinator, not on
the concrete coordinator. IKeyValueStore abstracts device-local storage.
"""

from typing import Callable, Optional, Protocol, runtime_checkable

from modules.profiles.models import ProfileUpdate

from .models import Session, SessionState

SessionListener = Callable[[Session], None]


@runtime_checkable
class IKeyValueStore(Protocol):
    """Interface for local string key-value persistence."""

    async def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        ...

    async def set_item(self, key: str, value: str) -> None:
        """Store a value under `key`, replacing any previous value."""
        ...

    async def remove_item(self, key: str) -> None:
        """Remove `key`. Removing an absent key is not an error."""
        ...


@runtime_checkable
class ISessionCoordinator(Protocol):
    """
    Interface for the authentication/session state machine.

    Every action resolves with the new Session or raises; on failure the
    current Session is left unchanged.
    """

    @property
    def session(self) -> Session:
        """The current session."""
        ...

    @property
    def state(self) -> SessionState:
        """The current externally observed state."""
        ...

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener called after every session change.

        Returns:
            Function that removes the listener
        """
        ...

    async def initialize(self) -> Session:
        """Restore the persisted snapshot, if any."""
        ...

    async def sign_in(self, email: str, password: str) -> Session:
        """
        Sign in with email and password.

        Raises:
            SessionError: With a category describing the failure
        """
        ...

    async def register(self, email: str, password: str, name: str) -> Session:
        """Create an account; the session then needs email verification."""
        ...

    async def login_with_google(self) -> Session:
        """Sign in through the federated credential provider."""
        ...

    async def verify_email(self, code: str) -> Session:
        """
        Accept a verification code.

        Raises:
            InvalidVerificationCodeError: If the code has the wrong length
            NoActiveSessionError: If there is no pending user
        """
        ...

    async def resend_verification(self) -> str:
        """Re-send the verification code; returns the address used."""
        ...

    async def update_profile(self, update: ProfileUpdate) -> Session:
        """Apply a partial profile update and complete profile setup."""
        ...

    async def sign_out(self) -> Session:
        """Sign out and clear the persisted session."""
        ...
