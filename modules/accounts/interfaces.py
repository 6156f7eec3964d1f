"""
Account & profile store interface.

The session coordinator and the community directory depend on
IAccountStore, not on a concrete SDK. This keeps the coordinator
testable with mocks and lets the backing service be swapped.
"""

from typing import Any, Awaitable, Callable, Optional, Protocol, runtime_checkable

from .models import FederatedCredential, IdentityUser

# Called with the signed-in uid, or None after sign-out
AuthStateListener = Callable[[Optional[str]], Awaitable[None]]


@runtime_checkable
class IAccountStore(Protocol):
    """
    Interface for identity and per-user profile document operations.

    All failures are raised as AccountStoreError (or a subclass) carrying
    the provider's error code.
    """

    async def sign_in_with_password(self, email: str, password: str) -> IdentityUser:
        """
        Verify email/password credentials.

        Returns:
            The signed-in identity

        Raises:
            AccountStoreError: If the provider rejects the credentials
        """
        ...

    async def sign_up(
        self,
        email: str,
        password: str,
        display_name: Optional[str] = None,
    ) -> IdentityUser:
        """Create a new email/password identity.

        The display name is stored with the identity itself, since
        providers that require email confirmation do not open a session
        until the address is confirmed.
        """
        ...

    async def set_display_name(self, name: str) -> None:
        """Set the display name on the currently signed-in identity.

        A no-op when no session is open.
        """
        ...

    async def sign_in_with_credential(self, credential: FederatedCredential) -> IdentityUser:
        """Sign in with a credential from a federated identity exchange."""
        ...

    async def sign_out(self) -> None:
        """Sign the current identity out of the provider."""
        ...

    def on_auth_state_change(self, listener: AuthStateListener) -> Callable[[], None]:
        """
        Subscribe to identity changes.

        Args:
            listener: Coroutine function called with the uid (or None)

        Returns:
            Function that cancels the subscription
        """
        ...

    async def get_profile_document(self, uid: str) -> Optional[dict[str, Any]]:
        """
        Read a user's profile document.

        Returns:
            The document, or None if the user has none yet
        """
        ...

    async def set_profile_document(self, uid: str, data: dict[str, Any]) -> None:
        """
        Create or merge a user's profile document.

        Keys absent from `data` are left untouched on an existing document.
        Values equal to SERVER_TIMESTAMP are stamped by the store.
        """
        ...

    async def list_profile_documents(self, limit: int = 100) -> list[dict[str, Any]]:
        """List profile documents for the community directory."""
        ...


@runtime_checkable
class IFederatedCredentialProvider(Protocol):
    """
    Obtains a federated credential (e.g. Google ID token).

    Implementations own the platform-specific exchange: popup on web,
    redirect-then-resolve on native, a pasted token in the CLI.
    """

    async def obtain_credential(self) -> FederatedCredential:
        """
        Run the exchange.

        Raises:
            CredentialExchangeError: If the user cancels or the exchange fails
        """
        ...
