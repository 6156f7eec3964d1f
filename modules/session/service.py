"""
Session coordinator implementation.

Single authority for authentication/session state. Every mutating
action writes to the account store first, then persists the local
snapshot, then commits the new Session in memory and notifies
subscribers. If any required step fails the in-memory Session is left
unchanged.
"""

import asyncio
import logging
from typing import Callable, Optional

from pydantic import ValidationError as PydanticValidationError

from modules.accounts.documents import (
    presence_document,
    profile_from_document,
    profile_to_document,
    update_to_document,
)
from modules.accounts.exceptions import AccountStoreError
from modules.accounts.interfaces import IAccountStore, IFederatedCredentialProvider
from modules.accounts.models import IdentityUser
from modules.profiles.models import ProfileUpdate, UserProfile, build_default_profile
from shared.config import get_settings

from .errors import FEDERATED_ERRORS, REGISTER_ERRORS, SIGN_IN_ERRORS, map_provider_error
from .exceptions import (
    InvalidVerificationCodeError,
    NoActiveSessionError,
    SessionError,
    SessionPersistenceError,
)
from .interfaces import IKeyValueStore, ISessionCoordinator, SessionListener
from .models import AuthErrorCategory, Session, SessionState, StoredSession

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "lanchat_auth"


class SessionCoordinator(ISessionCoordinator):
    """
    Implementation of the session coordinator.

    Collaborators are injected so the coordinator can run against
    Supabase in the client and against mocks in tests. Concurrent
    mutating actions are not serialized: the last one to finish wins
    both in memory and in storage.
    """

    def __init__(
        self,
        account_store: IAccountStore,
        storage: IKeyValueStore,
        credential_provider: Optional[IFederatedCredentialProvider] = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        auth_timeout: float = 10.0,
        verification_code_length: int = 6,
    ):
        self._accounts = account_store
        self._storage = storage
        self._credentials = credential_provider
        self._storage_key = storage_key
        self._auth_timeout = auth_timeout
        self._code_length = verification_code_length

        self._session = Session(is_loading=True)
        self._started = False
        self._listeners: list[SessionListener] = []
        self._unsubscribe_auth: Optional[Callable[[], None]] = None

    # -------------------------------------------------------------------------
    # Observable state
    # -------------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    @property
    def state(self) -> SessionState:
        if not self._started:
            return SessionState.UNINITIALIZED
        return self._session.state

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, session: Session) -> Session:
        self._session = session
        for listener in list(self._listeners):
            try:
                listener(session)
            except Exception:
                logger.exception("Session listener failed")
        return session

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    async def _read_snapshot(self) -> Optional[StoredSession]:
        """
        Read the persisted snapshot.

        A snapshot that no longer parses is logged and treated as absent.
        """
        try:
            raw = await self._storage.get_item(self._storage_key)
        except Exception as e:
            raise SessionPersistenceError(str(e)) from e

        if raw is None:
            return None
        try:
            return StoredSession.model_validate_json(raw)
        except PydanticValidationError as e:
            logger.warning(f"Discarding unreadable session snapshot: {e.error_count()} errors")
            return None

    async def _persist(self, snapshot: StoredSession) -> None:
        try:
            await self._storage.set_item(self._storage_key, snapshot.to_json())
        except Exception as e:
            logger.error(f"Failed to persist session snapshot: {e}")
            raise SessionPersistenceError(str(e)) from e

    async def _persist_and_commit(self, snapshot: StoredSession) -> Session:
        await self._persist(snapshot)
        return self._commit(Session.from_snapshot(snapshot))

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def initialize(self) -> Session:
        """
        Restore the persisted session and start the presence side-channel.

        Calling it again after the first restore returns the current session.
        """
        if self._started:
            return self._session
        self._started = True
        self._commit(Session(is_loading=True))

        snapshot: Optional[StoredSession] = None
        try:
            snapshot = await self._read_snapshot()
            if snapshot is None:
                await self._storage.remove_item(self._storage_key)
        except Exception as e:
            logger.error(f"Could not restore session, starting signed out: {e}")

        self._start_presence()

        if snapshot is None:
            return self._commit(Session())
        restored = Session.from_snapshot(snapshot)
        logger.info(f"Restored session in state {restored.state.value}")
        return self._commit(restored)

    def _start_presence(self) -> None:
        try:
            self._unsubscribe_auth = self._accounts.on_auth_state_change(
                self._on_auth_state_change
            )
        except Exception as e:
            logger.warning(f"Auth state subscription unavailable: {e}")

    async def _on_auth_state_change(self, uid: Optional[str]) -> None:
        """Mark the user online whenever the provider reports a signed-in uid."""
        if not uid:
            return
        try:
            snapshot = await self._read_snapshot()
            if snapshot and snapshot.user:
                await self._accounts.set_profile_document(uid, presence_document(True))
        except (AccountStoreError, SessionPersistenceError) as e:
            logger.warning(f"Error updating online status: {e}")

    def close(self) -> None:
        """Stop listening for auth state changes."""
        if self._unsubscribe_auth is not None:
            self._unsubscribe_auth()
            self._unsubscribe_auth = None

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    async def sign_in(self, email: str, password: str) -> Session:
        logger.debug(f"Sign-in attempt for {email}")
        try:
            identity = await asyncio.wait_for(
                self._accounts.sign_in_with_password(email, password),
                timeout=self._auth_timeout,
            )
            cached = await self._read_snapshot()
            user = await self._resolve_sign_in_profile(identity, email, cached)
            await self._accounts.set_profile_document(identity.uid, profile_to_document(user))
        except asyncio.TimeoutError:
            logger.error(f"Sign-in for {email} timed out after {self._auth_timeout}s")
            raise SessionError(AuthErrorCategory.TIMEOUT) from None
        except AccountStoreError as e:
            category = map_provider_error(e, SIGN_IN_ERRORS)
            logger.error(f"Sign-in failed for {email}: {e.provider_code or e.message}")
            if category is AuthErrorCategory.UNKNOWN:
                raise SessionError(category, "Login failed. Please try again.") from e
            raise SessionError(category) from e

        session = await self._persist_and_commit(
            StoredSession(
                user=user,
                is_authenticated=True,
                needs_profile_setup=False,
                needs_email_verification=False,
            )
        )
        logger.info(f"Sign-in successful for uid {identity.uid}")
        return session

    async def _resolve_sign_in_profile(
        self,
        identity: IdentityUser,
        email: str,
        cached: Optional[StoredSession],
    ) -> UserProfile:
        """
        Pick the profile to sign in with.

        A cached profile for the same email wins; otherwise the stored
        document is used, and only a brand-new identity gets a default
        profile. The identity's uid and email are always authoritative.
        """
        if cached and cached.user and cached.user.email == email:
            return cached.user.model_copy(
                update={"uid": identity.uid, "email": email, "is_online": True}
            )

        document = await self._accounts.get_profile_document(identity.uid)
        if document:
            return profile_from_document(document, identity)

        return build_default_profile(
            identity.uid,
            email,
            name=identity.display_name or email.split("@")[0],
            avatar=identity.photo_url or "",
        )

    async def register(self, email: str, password: str, name: str) -> Session:
        logger.debug(f"Register attempt for {email}")
        try:
            identity = await asyncio.wait_for(
                self._accounts.sign_up(email, password, display_name=name),
                timeout=self._auth_timeout,
            )
            await self._accounts.set_display_name(name)
            user = build_default_profile(identity.uid, email, name=name)
            await self._accounts.set_profile_document(identity.uid, profile_to_document(user))
        except asyncio.TimeoutError:
            logger.error(f"Registration for {email} timed out after {self._auth_timeout}s")
            raise SessionError(AuthErrorCategory.TIMEOUT) from None
        except AccountStoreError as e:
            category = map_provider_error(e, REGISTER_ERRORS)
            logger.error(f"Registration failed for {email}: {e.provider_code or e.message}")
            if category is AuthErrorCategory.UNKNOWN:
                raise SessionError(category, "Registration failed. Please try again.") from e
            raise SessionError(category) from e

        session = await self._persist_and_commit(
            StoredSession(
                user=user,
                is_authenticated=False,
                needs_profile_setup=True,
                needs_email_verification=True,
                verification_email=email,
            )
        )
        logger.info(f"Registration successful for uid {identity.uid}, verification pending")
        return session

    async def login_with_google(self) -> Session:
        if self._credentials is None:
            raise SessionError(
                AuthErrorCategory.UNKNOWN, "Google sign-in is not available on this device."
            )

        try:
            credential = await self._credentials.obtain_credential()
            identity = await self._accounts.sign_in_with_credential(credential)
        except AccountStoreError as e:
            category = map_provider_error(e, FEDERATED_ERRORS)
            logger.error(f"Google sign-in failed: {e.provider_code or e.message}")
            if category is AuthErrorCategory.UNKNOWN:
                raise SessionError(category, "Google sign-in failed. Please try again.") from e
            raise SessionError(category) from e

        needs_profile_setup = False
        try:
            document = await self._accounts.get_profile_document(identity.uid)
        except AccountStoreError as e:
            logger.warning(f"Profile store unavailable, creating a local profile: {e}")
            document = None

        if document:
            user = profile_from_document(document, identity)
        else:
            needs_profile_setup = True
            user = build_default_profile(
                identity.uid,
                identity.email or "",
                name=identity.display_name or "",
                avatar=identity.photo_url or "",
            )

        try:
            await self._accounts.set_profile_document(identity.uid, profile_to_document(user))
        except AccountStoreError as e:
            logger.warning(f"Profile write failed, will sync later: {e}")

        session = await self._persist_and_commit(
            StoredSession(
                user=user,
                is_authenticated=True,
                needs_profile_setup=needs_profile_setup,
                needs_email_verification=False,
            )
        )
        logger.info(
            f"Google sign-in successful for uid {identity.uid} "
            f"(profile setup {'required' if needs_profile_setup else 'complete'})"
        )
        return session

    async def verify_email(self, code: str) -> Session:
        # The identity provider owns real verification; this only clears the gate
        if not code or len(code) != self._code_length:
            raise InvalidVerificationCodeError()

        snapshot = await self._read_snapshot()
        if snapshot is None or snapshot.user is None:
            raise NoActiveSessionError()

        return await self._persist_and_commit(
            snapshot.model_copy(
                update={
                    "user": snapshot.user.model_copy(update={"is_verified": True}),
                    "is_authenticated": True,
                    "needs_email_verification": False,
                    "verification_email": "",
                }
            )
        )

    async def resend_verification(self) -> str:
        email = self._session.verification_email
        logger.info(f"Verification code resent to: {email}")
        return email

    async def update_profile(self, update: ProfileUpdate) -> Session:
        snapshot = await self._read_snapshot()
        if snapshot is None or snapshot.user is None:
            raise NoActiveSessionError()

        user = snapshot.user.apply(update)

        changes = update_to_document(update)
        if user.uid and changes:
            try:
                await self._accounts.set_profile_document(user.uid, changes)
            except AccountStoreError as e:
                logger.warning(f"Error updating profile in store: {e}")

        return await self._persist_and_commit(
            snapshot.model_copy(update={"user": user, "needs_profile_setup": False})
        )

    async def sign_out(self) -> Session:
        logger.debug("Sign-out started")
        user = self._session.user
        if user is None:
            try:
                snapshot = await self._read_snapshot()
            except SessionPersistenceError as e:
                logger.warning(f"Signing out without a readable snapshot: {e}")
                snapshot = None
            user = snapshot.user if snapshot else None

        if user is not None and user.uid:
            try:
                await self._accounts.set_profile_document(user.uid, presence_document(False))
            except AccountStoreError as e:
                logger.warning(f"Error updating offline status: {e}")

        try:
            await self._accounts.sign_out()
        except AccountStoreError as e:
            logger.warning(f"Provider sign-out failed, clearing local session anyway: {e}")

        try:
            await self._storage.remove_item(self._storage_key)
        except Exception as e:
            logger.error(f"Failed to clear session snapshot: {e}")
            raise SessionPersistenceError(str(e)) from e

        logger.info("Sign-out completed")
        return self._commit(Session())


def create_session_coordinator(
    credential_provider: Optional[IFederatedCredentialProvider] = None,
    account_store: Optional[IAccountStore] = None,
) -> SessionCoordinator:
    """Build a coordinator wired to Supabase and on-disk session storage."""
    from .storage import JsonFileKeyValueStore

    settings = get_settings()
    if account_store is None:
        from modules.accounts.supabase_store import SupabaseAccountStore
        from shared.database import get_supabase_client

        account_store = SupabaseAccountStore(
            get_supabase_client(), users_table=settings.supabase_users_table
        )

    return SessionCoordinator(
        account_store=account_store,
        storage=JsonFileKeyValueStore(settings.session_storage_path),
        credential_provider=credential_provider,
        storage_key=settings.auth_storage_key,
        auth_timeout=settings.auth_timeout_seconds,
        verification_code_length=settings.verification_code_length,
    )
