"""
Supabase-backed account & profile store.

Identity goes through Supabase Auth, profile documents live in the
`users` table keyed by `uid`. The Supabase client is synchronous, so
every call runs in a worker thread to keep the event loop free and to
let the session coordinator put a timeout around it.
"""

import asyncio
import concurrent.futures
import logging
from typing import Any, Callable, Optional, TypeVar

import httpx
from supabase import Client
from supabase_auth.errors import AuthApiError, AuthRetryableError

from .exceptions import (
    AccountStoreError,
    AccountStoreUnavailableError,
)
from .interfaces import AuthStateListener, IAccountStore
from .models import SERVER_TIMESTAMP, FederatedCredential, IdentityUser

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres resolves the special input 'now' with the database clock
_SERVER_NOW = "now"


def _identity_from_user(user: Any) -> IdentityUser:
    metadata = getattr(user, "user_metadata", None) or {}
    return IdentityUser(
        uid=user.id,
        email=getattr(user, "email", None),
        display_name=(
            metadata.get("display_name")
            or metadata.get("full_name")
            or metadata.get("name")
        ),
        photo_url=metadata.get("avatar_url") or metadata.get("picture"),
    )


def _name_metadata(name: str) -> dict[str, str]:
    return {"display_name": name, "full_name": name}


def _log_listener_failure(future: "concurrent.futures.Future[None]") -> None:
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logger.error(f"Auth state listener failed: {error!r}", exc_info=error)


def _resolve_timestamps(data: dict[str, Any]) -> dict[str, Any]:
    return {
        key: (_SERVER_NOW if value is SERVER_TIMESTAMP else value)
        for key, value in data.items()
    }


class SupabaseAccountStore(IAccountStore):
    """
    Implementation of IAccountStore on top of supabase-py.

    All SDK and transport errors are normalized into AccountStoreError.
    """

    def __init__(self, client: Client, users_table: str = "users"):
        self._client = client
        self._table = users_table

    async def _call(self, operation: str, func: Callable[[], T]) -> T:
        try:
            return await asyncio.to_thread(func)
        except AuthApiError as e:
            raise AccountStoreError(
                e.message,
                provider_code=getattr(e, "code", None),
                status=e.status,
            ) from e
        except (AuthRetryableError, httpx.TransportError) as e:
            logger.warning(f"Account store unreachable during {operation}: {e}")
            raise AccountStoreUnavailableError(str(e)) from e
        except Exception as e:
            raise AccountStoreError(
                f"{operation} failed: {e}",
                provider_code=getattr(e, "code", None),
            ) from e

    async def sign_in_with_password(self, email: str, password: str) -> IdentityUser:
        response = await self._call(
            "sign_in_with_password",
            lambda: self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            ),
        )
        return _identity_from_user(response.user)

    async def sign_up(
        self,
        email: str,
        password: str,
        display_name: Optional[str] = None,
    ) -> IdentityUser:
        credentials: dict[str, Any] = {"email": email, "password": password}
        if display_name:
            credentials["options"] = {"data": _name_metadata(display_name)}

        response = await self._call(
            "sign_up",
            lambda: self._client.auth.sign_up(credentials),
        )
        if response.user is None:
            raise AccountStoreError("Sign-up returned no user")
        return _identity_from_user(response.user)

    async def set_display_name(self, name: str) -> None:
        # No session until the email is confirmed; sign_up already stored the name
        session = await self._call("get_session", lambda: self._client.auth.get_session())
        if session is None:
            logger.debug("No active session, display name left to sign-up metadata")
            return

        await self._call(
            "set_display_name",
            lambda: self._client.auth.update_user({"data": _name_metadata(name)}),
        )

    async def sign_in_with_credential(self, credential: FederatedCredential) -> IdentityUser:
        params: dict[str, Any] = {
            "provider": credential.provider,
            "token": credential.id_token,
        }
        if credential.access_token:
            params["access_token"] = credential.access_token
        if credential.nonce:
            params["nonce"] = credential.nonce

        response = await self._call(
            "sign_in_with_id_token",
            lambda: self._client.auth.sign_in_with_id_token(params),
        )
        return _identity_from_user(response.user)

    async def sign_out(self) -> None:
        await self._call("sign_out", lambda: self._client.auth.sign_out())

    def on_auth_state_change(self, listener: AuthStateListener) -> Callable[[], None]:
        loop = asyncio.get_running_loop()

        def callback(event: Any, session: Any) -> None:
            user = getattr(session, "user", None) if session else None
            uid: Optional[str] = user.id if user else None
            future = asyncio.run_coroutine_threadsafe(listener(uid), loop)
            future.add_done_callback(_log_listener_failure)

        subscription = self._client.auth.on_auth_state_change(callback)
        return subscription.unsubscribe

    async def get_profile_document(self, uid: str) -> Optional[dict[str, Any]]:
        result = await self._call(
            "get_profile_document",
            lambda: self._client.table(self._table)
            .select("*")
            .eq("uid", uid)
            .limit(1)
            .execute(),
        )
        if not result.data:
            return None
        return result.data[0]

    async def set_profile_document(self, uid: str, data: dict[str, Any]) -> None:
        row = _resolve_timestamps({**data, "uid": uid})
        await self._call(
            "set_profile_document",
            lambda: self._client.table(self._table)
            .upsert(row, on_conflict="uid")
            .execute(),
        )

    async def list_profile_documents(self, limit: int = 100) -> list[dict[str, Any]]:
        result = await self._call(
            "list_profile_documents",
            lambda: self._client.table(self._table)
            .select("*")
            .order("isOnline", desc=True)
            .limit(limit)
            .execute(),
        )
        return result.data or []

