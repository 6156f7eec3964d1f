"""
Pytest fixtures for session module tests.

The account store is a MagicMock whose async methods are AsyncMocks, so
each test can script provider responses and failures.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from modules.accounts.models import FederatedCredential, IdentityUser
from modules.session.service import SessionCoordinator
from modules.session.storage import InMemoryKeyValueStore

STORAGE_KEY = "lanchat_auth"


@pytest.fixture
def identity() -> IdentityUser:
    return IdentityUser(uid="user-123", email="maria@example.com", display_name="Maria")


@pytest.fixture
def account_store(identity):
    """Account store that accepts every request."""
    store = MagicMock()
    store.sign_in_with_password = AsyncMock(return_value=identity)
    store.sign_up = AsyncMock(return_value=identity)
    store.set_display_name = AsyncMock(return_value=None)
    store.sign_in_with_credential = AsyncMock(return_value=identity)
    store.sign_out = AsyncMock(return_value=None)
    store.get_profile_document = AsyncMock(return_value=None)
    store.set_profile_document = AsyncMock(return_value=None)
    store.list_profile_documents = AsyncMock(return_value=[])
    store.on_auth_state_change = MagicMock(return_value=MagicMock())
    return store


@pytest.fixture
def credential_provider():
    provider = MagicMock()
    provider.obtain_credential = AsyncMock(
        return_value=FederatedCredential(id_token="google-id-token")
    )
    return provider


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def coordinator(account_store, storage, credential_provider) -> SessionCoordinator:
    return SessionCoordinator(
        account_store=account_store,
        storage=storage,
        credential_provider=credential_provider,
        storage_key=STORAGE_KEY,
        auth_timeout=1.0,
    )
