"""
Account & profile store module.

Wraps the external identity provider and profile document store.

Public API:
- IAccountStore: Interface consumed by the session and community modules
- IFederatedCredentialProvider: Interface for federated credential exchange
- IdentityUser, FederatedCredential, SERVER_TIMESTAMP: Data passed across the interface
- AccountStoreError and subclasses: Normalized provider failures
"""

from .interfaces import IAccountStore, IFederatedCredentialProvider, AuthStateListener
from .models import IdentityUser, FederatedCredential, SERVER_TIMESTAMP
from .exceptions import (
    AccountStoreError,
    AccountStoreUnavailableError,
    CredentialExchangeError,
)

__all__ = [
    # Interfaces
    "IAccountStore",
    "IFederatedCredentialProvider",
    "AuthStateListener",
    # Models
    "IdentityUser",
    "FederatedCredential",
    "SERVER_TIMESTAMP",
    # Exceptions
    "AccountStoreError",
    "AccountStoreUnavailableError",
    "CredentialExchangeError",
]
