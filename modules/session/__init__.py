"""
Session module.

Owns the authentication/session state machine: credential and federated
sign-in, registration, email-verification and profile-setup gating,
and persistence of the session snapshot to local storage.

Public API:
- ISessionCoordinator / SessionCoordinator: The state machine
- IKeyValueStore and its implementations: Local snapshot persistence
- Session, StoredSession, SessionState, AuthErrorCategory: Models
- Session exceptions: SessionError, InvalidVerificationCodeError, etc.
"""

from .interfaces import ISessionCoordinator, IKeyValueStore, SessionListener
from .models import (
    Session,
    StoredSession,
    SessionState,
    AuthErrorCategory,
)
from .exceptions import (
    SessionError,
    InvalidVerificationCodeError,
    NoActiveSessionError,
    SessionPersistenceError,
)
from .service import SessionCoordinator, create_session_coordinator
from .storage import InMemoryKeyValueStore, JsonFileKeyValueStore

__all__ = [
    # Interfaces
    "ISessionCoordinator",
    "IKeyValueStore",
    "SessionListener",
    # Implementations
    "SessionCoordinator",
    "create_session_coordinator",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    # Models
    "Session",
    "StoredSession",
    "SessionState",
    "AuthErrorCategory",
    # Exceptions
    "SessionError",
    "InvalidVerificationCodeError",
    "NoActiveSessionError",
    "SessionPersistenceError",
]
