"""
Shared infrastructure for LanChat backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    LanChatError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ExternalServiceError,
)

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "LanChatError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ExternalServiceError",
]
