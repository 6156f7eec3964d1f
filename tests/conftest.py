"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest

from api.dependencies import reset_container
from modules.profiles.models import Language, LanguageLevel, UserProfile
from shared.config import get_settings
from shared.database import reset_client_cache


def make_profile(
    uid: str = "user-123",
    email: str = "maria@example.com",
    name: str = "Maria",
    native: str = "es",
    learning: tuple[str, ...] = ("en",),
    **overrides,
) -> UserProfile:
    """
    Build a profile for tests.

    Args:
        uid: Identity uid, also used as profile id
        email: Email address
        name: Display name
        native: Native language code
        learning: Learning language codes
        **overrides: Any other UserProfile field

    Returns:
        UserProfile instance
    """
    return UserProfile(
        id=uid,
        uid=uid,
        email=email,
        name=name,
        native_language=Language(code=native, name=native.upper(), level=LanguageLevel.NATIVE),
        learning_languages=[
            Language(code=code, name=code.upper(), level=LanguageLevel.BEGINNER)
            for code in learning
        ],
        **overrides,
    )


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, clients and the service container around each test."""
    get_settings.cache_clear()
    reset_client_cache()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_client_cache()
    reset_container()


@pytest.fixture
def profile() -> UserProfile:
    """A fully set up profile."""
    return make_profile()
