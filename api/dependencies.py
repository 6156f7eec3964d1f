"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together the module
implementations the HTTP service exposes. Each module exposes its
service through an interface, and this file creates the concrete
implementation.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.translation.interfaces import ITranslationService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as
    singletons within the container. Use reset() to clear them in tests.
    """

    def __init__(self) -> None:
        self._translation_service: "ITranslationService | None" = None

    @property
    def translation(self) -> "ITranslationService":
        """Get the translation service instance."""
        if self._translation_service is None:
            from modules.translation.service import GoogleTranslateService
            from shared.config import get_settings

            settings = get_settings()
            self._translation_service = GoogleTranslateService(
                api_url=settings.translate_api_url,
                timeout=settings.translate_timeout_seconds,
            )
        return self._translation_service

    def reset(self) -> None:
        """Reset all cached services."""
        self._translation_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_translation_service() -> "ITranslationService":
    """FastAPI dependency for translation service."""
    return get_container().translation
