"""
Translation module interface.
"""

from typing import Protocol, runtime_checkable

from .models import TranslateResponse


@runtime_checkable
class ITranslationService(Protocol):
    """Interface for translating chat messages."""

    async def translate(self, text: str, target_lang: str) -> TranslateResponse:
        """
        Translate text into `target_lang`, auto-detecting the source language.

        Raises:
            TranslationFailedError: On any upstream or response-shape failure
        """
        ...
