"""
Translation module.

Stateless proxy to an external translation endpoint.

Public API:
- ITranslationService / GoogleTranslateService: Translation operations
- TranslateRequest, TranslateResponse: Wire models
- TranslationFailedError: The single failure surfaced to callers
"""

from .interfaces import ITranslationService
from .models import TranslateRequest, TranslateResponse
from .exceptions import TranslationFailedError
from .service import GoogleTranslateService, extract_translation

__all__ = [
    "ITranslationService",
    "GoogleTranslateService",
    "extract_translation",
    "TranslateRequest",
    "TranslateResponse",
    "TranslationFailedError",
]
