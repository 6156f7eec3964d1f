"""
Translation API endpoint.

Proxies message translation for the chat screen.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_translation_service

from .exceptions import TranslationFailedError
from .interfaces import ITranslationService
from .models import TranslateRequest, TranslateResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    request: TranslateRequest,
    service: ITranslationService = Depends(get_translation_service),
) -> TranslateResponse:
    """
    Translate text into the target language.

    Every upstream failure is reported as a generic 502 so clients only
    have to handle one error.
    """
    try:
        return await service.translate(request.text, request.target_lang)
    except TranslationFailedError as e:
        logger.warning(f"Translation to {request.target_lang} failed: {e.reason}")
        raise HTTPException(status_code=502, detail="Translation failed")
