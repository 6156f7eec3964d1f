"""
Translation service implementation.

Proxies the public Google Translate endpoint. The response is a nested
JSON array whose first element holds [translated, original, ...]
segments; the translation is the concatenation of the segments.
"""

import logging
from typing import Any

import httpx

from .exceptions import TranslationFailedError
from .interfaces import ITranslationService
from .models import TranslateResponse

logger = logging.getLogger(__name__)

DEFAULT_TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"


def extract_translation(data: Any) -> str:
    """
    Join the translated segments of an upstream response.

    Raises:
        TranslationFailedError: If the shape is wrong or the result is empty
    """
    if not data or not isinstance(data, list) or not data[0] or not isinstance(data[0], list):
        raise TranslationFailedError("Invalid translation response format")

    translated = "".join(
        segment[0]
        for segment in data[0]
        if isinstance(segment, list) and segment and isinstance(segment[0], str) and segment[0]
    )
    if not translated:
        raise TranslationFailedError("Translation produced empty result")
    return translated


class GoogleTranslateService(ITranslationService):
    """Translation through the public Google Translate endpoint."""

    def __init__(
        self,
        api_url: str = DEFAULT_TRANSLATE_URL,
        timeout: float = 15.0,
    ):
        self._api_url = api_url
        self._timeout = timeout

    async def translate(self, text: str, target_lang: str) -> TranslateResponse:
        logger.debug(f"Translating {len(text)} chars to {target_lang}")
        params = {
            "client": "gtx",
            "sl": "auto",
            "tl": target_lang,
            "dt": "t",
            "q": text,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self._api_url,
                    params=params,
                    headers={"User-Agent": "Mozilla/5.0"},
                    timeout=self._timeout,
                )
        except httpx.HTTPError as e:
            logger.error(f"Translation request failed: {e}")
            raise TranslationFailedError(str(e)) from e

        if response.status_code != 200:
            logger.error(f"Translation API returned status {response.status_code}")
            raise TranslationFailedError(
                f"Translation API returned status {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise TranslationFailedError("Invalid translation response format") from e

        translated = extract_translation(data)
        logger.info(f"Translated {len(text)} chars to {target_lang}")
        return TranslateResponse(
            translated_text=translated,
            original_text=text,
            target_lang=target_lang,
        )
