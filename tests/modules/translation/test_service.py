"""Tests for the translation service."""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from modules.translation.exceptions import TranslationFailedError
from modules.translation.service import GoogleTranslateService, extract_translation


def mock_response(status_code=200, json_data=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


def patched_client(response=None, error=None):
    """Patch httpx.AsyncClient so `get` returns `response` or raises `error`."""
    client = MagicMock()
    client.get = AsyncMock(return_value=response, side_effect=error)
    patcher = patch("httpx.AsyncClient")
    client_class = patcher.start()
    client_class.return_value.__aenter__.return_value = client
    client_class.return_value.__aexit__.return_value = None
    return patcher, client


class TestExtractTranslation:
    def test_joins_segments(self):
        data = [[["Hola. ", "Hello. ", None], ["¿Cómo estás?", "How are you?", None]], None, "en"]
        assert extract_translation(data) == "Hola. ¿Cómo estás?"

    def test_skips_non_text_segments(self):
        data = [[["Hola", "Hello"], [None, None, "Hola"], []]]
        assert extract_translation(data) == "Hola"

    @pytest.mark.parametrize("data", [None, [], {}, [None], ["text"], [[]]])
    def test_invalid_shape(self, data):
        with pytest.raises(TranslationFailedError) as exc_info:
            extract_translation(data)
        assert exc_info.value.reason == "Invalid translation response format"

    def test_empty_result(self):
        with pytest.raises(TranslationFailedError) as exc_info:
            extract_translation([[["", "Hello"]]])
        assert exc_info.value.reason == "Translation produced empty result"


class TestGoogleTranslateService:
    @pytest.fixture
    def service(self):
        return GoogleTranslateService(api_url="https://translate.example.com/single", timeout=5.0)

    @pytest.mark.asyncio
    async def test_translate(self, service):
        patcher, client = patched_client(mock_response(json_data=[[["Hola", "Hello"]], None, "en"]))
        try:
            result = await service.translate("Hello", "es")
        finally:
            patcher.stop()

        assert result.translated_text == "Hola"
        assert result.original_text == "Hello"
        assert result.target_lang == "es"
        args, kwargs = client.get.call_args
        assert args[0] == "https://translate.example.com/single"
        assert kwargs["params"] == {"client": "gtx", "sl": "auto", "tl": "es", "dt": "t", "q": "Hello"}
        assert kwargs["timeout"] == 5.0

    @pytest.mark.asyncio
    async def test_upstream_status_error(self, service):
        patcher, _ = patched_client(mock_response(status_code=429))
        try:
            with pytest.raises(TranslationFailedError) as exc_info:
                await service.translate("Hello", "es")
        finally:
            patcher.stop()

        assert "429" in exc_info.value.reason

    @pytest.mark.asyncio
    async def test_transport_error(self, service):
        patcher, _ = patched_client(error=httpx.ConnectError("offline"))
        try:
            with pytest.raises(TranslationFailedError):
                await service.translate("Hello", "es")
        finally:
            patcher.stop()

    @pytest.mark.asyncio
    async def test_non_json_body(self, service):
        patcher, _ = patched_client(mock_response(json_error=ValueError("not json")))
        try:
            with pytest.raises(TranslationFailedError) as exc_info:
                await service.translate("Hello", "es")
        finally:
            patcher.stop()

        assert exc_info.value.reason == "Invalid translation response format"
