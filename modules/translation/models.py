"""
Translation module data models.

Wire format uses camelCase keys to match the mobile client.
"""

from pydantic import BaseModel, ConfigDict, Field


class TranslateRequest(BaseModel):
    """Request to translate a chat message."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., min_length=1, max_length=5000, description="Text to translate")
    target_lang: str = Field(
        ...,
        min_length=1,
        max_length=16,
        alias="targetLang",
        description="Target language code (e.g. 'es')",
    )


class TranslateResponse(BaseModel):
    """Translated text along with the original request values."""

    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(..., alias="translatedText")
    original_text: str = Field(..., alias="originalText")
    target_lang: str = Field(..., alias="targetLang")
