"""
Catalog of languages offered when picking native and learning languages.
"""

from typing import Optional

from .models import Language, LanguageLevel

LANGUAGES: list[Language] = [
    Language(code="en", name="English", flag="🇺🇸"),
    Language(code="es", name="Spanish", flag="🇪🇸"),
    Language(code="fr", name="French", flag="🇫🇷"),
    Language(code="de", name="German", flag="🇩🇪"),
    Language(code="it", name="Italian", flag="🇮🇹"),
    Language(code="pt", name="Portuguese", flag="🇵🇹"),
    Language(code="ru", name="Russian", flag="🇷🇺"),
    Language(code="ja", name="Japanese", flag="🇯🇵"),
    Language(code="ko", name="Korean", flag="🇰🇷"),
    Language(code="zh", name="Chinese", flag="🇨🇳"),
    Language(code="ar", name="Arabic", flag="🇸🇦"),
    Language(code="hi", name="Hindi", flag="🇮🇳"),
    Language(code="tr", name="Turkish", flag="🇹🇷"),
    Language(code="nl", name="Dutch", flag="🇳🇱"),
    Language(code="pl", name="Polish", flag="🇵🇱"),
    Language(code="sv", name="Swedish", flag="🇸🇪"),
]

_BY_CODE = {lang.code: lang for lang in LANGUAGES}


def find_language(code: str, level: Optional[LanguageLevel] = None) -> Optional[Language]:
    """
    Look up a catalog language by code.

    Returns:
        A copy carrying `level`, or None for an unknown code
    """
    lang = _BY_CODE.get(code.lower())
    if lang is None:
        return None
    return lang.model_copy(update={"level": level})
