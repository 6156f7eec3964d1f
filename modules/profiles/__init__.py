"""
Profiles module.

Defines the user-facing profile record shared by the session, community
and account store modules.

Public API:
- UserProfile: Full profile record
- ProfileUpdate: Partial update applied by the session coordinator
- Language / LanguageLevel: Language tags with proficiency
- LANGUAGES / find_language: Catalog of selectable languages
- build_default_profile: Factory for profiles of brand-new identities
"""

from .languages import LANGUAGES, find_language
from .models import (
    MAX_PHOTOS,
    Language,
    LanguageLevel,
    UserProfile,
    ProfileUpdate,
    build_default_profile,
    default_native_language,
)

__all__ = [
    "LANGUAGES",
    "MAX_PHOTOS",
    "Language",
    "LanguageLevel",
    "UserProfile",
    "ProfileUpdate",
    "build_default_profile",
    "default_native_language",
    "find_language",
]
