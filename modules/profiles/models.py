"""
Profile module data models.

A profile is the denormalized, user-facing record shown in the community
directory, chats and the profile tab. Field aliases use the camelCase
names the mobile client has always written to local storage, so older
snapshots keep loading.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


MAX_PHOTOS = 4


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LanguageLevel(str, Enum):
    """Proficiency level attached to a language."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    NATIVE = "native"


class Language(BaseModel):
    """A language tag with optional proficiency level."""

    code: str = Field(..., min_length=1, description="Language code (e.g. 'en')")
    name: str = Field(..., description="Display name")
    flag: str = Field(default="", description="Flag emoji")
    level: Optional[LanguageLevel] = Field(None, description="Proficiency level")


def default_native_language() -> Language:
    """Native language assigned to profiles that have not picked one yet."""
    return Language(code="en", name="English", flag="🇺🇸", level=LanguageLevel.NATIVE)


class UserProfile(BaseModel):
    """
    Full user profile.

    Cached locally inside the session snapshot and mirrored to the
    account & profile store.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Profile ID (same as the identity uid)")
    uid: Optional[str] = Field(None, description="Identity provider uid")
    email: str = Field(default="", description="Email address")
    name: str = Field(default="", description="Display name")
    avatar: str = Field(default="", description="Avatar URL")
    photos: list[str] = Field(default_factory=list)
    bio: str = ""
    native_language: Language = Field(
        default_factory=default_native_language, alias="nativeLanguage"
    )
    learning_languages: list[Language] = Field(
        default_factory=list, alias="learningLanguages"
    )
    is_online: bool = Field(default=False, alias="isOnline")
    last_seen: datetime = Field(default_factory=utc_now, alias="lastSeen")
    country: str = ""
    city: str = ""
    age: int = Field(default=0, ge=0)
    is_verified: bool = Field(default=False, alias="isVerified")
    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")
    notifications_enabled: Optional[bool] = Field(None, alias="notificationsEnabled")

    def learns(self, language_code: str) -> bool:
        """Whether the user lists `language_code` among learning languages."""
        return any(lang.code == language_code for lang in self.learning_languages)

    def speaks(self, language_code: str) -> bool:
        """Whether the user is native in or learning `language_code`."""
        return self.native_language.code == language_code or self.learns(language_code)

    def apply(self, update: "ProfileUpdate") -> "UserProfile":
        """Return a copy with the explicitly set fields of `update` applied."""
        data = self.model_dump()
        data.update(update.changes())
        return UserProfile.model_validate(data)


class ProfileUpdate(BaseModel):
    """
    Partial profile update.

    Only fields explicitly passed are applied. Falsy values such as an
    empty bio or an empty photo list are applied like any other value;
    None means "leave unchanged".
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    avatar: Optional[str] = None
    photos: Optional[list[str]] = Field(None, max_length=MAX_PHOTOS)
    bio: Optional[str] = None
    native_language: Optional[Language] = Field(None, alias="nativeLanguage")
    learning_languages: Optional[list[Language]] = Field(None, alias="learningLanguages")
    country: Optional[str] = None
    city: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    notifications_enabled: Optional[bool] = Field(None, alias="notificationsEnabled")

    def changes(self) -> dict[str, Any]:
        """Field-name keyed dict of the values to apply."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


def build_default_profile(
    uid: str,
    email: str,
    name: str = "",
    avatar: str = "",
    is_online: bool = True,
) -> UserProfile:
    """
    Build a fresh profile for an identity that has no stored profile yet.

    Photos and bio are empty, the native language defaults to English,
    no learning languages are set and the profile is unverified.
    """
    now = utc_now()
    return UserProfile(
        id=uid,
        uid=uid,
        email=email,
        name=name,
        avatar=avatar,
        is_online=is_online,
        last_seen=now,
        created_at=now,
    )
