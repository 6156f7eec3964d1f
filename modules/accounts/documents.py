"""
Mapping between UserProfile and the stored profile document.

Document keys follow the schema the mobile app has always written:
uid, email, displayName, photoURL, isOnline, lastSeen, bio,
nativeLanguage, learningLanguages, country, city, age, isVerified,
photos, createdAt.
"""

from datetime import datetime
from typing import Any, Optional

from modules.profiles.models import (
    ProfileUpdate,
    UserProfile,
    default_native_language,
    utc_now,
)

from .models import SERVER_TIMESTAMP, IdentityUser

# ProfileUpdate field name -> document key
UPDATE_FIELDS: dict[str, str] = {
    "name": "displayName",
    "avatar": "photoURL",
    "photos": "photos",
    "bio": "bio",
    "native_language": "nativeLanguage",
    "learning_languages": "learningLanguages",
    "country": "country",
    "city": "city",
    "age": "age",
}


def profile_to_document(profile: UserProfile, is_online: bool = True) -> dict[str, Any]:
    """Full document for a profile; lastSeen is stamped by the store."""
    data = profile.model_dump(mode="json", exclude_none=True)
    return {
        "uid": profile.uid or profile.id,
        "email": profile.email,
        "displayName": profile.name,
        "photoURL": profile.avatar,
        "isOnline": is_online,
        "lastSeen": SERVER_TIMESTAMP,
        "bio": profile.bio,
        "nativeLanguage": data["native_language"],
        "learningLanguages": data["learning_languages"],
        "country": profile.country,
        "city": profile.city,
        "age": profile.age,
        "isVerified": profile.is_verified,
        "photos": list(profile.photos),
        "createdAt": data["created_at"],
    }


def update_to_document(update: ProfileUpdate) -> dict[str, Any]:
    """Document fields touched by a partial update."""
    changes = {
        key: value
        for key, value in update.model_dump(mode="json", exclude_unset=True).items()
        if value is not None
    }
    return {UPDATE_FIELDS[key]: value for key, value in changes.items() if key in UPDATE_FIELDS}


def presence_document(is_online: bool) -> dict[str, Any]:
    return {"isOnline": is_online, "lastSeen": SERVER_TIMESTAMP}


def _timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def profile_from_document(
    data: dict[str, Any],
    identity: Optional[IdentityUser] = None,
) -> UserProfile:
    """
    Build a profile from a stored document.

    Missing keys fall back to the identity's fields and then to defaults.
    When `identity` is given the profile belongs to the user signing in,
    so it is marked online with a fresh lastSeen.
    """
    uid = identity.uid if identity else str(data.get("uid") or data.get("id") or "")
    now = utc_now()

    if identity:
        email = identity.email or data.get("email") or ""
        name = data.get("displayName") or identity.display_name or ""
        avatar = data.get("photoURL") or identity.photo_url or ""
        is_online = True
        last_seen = now
    else:
        email = data.get("email") or ""
        name = data.get("displayName") or ""
        avatar = data.get("photoURL") or ""
        is_online = bool(data.get("isOnline", False))
        last_seen = _timestamp(data.get("lastSeen")) or now

    return UserProfile(
        id=uid,
        uid=uid,
        email=email,
        name=name,
        avatar=avatar,
        photos=data.get("photos") or [],
        bio=data.get("bio") or "",
        native_language=data.get("nativeLanguage") or default_native_language(),
        learning_languages=data.get("learningLanguages") or [],
        is_online=is_online,
        last_seen=last_seen,
        country=data.get("country") or "",
        city=data.get("city") or "",
        age=data.get("age") or 0,
        is_verified=bool(data.get("isVerified", False)),
        created_at=_timestamp(data.get("createdAt")) or now,
    )
