"""Tests for profile document mapping."""

from datetime import datetime, timezone

from modules.accounts.documents import (
    presence_document,
    profile_from_document,
    profile_to_document,
    update_to_document,
)
from modules.accounts.models import SERVER_TIMESTAMP, IdentityUser
from modules.profiles.models import ProfileUpdate

from tests.conftest import make_profile


class TestProfileToDocument:
    def test_document_keys(self):
        profile = make_profile(bio="Hola!", country="Spain", city="Madrid", age=29)

        doc = profile_to_document(profile)

        assert doc["uid"] == "user-123"
        assert doc["displayName"] == "Maria"
        assert doc["photoURL"] == ""
        assert doc["isOnline"] is True
        assert doc["lastSeen"] is SERVER_TIMESTAMP
        assert doc["nativeLanguage"] == {"code": "es", "name": "ES", "flag": "", "level": "native"}
        assert doc["learningLanguages"][0]["code"] == "en"
        assert doc["age"] == 29
        assert isinstance(doc["createdAt"], str)

    def test_offline_document(self):
        assert profile_to_document(make_profile(), is_online=False)["isOnline"] is False


class TestUpdateToDocument:
    def test_maps_field_names(self):
        doc = update_to_document(ProfileUpdate(name="Maria G", avatar="a.jpg", bio=""))
        assert doc == {"displayName": "Maria G", "photoURL": "a.jpg", "bio": ""}

    def test_empty_update(self):
        assert update_to_document(ProfileUpdate()) == {}

    def test_local_only_fields_not_mirrored(self):
        assert update_to_document(ProfileUpdate(notifications_enabled=True)) == {}


def test_presence_document():
    assert presence_document(False) == {"isOnline": False, "lastSeen": SERVER_TIMESTAMP}


class TestProfileFromDocument:
    def test_member_document(self):
        """Without an identity the stored presence is kept."""
        doc = {
            "uid": "user-456",
            "displayName": "Kenji",
            "isOnline": False,
            "lastSeen": "2026-01-02T03:04:05Z",
            "nativeLanguage": {"code": "ja", "name": "Japanese"},
        }

        profile = profile_from_document(doc)

        assert profile.id == "user-456"
        assert profile.name == "Kenji"
        assert profile.is_online is False
        assert profile.last_seen == datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert profile.native_language.code == "ja"

    def test_signing_in_user_falls_back_to_identity(self):
        identity = IdentityUser(
            uid="user-123",
            email="maria@example.com",
            display_name="Maria",
            photo_url="https://example.com/m.jpg",
        )

        profile = profile_from_document({"isOnline": False}, identity)

        assert profile.uid == "user-123"
        assert profile.email == "maria@example.com"
        assert profile.name == "Maria"
        assert profile.avatar == "https://example.com/m.jpg"
        assert profile.is_online is True

    def test_missing_fields_get_defaults(self):
        profile = profile_from_document({"uid": "user-789", "lastSeen": "not a date"})

        assert profile.native_language.code == "en"
        assert profile.learning_languages == []
        assert profile.photos == []
        assert profile.age == 0
