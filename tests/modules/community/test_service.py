"""Tests for the community directory."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from modules.community.models import DirectoryFilter
from modules.community.service import CommunityService, filter_members, find_native_speakers

from tests.conftest import make_profile


@pytest.fixture
def members():
    return [
        make_profile(uid="u1", name="Kenji", native="ja", learning=("en",), country="Japan", city="Osaka", is_online=True),
        make_profile(uid="u2", name="Claire", native="fr", learning=("es",), country="France", city="Lyon"),
        make_profile(uid="u3", name="John", native="en", learning=("es", "ja"), country="USA", city="Austin", is_online=True),
    ]


class TestFilterMembers:
    def test_no_filter_keeps_everyone(self, members):
        assert filter_members(members, DirectoryFilter()) == members

    def test_search_is_case_insensitive_over_name_country_city(self, members):
        assert [m.name for m in filter_members(members, DirectoryFilter(search_query="KEN"))] == ["Kenji"]
        assert [m.name for m in filter_members(members, DirectoryFilter(search_query="france"))] == ["Claire"]
        assert [m.name for m in filter_members(members, DirectoryFilter(search_query="aus"))] == ["John"]

    def test_language_matches_native_or_learning(self, members):
        result = filter_members(members, DirectoryFilter(language_code="ja"))
        assert [m.name for m in result] == ["Kenji", "John"]

    def test_online_only(self, members):
        result = filter_members(members, DirectoryFilter(online_only=True))
        assert [m.name for m in result] == ["Kenji", "John"]

    def test_filters_combine(self, members):
        result = filter_members(members, DirectoryFilter(language_code="es", online_only=True))
        assert [m.name for m in result] == ["John"]


class TestFindNativeSpeakers:
    def test_matches_learning_languages(self, members):
        viewer = make_profile(native="es", learning=("fr", "ja"))
        assert [m.name for m in find_native_speakers(members, viewer)] == ["Kenji", "Claire"]

    def test_viewer_not_learning_anything(self, members):
        viewer = make_profile(learning=())
        assert find_native_speakers(members, viewer) == []


class TestCommunityService:
    @pytest.fixture
    def account_store(self):
        store = MagicMock()
        store.list_profile_documents = AsyncMock(
            return_value=[
                {"uid": "user-123", "displayName": "Maria"},
                {"uid": "u1", "displayName": "Kenji", "nativeLanguage": {"code": "ja", "name": "Japanese"}, "isOnline": True},
                {"uid": "u2", "displayName": "Claire", "nativeLanguage": {"code": "fr", "name": "French"}},
                {"displayName": "No uid"},
            ]
        )
        return store

    @pytest.mark.asyncio
    async def test_excludes_viewer_and_incomplete_documents(self, account_store, profile):
        service = CommunityService(account_store, page_size=25)

        result = await service.list_members(profile)

        assert [m.name for m in result.members] == ["Kenji", "Claire"]
        assert result.total == 2
        account_store.list_profile_documents.assert_awaited_once_with(limit=25)

    @pytest.mark.asyncio
    async def test_native_speaker_suggestions(self, account_store):
        viewer = make_profile(native="es", learning=("ja",))

        result = await CommunityService(account_store).list_members(viewer)

        assert [m.name for m in result.native_speakers] == ["Kenji"]

    @pytest.mark.asyncio
    async def test_no_suggestions_when_narrowed(self, account_store):
        viewer = make_profile(native="es", learning=("ja",))

        result = await CommunityService(account_store).list_members(
            viewer, DirectoryFilter(search_query="k")
        )

        assert [m.name for m in result.members] == ["Kenji"]
        assert result.native_speakers == []
