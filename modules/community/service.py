"""
Community directory service.

Loads member profiles from the account store and filters them the way
the community screen does.
"""

import logging
from typing import Iterable, Optional

from modules.accounts.documents import profile_from_document
from modules.accounts.interfaces import IAccountStore
from modules.profiles.models import UserProfile

from .interfaces import ICommunityService
from .models import DirectoryFilter, DirectoryResult

logger = logging.getLogger(__name__)


def filter_members(
    members: Iterable[UserProfile],
    directory_filter: DirectoryFilter,
) -> list[UserProfile]:
    """Apply search, language and online filters, preserving order."""
    result = list(members)

    if directory_filter.search_query:
        query = directory_filter.search_query.lower()
        result = [
            m for m in result
            if query in m.name.lower()
            or query in m.country.lower()
            or query in m.city.lower()
        ]

    if directory_filter.language_code:
        result = [m for m in result if m.speaks(directory_filter.language_code)]

    if directory_filter.online_only:
        result = [m for m in result if m.is_online]

    return result


def find_native_speakers(
    members: Iterable[UserProfile],
    viewer: UserProfile,
) -> list[UserProfile]:
    """Members whose native language is one the viewer is learning."""
    learning = {lang.code for lang in viewer.learning_languages}
    if not learning:
        return []
    return [m for m in members if m.native_language.code in learning]


class CommunityService(ICommunityService):
    """Implementation of the community directory."""

    def __init__(self, account_store: IAccountStore, page_size: int = 100):
        self._accounts = account_store
        self._page_size = page_size

    async def list_members(
        self,
        viewer: UserProfile,
        directory_filter: Optional[DirectoryFilter] = None,
    ) -> DirectoryResult:
        directory_filter = directory_filter or DirectoryFilter()
        documents = await self._accounts.list_profile_documents(limit=self._page_size)

        viewer_uid = viewer.uid or viewer.id
        members = [
            profile_from_document(doc)
            for doc in documents
            if doc.get("uid") and doc.get("uid") != viewer_uid
        ]
        logger.debug(f"Loaded {len(members)} community members")

        matches = filter_members(members, directory_filter)
        # Suggestions only make sense on the unfiltered directory
        native_speakers = (
            [] if directory_filter.is_narrowed else find_native_speakers(matches, viewer)
        )
        return DirectoryResult(
            members=matches,
            native_speakers=native_speakers,
            total=len(matches),
        )
