"""
Community module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.profiles.models import UserProfile

from .models import DirectoryFilter, DirectoryResult


@runtime_checkable
class ICommunityService(Protocol):
    """Interface for browsing other members."""

    async def list_members(
        self,
        viewer: UserProfile,
        directory_filter: Optional[DirectoryFilter] = None,
    ) -> DirectoryResult:
        """
        List members other than `viewer` matching the filter.

        Raises:
            AccountStoreError: If the profile store cannot be read
        """
        ...
