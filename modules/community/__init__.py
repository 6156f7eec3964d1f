"""
Community module.

Browse other members by name/location, language and online status, and
suggest native speakers of the languages the viewer is learning.

Public API:
- ICommunityService / CommunityService: Directory listing
- filter_members, find_native_speakers: Pure filtering helpers
- DirectoryFilter, DirectoryResult: Models
"""

from .interfaces import ICommunityService
from .models import DirectoryFilter, DirectoryResult
from .service import CommunityService, filter_members, find_native_speakers

__all__ = [
    "ICommunityService",
    "CommunityService",
    "filter_members",
    "find_native_speakers",
    "DirectoryFilter",
    "DirectoryResult",
]
