"""
Community directory data models.
"""

from typing import Optional
from pydantic import BaseModel, Field

from modules.profiles.models import UserProfile


class DirectoryFilter(BaseModel):
    """Filters the user picks on the community screen."""

    search_query: str = Field(default="", description="Matches name, country or city")
    language_code: Optional[str] = Field(None, description="Native or learning language")
    online_only: bool = Field(default=False, description="Only members currently online")

    @property
    def is_narrowed(self) -> bool:
        """Whether a search or language filter is active."""
        return bool(self.search_query) or bool(self.language_code)


class DirectoryResult(BaseModel):
    """Members matching a filter, plus native-speaker suggestions."""

    members: list[UserProfile] = Field(default_factory=list)
    native_speakers: list[UserProfile] = Field(default_factory=list)
    total: int = 0
