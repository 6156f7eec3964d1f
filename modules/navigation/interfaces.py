"""
Navigation module interface.

The guard only needs to know where the app currently is and how to
replace the current screen; the router behind it is up to the client.
"""

from typing import Protocol, runtime_checkable

from .models import AppRegion


@runtime_checkable
class INavigator(Protocol):
    """Interface to the client's router."""

    @property
    def current_region(self) -> AppRegion:
        """Region of the screen currently displayed."""
        ...

    def replace(self, region: AppRegion) -> None:
        """Replace the current screen with the entry screen of `region`."""
        ...
