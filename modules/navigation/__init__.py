"""
Navigation module.

Routes the app between the auth, email-verification, profile-setup and
main regions based on the current session.

Public API:
- NavigationGuard: Redirects on session changes
- resolve_region: Pure session -> region mapping
- INavigator / InMemoryNavigator: Router interface and a recording implementation
- AppRegion, REGION_ROUTES: Regions and their entry routes
"""

from .guard import NavigationGuard, InMemoryNavigator, resolve_region
from .interfaces import INavigator
from .models import AppRegion, REGION_ROUTES

__all__ = [
    "NavigationGuard",
    "InMemoryNavigator",
    "resolve_region",
    "INavigator",
    "AppRegion",
    "REGION_ROUTES",
]
