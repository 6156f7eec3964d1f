"""
Navigation module data models.
"""

from enum import Enum

from modules.session.models import SessionState


class AppRegion(str, Enum):
    """Top-level app regions the guard routes between."""

    LOADING = "loading"  # Neutral view while the session is restored
    AUTH = "auth"
    EMAIL_VERIFICATION = "email_verification"
    PROFILE_SETUP = "profile_setup"
    MAIN = "main"


# Entry route for each region in the mobile app's router
REGION_ROUTES: dict[AppRegion, str] = {
    AppRegion.AUTH: "/(auth)/login",
    AppRegion.EMAIL_VERIFICATION: "/(auth)/verify-email",
    AppRegion.PROFILE_SETUP: "/profile-setup",
    AppRegion.MAIN: "/(tabs)/community",
}

STATE_REGIONS: dict[SessionState, AppRegion] = {
    SessionState.UNINITIALIZED: AppRegion.LOADING,
    SessionState.LOADING: AppRegion.LOADING,
    SessionState.UNAUTHENTICATED: AppRegion.AUTH,
    SessionState.NEEDS_VERIFICATION: AppRegion.EMAIL_VERIFICATION,
    SessionState.NEEDS_PROFILE_SETUP: AppRegion.PROFILE_SETUP,
    SessionState.AUTHENTICATED: AppRegion.MAIN,
}
