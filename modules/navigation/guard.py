"""
Navigation guard.

Maps the session to the region the user is allowed to see and
redirects when the displayed region does not match. Priority when
several gates apply: email verification, then profile setup, then the
main app; everything else goes to the auth screens.
"""

import logging
import time
from typing import Callable, Optional

from modules.session.interfaces import ISessionCoordinator
from modules.session.models import Session

from .interfaces import INavigator
from .models import AppRegion, STATE_REGIONS

logger = logging.getLogger(__name__)


def resolve_region(session: Session) -> AppRegion:
    """Region the session should be in; LOADING while it is restored."""
    return STATE_REGIONS[session.state]


class NavigationGuard:
    """
    Redirects the navigator whenever the session's region changes.

    A redirect is issued only when the target differs from the current
    region. With a positive cooldown, a repeat of the same redirect
    inside the cooldown window is suppressed.
    """

    def __init__(
        self,
        navigator: INavigator,
        cooldown_seconds: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._navigator = navigator
        self._cooldown = cooldown_seconds
        self._clock = clock
        self._last_target: Optional[AppRegion] = None
        self._last_redirect_at = 0.0

    def evaluate(
        self,
        session: Session,
        current_region: Optional[AppRegion] = None,
    ) -> Optional[AppRegion]:
        """
        Redirect if needed.

        Args:
            session: Session to route for
            current_region: Displayed region; read from the navigator if omitted

        Returns:
            The region redirected to, or None if no redirect was issued
        """
        target = resolve_region(session)
        if target is AppRegion.LOADING:
            return None

        current = current_region if current_region is not None else self._navigator.current_region
        if target == current:
            return None

        now = self._clock()
        if (
            self._cooldown > 0
            and target == self._last_target
            and now - self._last_redirect_at < self._cooldown
        ):
            logger.debug(f"Suppressed repeat redirect to {target.value}")
            return None

        logger.debug(f"Redirecting from {current.value} to {target.value}")
        self._navigator.replace(target)
        self._last_target = target
        self._last_redirect_at = now
        return target

    def attach(self, coordinator: ISessionCoordinator) -> Callable[[], None]:
        """
        Evaluate now and on every session change.

        Returns:
            Function that detaches the guard
        """
        self.evaluate(coordinator.session)
        return coordinator.subscribe(self.evaluate)


class InMemoryNavigator(INavigator):
    """Navigator that records redirects; used by the CLI and in tests."""

    def __init__(self, initial: AppRegion = AppRegion.LOADING):
        self._current = initial
        self.history: list[AppRegion] = []

    @property
    def current_region(self) -> AppRegion:
        return self._current

    def replace(self, region: AppRegion) -> None:
        self._current = region
        self.history.append(region)
