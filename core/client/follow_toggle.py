"""Optimistic follow button state."""

import threading
from collections.abc import Callable

import structlog

from core.enums import ToggleStatus
from core.schemas.follow import FollowResult

logger = structlog.get_logger(__name__)

FollowAction = Callable[[], FollowResult]


class FollowToggle:
    """State machine behind a follow/unfollow button.

    ``confirmed`` is what the server last agreed to; ``tentative`` is what the
    button shows. A click flips ``tentative`` immediately and disables the
    button until the request resolves, so a second click while pending is
    ignored and the final state is always the first request's outcome.

    Example:
        >>> toggle = FollowToggle(False, follow, unfollow)
        >>> toggle.click()
        >>> toggle.label
        'Following'
    """

    def __init__(
        self,
        initial_is_following: bool,
        follow_action: FollowAction,
        unfollow_action: FollowAction,
    ) -> None:
        """Initialize the toggle.

        Args:
            initial_is_following: Follow state as rendered by the server
            follow_action: Sends the follow request
            unfollow_action: Sends the unfollow request
        """
        self.confirmed = initial_is_following
        self.tentative = initial_is_following
        self.status = ToggleStatus.IDLE
        self.last_error: str | None = None
        self._follow = follow_action
        self._unfollow = unfollow_action
        self._lock = threading.Lock()

    @property
    def is_disabled(self) -> bool:
        """True while a request is in flight."""
        return self.status == ToggleStatus.PENDING

    @property
    def label(self) -> str:
        """Button text for the displayed state."""
        return "Following" if self.tentative else "Follow"

    def begin(self) -> bool:
        """Start a toggle; returns False if one is already pending."""
        with self._lock:
            if self.status == ToggleStatus.PENDING:
                return False
            self.tentative = not self.confirmed
            self.status = ToggleStatus.PENDING
            self.last_error = None
            return True

    def resolve(self, success: bool) -> None:
        """Commit or revert the pending toggle."""
        with self._lock:
            if success:
                self.confirmed = self.tentative
                self.status = ToggleStatus.IDLE
            else:
                self.tentative = self.confirmed
                self.status = ToggleStatus.FAILED

    def click(self) -> FollowResult | None:
        """Toggle and send the matching request.

        Returns:
            The request's FollowResult, or None if the click was ignored
            because a request was already pending
        """
        if not self.begin():
            logger.debug("follow_toggle_ignored", status=self.status)
            return None

        action = self._unfollow if self.confirmed else self._follow
        try:
            result = action()
        except Exception as e:
            self.resolve(False)
            self.last_error = str(e)
            logger.warning("follow_toggle_request_failed", error=str(e))
            raise

        self.resolve(result.success)
        if not result.success:
            self.last_error = result.error
            logger.warning(
                "follow_toggle_rejected", reason=result.reason, error=result.error
            )
        return result
