"""Enumerations for the core app."""

from core.enums.follow_failure_reason import FollowFailureReason
from core.enums.health_status import HealthStatus
from core.enums.toggle_status import ToggleStatus

__all__ = ["FollowFailureReason", "HealthStatus", "ToggleStatus"]
