"""Client-side toggle status enumeration."""

from enum import Enum


class ToggleStatus(str, Enum):
    """Lifecycle of an optimistic toggle.

    IDLE: no request in flight, displayed state equals confirmed state.
    PENDING: request in flight, displayed state is tentative, input disabled.
    FAILED: last request failed and the displayed state was reverted.
    """

    IDLE = "idle"
    PENDING = "pending"
    FAILED = "failed"
