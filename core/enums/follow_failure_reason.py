"""Follow mutation failure reasons."""

from enum import Enum


class FollowFailureReason(str, Enum):
    """Reason a follow or unfollow request was rejected."""

    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    TARGET_IS_SELF = "TARGET_IS_SELF"
    ALREADY_FOLLOWING = "ALREADY_FOLLOWING"
    NOT_FOLLOWING = "NOT_FOLLOWING"
    STORE_ERROR = "STORE_ERROR"
