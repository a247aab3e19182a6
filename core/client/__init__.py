"""Client-side helpers: API access, optimistic follow toggle, search debounce."""

from core.client.api_client import BlogApiClient
from core.client.debounce import SearchDebouncer
from core.client.follow_toggle import FollowToggle

__all__ = ["BlogApiClient", "FollowToggle", "SearchDebouncer"]
