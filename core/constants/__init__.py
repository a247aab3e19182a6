"""Constants package for core application."""

from core.constants.blog import (
    ALL_CATEGORIES,
    BLOG_CATEGORIES,
    BLOG_DESCRIPTION_MAX_LENGTH,
    BLOG_DESCRIPTION_MIN_LENGTH,
    BLOG_NAME_SEARCH_LIMIT,
    BLOG_PAGE_DEFAULT_LIMIT,
    BLOG_PAGE_MAX_LIMIT,
    BLOG_PATH,
    BLOG_SEARCH_LIMIT,
    BLOG_TITLE_MAX_LENGTH,
    BLOG_TITLE_MIN_LENGTH,
    DASHBOARD_EMPTY_MESSAGE,
    DASHBOARD_LATEST_LIMIT,
    DASHBOARD_PATH,
    DASHBOARD_SUGGESTION_LIMIT,
    EMPTY_EDITOR_HTML,
    FOLLOW_REVALIDATE_PATHS,
    PROFILE_BLOG_LIMIT,
    PROFILE_PATH,
    RANDOM_SAMPLE_DEFAULT_LIMIT,
    RANDOM_SAMPLE_MAX_LIMIT,
    RELATED_BLOG_LIMIT,
    SEARCH_DEBOUNCE_SECONDS,
    USER_LIST_DEFAULT_LIMIT,
    USER_LIST_MAX_LIMIT,
    USER_SEARCH_DEFAULT_LIMIT,
    USER_SEARCH_MAX_LIMIT,
    USER_SEARCH_MIN_LENGTH,
)
from core.constants.http import (
    HSTS_HEADER,
    HSTS_VALUE,
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    REQUEST_ID_PATTERN,
    SECURITY_HEADERS,
    SLOW_REQUEST_THRESHOLD,
)

__all__ = [
    "ALL_CATEGORIES",
    "BLOG_CATEGORIES",
    "BLOG_DESCRIPTION_MAX_LENGTH",
    "BLOG_DESCRIPTION_MIN_LENGTH",
    "BLOG_NAME_SEARCH_LIMIT",
    "BLOG_PAGE_DEFAULT_LIMIT",
    "BLOG_PAGE_MAX_LIMIT",
    "BLOG_PATH",
    "BLOG_SEARCH_LIMIT",
    "BLOG_TITLE_MAX_LENGTH",
    "BLOG_TITLE_MIN_LENGTH",
    "DASHBOARD_EMPTY_MESSAGE",
    "DASHBOARD_LATEST_LIMIT",
    "DASHBOARD_PATH",
    "DASHBOARD_SUGGESTION_LIMIT",
    "EMPTY_EDITOR_HTML",
    "FOLLOW_REVALIDATE_PATHS",
    "HSTS_HEADER",
    "HSTS_VALUE",
    "PROCESS_TIME_HEADER",
    "PROFILE_BLOG_LIMIT",
    "PROFILE_PATH",
    "RANDOM_SAMPLE_DEFAULT_LIMIT",
    "RANDOM_SAMPLE_MAX_LIMIT",
    "RELATED_BLOG_LIMIT",
    "REQUEST_ID_HEADER",
    "REQUEST_ID_PATTERN",
    "SEARCH_DEBOUNCE_SECONDS",
    "SECURITY_HEADERS",
    "SLOW_REQUEST_THRESHOLD",
    "USER_LIST_DEFAULT_LIMIT",
    "USER_LIST_MAX_LIMIT",
    "USER_SEARCH_DEFAULT_LIMIT",
    "USER_SEARCH_MAX_LIMIT",
    "USER_SEARCH_MIN_LENGTH",
]
