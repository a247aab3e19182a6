"""Pagination classes for list endpoints."""

from rest_framework.pagination import CursorPagination, PageNumberPagination

from core.constants import (
    BLOG_PAGE_DEFAULT_LIMIT,
    BLOG_PAGE_MAX_LIMIT,
    USER_LIST_DEFAULT_LIMIT,
    USER_LIST_MAX_LIMIT,
)


class BlogPageNumberPagination(PageNumberPagination):
    """Page-number pagination for the blog list.

    ``?page=`` selects the page, ``?limit=`` the page size (capped).
    """

    page_size = BLOG_PAGE_DEFAULT_LIMIT
    page_size_query_param = "limit"
    max_page_size = BLOG_PAGE_MAX_LIMIT


class UserCursorPagination(CursorPagination):
    """Cursor pagination for the user directory, newest users first.

    Cursors stay stable while users sign up between page requests.
    """

    page_size = USER_LIST_DEFAULT_LIMIT
    page_size_query_param = "limit"
    max_page_size = USER_LIST_MAX_LIMIT
    ordering = ("-created_at", "-user_id")
