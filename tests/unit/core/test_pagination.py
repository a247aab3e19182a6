"""Unit tests for core.pagination module."""

from django.test import SimpleTestCase
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from core.pagination import BlogPageNumberPagination, UserCursorPagination


class TestBlogPageNumberPagination(SimpleTestCase):
    """Tests for the blog list page size."""

    def setUp(self):
        """Set up the request factory."""
        self.factory = APIRequestFactory()

    def _page_size(self, **params):
        request = Request(self.factory.get("/blog", params))
        return BlogPageNumberPagination().get_page_size(request)

    def test_defaults_to_ten(self):
        """Test the default page size."""
        self.assertEqual(self._page_size(), 10)

    def test_limit_sets_page_size(self):
        """Test ``limit`` is the page size parameter."""
        self.assertEqual(self._page_size(limit=25), 25)

    def test_limit_is_capped(self):
        """Test oversized limits fall back to the maximum."""
        self.assertEqual(self._page_size(limit=5000), 50)


class TestUserCursorPagination(SimpleTestCase):
    """Tests for the user directory cursor settings."""

    def test_orders_newest_first_with_unique_tiebreak(self):
        """Test the ordering ends with the primary key."""
        self.assertEqual(UserCursorPagination.ordering, ("-created_at", "-user_id"))

    def test_limit_is_capped(self):
        """Test oversized limits fall back to the maximum."""
        request = Request(APIRequestFactory().get("/api/users", {"limit": 5000}))

        self.assertEqual(UserCursorPagination().get_page_size(request), 100)
