"""Unit tests for PageCacheService."""

from unittest.mock import MagicMock, patch

from django.core.cache import cache
from django.test import SimpleTestCase

from core.services.page_cache_service import PageCacheService


class TestPageCacheService(SimpleTestCase):
    """Tests for versioned page caching."""

    def setUp(self):
        """Start from an empty cache."""
        cache.clear()
        self.page_cache = PageCacheService(timeout=60)

    def test_get_miss_returns_none(self):
        """Test a missing entry reads as None."""
        self.assertIsNone(self.page_cache.get("/dashboard", "All"))

    def test_set_then_get(self):
        """Test stored payloads are read back."""
        self.page_cache.set("/dashboard", "All", {"blogs": []})

        self.assertEqual(self.page_cache.get("/dashboard", "All"), {"blogs": []})

    def test_revalidate_hides_old_entries(self):
        """Test revalidated paths never serve earlier payloads."""
        self.page_cache.set("/dashboard", "All", "old")

        self.page_cache.revalidate("/dashboard")

        self.assertIsNone(self.page_cache.get("/dashboard", "All"))
        self.page_cache.set("/dashboard", "All", "new")
        self.assertEqual(self.page_cache.get("/dashboard", "All"), "new")

    def test_revalidate_only_touches_given_paths(self):
        """Test other paths keep their entries."""
        self.page_cache.set("/profile", "u1", "profile")
        self.page_cache.set("/blog", "page-1", "blogs")

        self.page_cache.revalidate("/blog")

        self.assertEqual(self.page_cache.get("/profile", "u1"), "profile")
        self.assertIsNone(self.page_cache.get("/blog", "page-1"))

    def test_repeated_revalidation(self):
        """Test each revalidation invalidates entries written since the last."""
        self.page_cache.revalidate("/blog")
        self.page_cache.set("/blog", "k", 1)
        self.page_cache.revalidate("/blog")

        self.assertIsNone(self.page_cache.get("/blog", "k"))

    def test_get_or_set_builds_once(self):
        """Test the builder only runs on a miss."""
        builder = MagicMock(return_value="payload")

        first = self.page_cache.get_or_set("/profile", "u1", builder)
        second = self.page_cache.get_or_set("/profile", "u1", builder)

        self.assertEqual((first, second), ("payload", "payload"))
        builder.assert_called_once()

    @patch("core.services.page_cache_service.cache")
    def test_backend_failure_reads_as_miss(self, mock_cache):
        """Test a broken cache backend does not fail the caller."""
        mock_cache.get.side_effect = ConnectionError("redis down")
        mock_cache.set.side_effect = ConnectionError("redis down")
        mock_cache.add.side_effect = ConnectionError("redis down")

        self.assertIsNone(self.page_cache.get("/dashboard", "All"))
        self.page_cache.set("/dashboard", "All", "x")
        self.page_cache.revalidate("/dashboard")
        self.assertEqual(
            self.page_cache.get_or_set("/dashboard", "All", lambda: "built"), "built"
        )
