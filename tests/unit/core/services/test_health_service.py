"""Unit tests for HealthService."""

from unittest.mock import patch

from django.db.utils import OperationalError
from django.test import SimpleTestCase, TestCase

from core.services.health_service import HealthService


class TestHealthService(TestCase):
    """Tests for readiness and liveness checks."""

    def setUp(self):
        """Create a service with caching disabled."""
        self.service = HealthService(cache_ttl_seconds=0)

    def test_liveness_is_always_alive(self):
        """Test liveness does not depend on anything."""
        self.assertEqual(self.service.get_liveness_status().status, "alive")

    def test_ready_when_dependencies_are_healthy(self):
        """Test readiness with a working database and cache."""
        readiness = self.service.get_readiness_status()

        self.assertTrue(readiness.ready)
        self.assertFalse(readiness.degraded)
        self.assertEqual(readiness.status, "ready")
        self.assertEqual(set(readiness.dependencies), {"database", "cache"})

    @patch("core.services.health_service.connection")
    def test_database_failure_degrades(self, mock_connection):
        """Test a database outage keeps the service ready but degraded."""
        mock_connection.ensure_connection.side_effect = OperationalError("down")

        readiness = self.service.get_readiness_status()

        self.assertTrue(readiness.ready)
        self.assertTrue(readiness.degraded)
        self.assertEqual(readiness.status, "degraded")
        self.assertFalse(readiness.dependencies["database"].healthy)


class TestHealthCheckCaching(SimpleTestCase):
    """Tests for result caching."""

    @patch("core.services.health_service.cache")
    def test_results_are_cached_within_ttl(self, mock_cache):
        """Test repeated checks within the TTL reuse the first result."""
        mock_cache.get.return_value = "ok"
        service = HealthService(cache_ttl_seconds=60)

        first = service.check_cache_health()
        second = service.check_cache_health()

        self.assertIs(first, second)
        mock_cache.set.assert_called_once()

    @patch("core.services.health_service.cache")
    def test_cache_error_is_unhealthy(self, mock_cache):
        """Test cache exceptions are reported, not raised."""
        mock_cache.set.side_effect = ConnectionError("refused")
        service = HealthService(cache_ttl_seconds=0)

        health = service.check_cache_health()

        self.assertFalse(health.healthy)
        self.assertIn("refused", health.message)
