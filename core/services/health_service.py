"""Health check service with short-lived result caching."""

import logging
import time
from collections.abc import Callable

from django.core.cache import cache
from django.db import connection
from django.db.utils import OperationalError

from core.enums import HealthStatus
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)

CACHE_PROBE_KEY = "__health_check__"


class HealthService:
    """Service for performing health checks with caching."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: Time to live for cached health check results
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._results: dict[str, tuple[float, DependencyHealth]] = {}

    def get_liveness_status(self) -> LivenessResponse:
        """Get liveness status (always returns alive)."""
        return LivenessResponse(status="alive")

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status with database and cache health checks.

        The service stays ready but reports ``degraded`` when a dependency is
        down, so it keeps serving whatever does not need that dependency.
        """
        dependencies = {
            "database": self.check_database_health(),
            "cache": self.check_cache_health(),
        }
        degraded = not all(health.healthy for health in dependencies.values())

        return ReadinessResponse(
            ready=True,
            status="degraded" if degraded else "ready",
            degraded=degraded,
            dependencies=dependencies,
        )

    def check_database_health(self) -> DependencyHealth:
        """Check database connectivity without executing a query."""
        return self._cached("database", self._probe_database)

    def check_cache_health(self) -> DependencyHealth:
        """Check the cache backend with a set/get round trip."""
        return self._cached("cache", self._probe_cache)

    def _cached(
        self, name: str, probe: Callable[[], DependencyHealth]
    ) -> DependencyHealth:
        now = time.time()
        cached = self._results.get(name)
        if cached is not None and (now - cached[0]) < self.cache_ttl_seconds:
            return cached[1]

        health = probe()
        if not health.healthy:
            logger.warning(f"{name} health check failed: {health.message}")
        self._results[name] = (now, health)
        return health

    def _probe_database(self) -> DependencyHealth:
        start_time = time.perf_counter()
        try:
            connection.ensure_connection()
        except OperationalError as e:
            return DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
        return DependencyHealth(
            healthy=True,
            status=HealthStatus.HEALTHY,
            message="Database connection successful",
            response_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    def _probe_cache(self) -> DependencyHealth:
        start_time = time.perf_counter()
        try:
            cache.set(CACHE_PROBE_KEY, "ok", timeout=1)
            healthy = cache.get(CACHE_PROBE_KEY) == "ok"
        except Exception as e:
            return DependencyHealth(
                healthy=False,
                status=HealthStatus.ERROR,
                message=f"Cache connection failed: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
        return DependencyHealth(
            healthy=healthy,
            status=HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY,
            message=(
                "Cache connection successful"
                if healthy
                else "Cache health check failed: unexpected result"
            ),
            response_time_ms=(time.perf_counter() - start_time) * 1000,
        )


# Global health service instance
health_service = HealthService()
