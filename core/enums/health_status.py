"""Health status of a probed dependency."""

from enum import Enum


class HealthStatus(str, Enum):
    """Outcome of a database or cache probe."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    ERROR = "error"
