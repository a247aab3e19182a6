"""Readiness probe payload."""

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.health.dependency_health import DependencyHealth


class ReadinessResponse(BaseSchemaModel):
    """Readiness of the API and its dependencies.

    ``ready`` stays true while a dependency is down; ``status`` is then
    ``"degraded"`` and the failing entry in ``dependencies`` says why.
    """

    ready: bool
    status: str
    degraded: bool
    dependencies: dict[str, DependencyHealth]
