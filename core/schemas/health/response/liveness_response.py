"""Liveness probe payload."""

from core.schemas.base_schema_model import BaseSchemaModel


class LivenessResponse(BaseSchemaModel):
    """The process is up; always ``{"status": "alive"}``."""

    status: str = "alive"
