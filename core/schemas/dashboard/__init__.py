"""Dashboard schemas."""

from core.schemas.dashboard.dashboard_response import DashboardResponse

__all__ = ["DashboardResponse"]
