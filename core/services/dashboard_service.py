"""Dashboard service assembling the home page payload."""

import structlog

from core.constants import (
    ALL_CATEGORIES,
    BLOG_CATEGORIES,
    DASHBOARD_EMPTY_MESSAGE,
    DASHBOARD_LATEST_LIMIT,
    DASHBOARD_PATH,
    DASHBOARD_SUGGESTION_LIMIT,
)
from core.schemas.blog import BlogDetail, BlogSummary
from core.schemas.dashboard import DashboardResponse
from core.schemas.user import AuthorSummary
from core.services.blog_service import blog_service
from core.services.page_cache_service import page_cache
from core.services.user_service import user_service

logger = structlog.get_logger(__name__)


class DashboardService:
    """Service for the dashboard page."""

    def get_dashboard(self, category: str | None = None) -> DashboardResponse:
        """Latest blogs for a category plus suggested blogs and authors.

        An unknown or missing category falls back to all blogs. No blogs is
        an empty state with a message, not an error. Payloads are cached per
        category until a blog or follow mutation revalidates the dashboard.

        Args:
            category: One of BLOG_CATEGORIES; "All" disables filtering

        Returns:
            DashboardResponse
        """
        selected = category if category in BLOG_CATEGORIES else ALL_CATEGORIES
        return page_cache.get_or_set(
            DASHBOARD_PATH, selected, lambda: self._build(selected)
        )

    def _build(self, category: str) -> DashboardResponse:
        if category == ALL_CATEGORIES:
            latest = blog_service.get_latest_blogs(DASHBOARD_LATEST_LIMIT)
        else:
            latest = blog_service.get_blogs_by_category(
                category, DASHBOARD_LATEST_LIMIT
            )

        logger.debug("dashboard_built", category=category, latest_count=len(latest))

        return DashboardResponse(
            selected_category=category,
            categories=list(BLOG_CATEGORIES),
            latest_blogs=[BlogDetail.model_validate(blog) for blog in latest],
            empty_message=None if latest else DASHBOARD_EMPTY_MESSAGE,
            suggested_blogs=[
                BlogSummary.model_validate(blog)
                for blog in blog_service.get_random_blogs(DASHBOARD_SUGGESTION_LIMIT)
            ],
            suggested_authors=[
                AuthorSummary.model_validate(user)
                for user in user_service.get_random_users(DASHBOARD_SUGGESTION_LIMIT)
            ],
        )


# Global dashboard service instance
dashboard_service = DashboardService()
