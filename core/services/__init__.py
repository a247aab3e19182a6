"""Services for the core app."""

from core.services.blog_service import BlogService, blog_service
from core.services.dashboard_service import DashboardService, dashboard_service
from core.services.follow_service import FollowService, follow_service
from core.services.health_service import HealthService, health_service
from core.services.page_cache_service import PageCacheService, page_cache
from core.services.user_service import UserService, user_service

__all__ = [
    "BlogService",
    "DashboardService",
    "FollowService",
    "HealthService",
    "PageCacheService",
    "UserService",
    "blog_service",
    "dashboard_service",
    "follow_service",
    "health_service",
    "page_cache",
    "user_service",
]
