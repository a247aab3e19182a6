"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    BlogDetailView,
    BlogListView,
    BlogSearchView,
    CurrentUserView,
    DashboardView,
    FollowStatsView,
    FollowView,
    LivenessCheckView,
    RandomBlogsView,
    ReadinessCheckView,
    RelatedBlogsView,
    SuggestedUsersView,
    UserDetailView,
    UserFollowersView,
    UserFollowingView,
    UserListView,
    UserProfileView,
    UserSearchView,
    UserSyncView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # User endpoints
    path("api/users", UserListView.as_view(), name="user-list"),
    path("api/users/search", UserSearchView.as_view(), name="user-search"),
    path("api/users/suggested", SuggestedUsersView.as_view(), name="user-suggested"),
    path("api/users/me", CurrentUserView.as_view(), name="user-me"),
    path("api/users/me/sync", UserSyncView.as_view(), name="user-sync"),
    path("api/users/<uuid:user_id>", UserDetailView.as_view(), name="user-detail"),
    path(
        "api/users/<uuid:user_id>/profile",
        UserProfileView.as_view(),
        name="user-profile",
    ),
    # Follow endpoints
    path(
        "api/users/<uuid:user_id>/follow",
        FollowView.as_view(),
        name="user-follow",
    ),
    path(
        "api/users/<uuid:user_id>/followers",
        UserFollowersView.as_view(),
        name="user-followers",
    ),
    path(
        "api/users/<uuid:user_id>/following",
        UserFollowingView.as_view(),
        name="user-following",
    ),
    path(
        "api/users/<uuid:user_id>/follow-stats",
        FollowStatsView.as_view(),
        name="user-follow-stats",
    ),
    # Blog endpoints
    path("blog", BlogListView.as_view(), name="blog-list"),
    path("blog/search", BlogSearchView.as_view(), name="blog-search"),
    path("blog/random", RandomBlogsView.as_view(), name="blog-random"),
    path("blog/<uuid:blog_id>", BlogDetailView.as_view(), name="blog-detail"),
    path(
        "blog/<uuid:blog_id>/related",
        RelatedBlogsView.as_view(),
        name="blog-related",
    ),
    # Dashboard
    path("dashboard", DashboardView.as_view(), name="dashboard"),
]
