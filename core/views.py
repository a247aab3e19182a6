"""API views for core application."""

from uuid import UUID

import structlog
from pydantic import ValidationError
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.permissions import (
    AllowAny,
    IsAuthenticated,
    IsAuthenticatedOrReadOnly,
)
from rest_framework.response import Response
from rest_framework.views import APIView

from core.constants import (
    RANDOM_SAMPLE_DEFAULT_LIMIT,
    RANDOM_SAMPLE_MAX_LIMIT,
    USER_SEARCH_DEFAULT_LIMIT,
    USER_SEARCH_MAX_LIMIT,
)
from core.enums import FollowFailureReason
from core.pagination import BlogPageNumberPagination, UserCursorPagination
from core.schemas.blog import (
    BlogCreateRequest,
    BlogDetail,
    BlogSummary,
    BlogUpdateRequest,
)
from core.schemas.follow import FollowResult, FollowStatusResponse
from core.schemas.user import (
    AuthorSummary,
    AvatarUpdateRequest,
    UserDetail,
    UserProfileUpdateRequest,
)
from core.services import (
    blog_service,
    dashboard_service,
    follow_service,
    health_service,
    user_service,
)

logger = structlog.get_logger(__name__)

FOLLOW_FAILURE_STATUS = {
    FollowFailureReason.NOT_AUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    FollowFailureReason.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FollowFailureReason.TARGET_IS_SELF: status.HTTP_400_BAD_REQUEST,
    FollowFailureReason.ALREADY_FOLLOWING: status.HTTP_409_CONFLICT,
    FollowFailureReason.NOT_FOLLOWING: status.HTTP_409_CONFLICT,
    FollowFailureReason.STORE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _bad_request(e: ValidationError) -> Response:
    return Response(
        {
            "error": "bad_request",
            "message": "Invalid request parameters",
            "errors": e.errors(include_url=False, include_context=False),
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def _int_param(request, name: str, default: int, maximum: int) -> int:
    """Read a positive integer query parameter, clamped to ``maximum``.

    Raises:
        ParseError: If the value is not a positive integer
    """
    raw = request.query_params.get(name)
    if raw in (None, ""):
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ParseError(f"Query parameter '{name}' must be an integer") from e
    if value < 1:
        raise ParseError(f"Query parameter '{name}' must be at least 1")
    return min(value, maximum)


def _follow_response(result: FollowResult) -> Response:
    if result.success:
        return Response(result.model_dump(), status=status.HTTP_200_OK)
    return Response(
        result.model_dump(),
        status=FOLLOW_FAILURE_STATUS.get(
            FollowFailureReason(result.reason), status.HTTP_400_BAD_REQUEST
        ),
    )


def _summaries(blogs) -> list[dict]:
    return [BlogSummary.model_validate(blog).model_dump() for blog in blogs]


def _authors(users) -> list[dict]:
    return [AuthorSummary.model_validate(user).model_dump() for user in users]


class LivenessCheckView(APIView):
    """Liveness probe endpoint for Kubernetes.

    Returns 200 if the service is alive and running.
    This should not check external dependencies.

    This endpoint is exempt from authentication to allow Kubernetes probes.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for liveness check.

        Args:
            _request: HTTP request object (unused).

        Returns:
            Response object with status OK if service is alive.
        """
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint for Kubernetes.

    Returns 200 if the service is ready to serve traffic, reporting a
    degraded status when the database or cache is unavailable.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for readiness check."""
        readiness = health_service.get_readiness_status()
        return Response(readiness.model_dump(), status=status.HTTP_200_OK)


class UserListView(APIView):
    """Cursor-paginated user directory.

    Query parameters: ``limit``, ``cursor`` and ``search``.
    """

    permission_classes = (AllowAny,)

    def get(self, request):
        """List users newest first.

        Returns:
            200 OK with ``next``, ``previous`` and ``results``
            404 Not Found if the cursor is invalid
        """
        queryset = user_service.list_users(search=request.query_params.get("search"))

        paginator = UserCursorPagination()
        page = paginator.paginate_queryset(queryset, request, view=self)
        users = [UserDetail.model_validate(user).model_dump() for user in page or []]
        return paginator.get_paginated_response(users)


class UserSearchView(APIView):
    """User search for the author picker and header search box."""

    permission_classes = (AllowAny,)

    def get(self, request):
        """Search users by name or email.

        Queries shorter than two characters return an empty list.
        """
        query = request.query_params.get("q", "")
        limit = _int_param(
            request, "limit", USER_SEARCH_DEFAULT_LIMIT, USER_SEARCH_MAX_LIMIT
        )
        users = user_service.search_users(query, limit=limit)
        return Response(_authors(users), status=status.HTTP_200_OK)


class SuggestedUsersView(APIView):
    """Random authors for the "who to follow" widget."""

    permission_classes = (AllowAny,)

    def get(self, request):
        """Return a random window of authors, excluding the caller."""
        limit = _int_param(
            request, "limit", RANDOM_SAMPLE_DEFAULT_LIMIT, RANDOM_SAMPLE_MAX_LIMIT
        )
        exclude = None
        if request.user is not None:
            acting = user_service.get_user_by_auth_id(request.user.user_id)
            exclude = acting.user_id if acting else None
        users = user_service.get_random_users(limit=limit, exclude_user_id=exclude)
        return Response(_authors(users), status=status.HTTP_200_OK)


class CurrentUserView(APIView):
    """The authenticated user's own account.

    GET: Profile with counts
    PATCH: Update names and avatar
    DELETE: Delete the account with its blogs and follow edges
    """

    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """Return the caller's user record.

        Returns:
            200 OK with UserDetail
            401 Unauthorized if not authenticated
            404 Not Found if the identity has not been synced yet
        """
        user = user_service.get_acting_user()
        return Response(
            UserDetail.model_validate(user_service.get_user_by_id(user.user_id)).model_dump(),
            status=status.HTTP_200_OK,
        )

    def patch(self, request):
        """Update the caller's profile.

        Accepts ``firstName``/``lastName``/``avatarUrl`` (or snake_case).
        Sending ``avatarUrl`` alone updates just the avatar.
        """
        logger.info("profile_update_requested", auth_user_id=request.user.user_id)
        data = request.data
        try:
            if set(data) <= {"avatar_url", "avatarUrl"} and data:
                user = user_service.update_avatar(AvatarUpdateRequest(**data))
            else:
                user = user_service.update_profile(UserProfileUpdateRequest(**data))
        except ValidationError as e:
            logger.warning("profile_update_invalid", validation_errors=e.errors())
            return _bad_request(e)

        return Response(UserDetail.model_validate(user).model_dump(), status=status.HTTP_200_OK)

    def delete(self, request):
        """Delete the caller's account."""
        logger.info("account_deletion_requested", auth_user_id=request.user.user_id)
        user_service.delete_user()
        return Response(status=status.HTTP_204_NO_CONTENT)


class UserSyncView(APIView):
    """Sync-on-login: ensure the caller has a user row."""

    permission_classes = (IsAuthenticated,)

    def post(self, request):
        """Create the caller's row from token claims if missing.

        Returns:
            201 Created with UserDetail when the row was created
            200 OK with UserDetail when it already existed
        """
        user, created = user_service.sync_user()
        return Response(
            UserDetail.model_validate(user).model_dump(),
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class UserDetailView(APIView):
    """Public user record with relationship counts."""

    permission_classes = (AllowAny,)

    def get(self, _request, user_id: UUID):
        """Return a user.

        Returns:
            200 OK with UserDetail
            404 Not Found if the user does not exist
        """
        user = user_service.get_user_by_id(user_id)
        return Response(UserDetail.model_validate(user).model_dump(), status=status.HTTP_200_OK)


class UserProfileView(APIView):
    """Profile page data: user, counts and latest blogs."""

    permission_classes = (AllowAny,)

    def get(self, _request, user_id: UUID):
        """Return the profile payload for ``user_id``."""
        profile = user_service.get_user_profile(user_id)
        return Response(profile.model_dump(), status=status.HTTP_200_OK)


class UserFollowersView(APIView):
    """Users following a user."""

    permission_classes = (AllowAny,)

    def get(self, _request, user_id: UUID):
        """List followers of ``user_id``."""
        return Response(
            _authors(follow_service.get_followers(user_id)), status=status.HTTP_200_OK
        )


class UserFollowingView(APIView):
    """Users a user follows."""

    permission_classes = (AllowAny,)

    def get(self, _request, user_id: UUID):
        """List users followed by ``user_id``."""
        return Response(
            _authors(follow_service.get_following(user_id)), status=status.HTTP_200_OK
        )


class FollowStatsView(APIView):
    """Follower and following counts for a user."""

    permission_classes = (AllowAny,)

    def get(self, _request, user_id: UUID):
        """Return FollowStats for ``user_id``."""
        stats = follow_service.get_follow_stats(user_id)
        return Response(stats.model_dump(), status=status.HTTP_200_OK)


class FollowView(APIView):
    """Follow state between the caller and a user.

    GET: Whether the caller follows the user
    POST: Follow
    DELETE: Unfollow

    POST and DELETE always answer with a FollowResult body
    ``{success, error, reason}``; the reason picks the status code. They stay
    open to anonymous callers so that case is reported the same way.
    """

    permission_classes = (AllowAny,)

    def get(self, _request, user_id: UUID):
        """Return FollowStatusResponse; False for anonymous callers."""
        response_data = FollowStatusResponse(
            is_following=follow_service.is_following(user_id)
        )
        return Response(response_data.model_dump(), status=status.HTTP_200_OK)

    def post(self, request, user_id: UUID):
        """Follow ``user_id``.

        Returns:
            200 OK on success
            400 Bad Request when following yourself
            401 Unauthorized if not authenticated
            404 Not Found if either user does not exist
            409 Conflict if already following
            500 Internal Server Error if the store fails
        """
        logger.info(
            "follow_requested",
            auth_user_id=request.user.user_id if request.user else None,
            target_user_id=str(user_id),
        )
        return _follow_response(follow_service.follow_user(user_id))

    def delete(self, request, user_id: UUID):
        """Unfollow ``user_id``; 409 Conflict if not following."""
        logger.info(
            "unfollow_requested",
            auth_user_id=request.user.user_id if request.user else None,
            target_user_id=str(user_id),
        )
        return _follow_response(follow_service.unfollow_user(user_id))


class BlogListView(APIView):
    """Blog listing and publishing.

    GET: Paginated list, newest first (``page``, ``limit``)
    POST: Publish a blog as the caller
    """

    permission_classes = (IsAuthenticatedOrReadOnly,)

    def get(self, request):
        """Return one page of blogs.

        Returns:
            200 OK with ``count``, ``next``, ``previous`` and ``results``
            404 Not Found if the page does not exist
        """
        paginator = BlogPageNumberPagination()
        page = paginator.paginate_queryset(
            blog_service.get_all_blogs(), request, view=self
        )
        return paginator.get_paginated_response(_summaries(page or []))

    def post(self, request):
        """Publish a blog.

        Returns:
            201 Created with BlogDetail
            400 Bad Request if validation fails (nothing is stored)
            401 Unauthorized if not authenticated
            404 Not Found if the caller has not been synced
            500 Internal Server Error if the store fails
        """
        logger.info("blog_create_requested", auth_user_id=request.user.user_id)
        try:
            blog_request = BlogCreateRequest(**request.data)
        except ValidationError as e:
            logger.warning("blog_create_invalid", validation_errors=e.errors())
            return _bad_request(e)

        blog = blog_service.create_blog(blog_request)
        return Response(BlogDetail.model_validate(blog).model_dump(), status=status.HTTP_201_CREATED)


class BlogSearchView(APIView):
    """Blog search over title, content and category."""

    permission_classes = (AllowAny,)

    def get(self, request):
        """Search blogs; blank ``q`` returns an empty list."""
        blogs = blog_service.search_blogs(request.query_params.get("q", ""))
        return Response(_summaries(blogs), status=status.HTTP_200_OK)


class RandomBlogsView(APIView):
    """Suggested blogs."""

    permission_classes = (AllowAny,)

    def get(self, request):
        """Return a random window of blogs."""
        limit = _int_param(
            request, "limit", RANDOM_SAMPLE_DEFAULT_LIMIT, RANDOM_SAMPLE_MAX_LIMIT
        )
        return Response(
            _summaries(blog_service.get_random_blogs(limit)), status=status.HTTP_200_OK
        )


class BlogDetailView(APIView):
    """A single blog.

    GET: Blog with content and author
    PATCH: Partial edit by the author
    DELETE: Delete by the author
    """

    permission_classes = (IsAuthenticatedOrReadOnly,)

    def get(self, _request, blog_id: UUID):
        """Return BlogDetail, 404 if missing."""
        blog = blog_service.get_blog(blog_id)
        return Response(BlogDetail.model_validate(blog).model_dump(), status=status.HTTP_200_OK)

    def patch(self, request, blog_id: UUID):
        """Edit a blog.

        Returns:
            200 OK with BlogDetail
            400 Bad Request if validation fails
            403 Forbidden if the caller is not the author
            404 Not Found if the blog does not exist
        """
        try:
            update_request = BlogUpdateRequest(**request.data)
        except ValidationError as e:
            logger.warning(
                "blog_update_invalid", blog_id=str(blog_id), validation_errors=e.errors()
            )
            return _bad_request(e)

        blog = blog_service.update_blog(blog_id, update_request)
        return Response(BlogDetail.model_validate(blog).model_dump(), status=status.HTTP_200_OK)

    def delete(self, _request, blog_id: UUID):
        """Delete a blog; 403 if the caller is not the author."""
        blog_service.delete_blog(blog_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class RelatedBlogsView(APIView):
    """Blogs related to a blog by category."""

    permission_classes = (AllowAny,)

    def get(self, _request, blog_id: UUID):
        """Return up to three related blogs."""
        return Response(
            _summaries(blog_service.get_related_blogs(blog_id)), status=status.HTTP_200_OK
        )


class DashboardView(APIView):
    """Home page payload."""

    permission_classes = (AllowAny,)

    def get(self, request):
        """Return DashboardResponse for the ``category`` query parameter."""
        dashboard = dashboard_service.get_dashboard(request.query_params.get("category"))
        return Response(dashboard.model_dump(), status=status.HTTP_200_OK)
