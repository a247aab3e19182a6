"""Blog service for publishing, editing, listing and searching blogs."""

from uuid import UUID

from django.db import DatabaseError
from django.db.models import Q, QuerySet

import structlog

from core.constants import (
    BLOG_NAME_SEARCH_LIMIT,
    BLOG_PATH,
    BLOG_SEARCH_LIMIT,
    DASHBOARD_PATH,
    PROFILE_PATH,
    RANDOM_SAMPLE_DEFAULT_LIMIT,
    RELATED_BLOG_LIMIT,
)
from core.exceptions import BlogNotFoundError, BlogOwnershipError, StoreError
from core.models import Blog
from core.repositories import BlogRepository
from core.schemas.blog import BlogCreateRequest, BlogUpdateRequest
from core.services.page_cache_service import page_cache
from core.services.user_service import user_service
from core.utils import random_offset_sample

logger = structlog.get_logger(__name__)


class BlogService:
    """Service for blogs.

    Mutations act as the authenticated user and revalidate the listing pages
    that show blogs. Reads are public.
    """

    def create_blog(self, payload: BlogCreateRequest) -> Blog:
        """Publish a blog authored by the acting user.

        ``payload`` has already passed validation, so nothing is written for
        a rejected request.

        Raises:
            NotAuthenticated: If no identity is set in the security context
            UserNotFoundError: If the identity has never been synced
            StoreError: If the insert fails
        """
        author = user_service.get_acting_user()
        try:
            blog = Blog.objects.create(
                author=author,
                title=payload.title,
                description=payload.description,
                thumbnail=payload.thumbnail or "",
                content_html=payload.content_html,
                content_json=payload.content_json,
                categories=payload.categories,
            )
        except DatabaseError as e:
            logger.error("blog_create_failed", author_id=str(author.user_id), error=str(e))
            raise StoreError("create blog") from e

        logger.info("blog_created", blog_id=str(blog.blog_id), author_id=str(author.user_id))
        page_cache.revalidate(BLOG_PATH, DASHBOARD_PATH, PROFILE_PATH)
        return blog

    def get_blog(self, blog_id: UUID | str) -> Blog:
        """Get a blog with its author.

        Raises:
            BlogNotFoundError: If the blog does not exist
        """
        blog = BlogRepository.get_by_id(blog_id)
        if blog is None:
            raise BlogNotFoundError(str(blog_id))
        return blog

    def update_blog(self, blog_id: UUID | str, payload: BlogUpdateRequest) -> Blog:
        """Apply a partial edit to a blog owned by the acting user.

        Raises:
            BlogNotFoundError: If the blog does not exist
            BlogOwnershipError: If the acting user is not the author
        """
        blog = self._owned_blog(blog_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            return blog

        for field, value in changes.items():
            setattr(blog, field, value)
        try:
            blog.save(update_fields=[*changes, "updated_at"])
        except DatabaseError as e:
            logger.error("blog_update_failed", blog_id=str(blog_id), error=str(e))
            raise StoreError("update blog") from e

        logger.info("blog_updated", blog_id=str(blog.blog_id), fields=sorted(changes))
        page_cache.revalidate(BLOG_PATH, DASHBOARD_PATH, PROFILE_PATH)
        return blog

    def delete_blog(self, blog_id: UUID | str) -> None:
        """Delete a blog owned by the acting user."""
        blog = self._owned_blog(blog_id)
        try:
            blog.delete()
        except DatabaseError as e:
            logger.error("blog_delete_failed", blog_id=str(blog_id), error=str(e))
            raise StoreError("delete blog") from e

        logger.info("blog_deleted", blog_id=str(blog_id))
        page_cache.revalidate(BLOG_PATH, DASHBOARD_PATH, PROFILE_PATH)

    def get_all_blogs(self) -> QuerySet[Blog]:
        """All blogs, newest first, as a lazy queryset for pagination."""
        return BlogRepository.with_author()

    def get_latest_blogs(self, limit: int) -> list[Blog]:
        """The ``limit`` newest blogs."""
        return list(BlogRepository.with_author()[:limit])

    def get_recent_blog(self) -> Blog | None:
        """The newest blog, or None when there are none."""
        return BlogRepository.with_author().first()

    def get_user_blogs(self, user_id: UUID | str) -> list[Blog]:
        """Blogs written by ``user_id``, newest first."""
        return list(BlogRepository.by_author(user_id))

    def get_blogs_by_category(self, category: str, limit: int | None = None) -> list[Blog]:
        """Blogs tagged with ``category``, newest first."""
        queryset = BlogRepository.by_category(category)
        if limit is not None:
            queryset = queryset[:limit]
        return list(queryset)

    def get_related_blogs(
        self, blog_id: UUID | str, limit: int = RELATED_BLOG_LIMIT
    ) -> list[Blog]:
        """Blogs sharing a category with ``blog_id``.

        Filled up with the latest other blogs when too few share a category.

        Raises:
            BlogNotFoundError: If the blog does not exist
        """
        blog = self.get_blog(blog_id)
        others = BlogRepository.with_author().exclude(blog_id=blog.blog_id)

        related: list[Blog] = []
        if blog.categories:
            shared = Q()
            for category in blog.categories:
                shared |= BlogRepository.tagged(category)
            related = list(others.filter(shared)[:limit])

        if len(related) < limit:
            seen = [b.blog_id for b in related]
            related.extend(others.exclude(blog_id__in=seen)[: limit - len(related)])
        return related

    def get_random_blogs(self, limit: int = RANDOM_SAMPLE_DEFAULT_LIMIT) -> list[Blog]:
        """Suggested blogs: a random window of the blog list."""
        return random_offset_sample(
            BlogRepository.with_author(), limit, ("-created_at", "blog_id")
        )

    def search_blogs_by_name(self, query: str) -> list[Blog]:
        """Title or description search for the header search box."""
        query = (query or "").strip()
        if not query:
            return []
        return list(BlogRepository.matching_name(query)[:BLOG_NAME_SEARCH_LIMIT])

    def search_blogs(self, query: str) -> list[Blog]:
        """Title, content or category search for the search endpoint."""
        query = (query or "").strip()
        if not query:
            return []
        return list(BlogRepository.matching_content(query)[:BLOG_SEARCH_LIMIT])

    def _owned_blog(self, blog_id: UUID | str) -> Blog:
        user = user_service.get_acting_user()
        blog = self.get_blog(blog_id)
        if blog.author_id != user.user_id:
            logger.warning(
                "blog_ownership_denied",
                blog_id=str(blog_id),
                user_id=str(user.user_id),
            )
            raise BlogOwnershipError(str(blog_id), str(user.user_id))
        return blog


# Global blog service instance
blog_service = BlogService()
