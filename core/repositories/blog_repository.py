"""Repository for blog-related database queries."""

from uuid import UUID

from django.db.models import Q, QuerySet

from core.models import Blog


class BlogRepository:
    """Repository for encapsulating blog database queries."""

    @staticmethod
    def with_author() -> QuerySet[Blog]:
        """All blogs, newest first, with the author joined in."""
        return Blog.objects.select_related("author").order_by("-created_at")

    @staticmethod
    def get_by_id(blog_id: UUID | str) -> Blog | None:
        """Look up a blog (with author) by primary key, None if absent."""
        return Blog.objects.select_related("author").filter(blog_id=blog_id).first()

    @staticmethod
    def by_author(user_id: UUID | str) -> QuerySet[Blog]:
        """Blogs written by ``user_id``, newest first."""
        return Blog.objects.filter(author_id=user_id).order_by("-created_at")

    @staticmethod
    def tagged(category: str) -> Q:
        """Filter matching blogs whose tag list contains ``category``.

        Tags are stored as a JSON array of strings, so the quoted tag is
        matched against the serialized array case-insensitively.
        """
        return Q(categories__icontains=f'"{category}"')

    @classmethod
    def by_category(cls, category: str) -> QuerySet[Blog]:
        """Blogs tagged with ``category``, newest first."""
        return cls.with_author().filter(cls.tagged(category))

    @classmethod
    def matching_name(cls, query: str) -> QuerySet[Blog]:
        """Blogs whose title or description contains ``query``."""
        return cls.with_author().filter(
            Q(title__icontains=query) | Q(description__icontains=query)
        )

    @classmethod
    def matching_content(cls, query: str) -> QuerySet[Blog]:
        """Blogs whose title or content contains ``query`` or that carry it as a tag."""
        return cls.with_author().filter(
            Q(title__icontains=query)
            | Q(content_html__icontains=query)
            | cls.tagged(query)
        )
