"""Blog model."""

import uuid
from typing import ClassVar

from django.db import models


class Blog(models.Model):
    """A published post.

    Content is stored twice: the rendered HTML and the editor's structured
    document tree. ``categories`` holds a list of tag strings.
    """

    blog_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    author = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="blogs",
        db_column="author_id",
    )
    title = models.CharField(max_length=200)
    description = models.CharField(max_length=500)
    thumbnail = models.TextField(default="", blank=True)
    content_html = models.TextField()
    content_json = models.JSONField(default=dict, blank=True)
    categories = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "blogs"
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list[models.Index]] = [
            models.Index(fields=["-created_at"], name="blogs_created_at_idx"),
        ]

    def __str__(self) -> str:
        """Return string representation of blog."""
        return self.title

    def __repr__(self) -> str:
        """Return detailed representation of blog."""
        return f"<Blog(blog_id={self.blog_id}, title='{self.title}')>"
