"""Request schemas for creating and editing blogs."""

from typing import Any

from pydantic import Field, field_validator

from core.constants import (
    BLOG_DESCRIPTION_MAX_LENGTH,
    BLOG_DESCRIPTION_MIN_LENGTH,
    BLOG_TITLE_MAX_LENGTH,
    BLOG_TITLE_MIN_LENGTH,
    EMPTY_EDITOR_HTML,
)
from core.schemas.base_schema_model import BaseSchemaModel


def _clean_categories(categories: list[str]) -> list[str]:
    """Drop blank and duplicate tags, keeping first-seen order."""
    seen: dict[str, None] = {}
    for category in categories:
        tag = category.strip()
        if tag:
            seen.setdefault(tag, None)
    return list(seen)


def _require_content(content_html: str) -> str:
    if not content_html or content_html == EMPTY_EDITOR_HTML:
        raise ValueError("Content is required")
    return content_html


class BlogCreateRequest(BaseSchemaModel):
    """Payload for publishing a blog.

    Accepts both snake_case and the editor's camelCase keys
    (``contentHtml``, ``contentJson``).
    """

    title: str = Field(
        ...,
        min_length=BLOG_TITLE_MIN_LENGTH,
        max_length=BLOG_TITLE_MAX_LENGTH,
    )
    description: str = Field(
        ...,
        min_length=BLOG_DESCRIPTION_MIN_LENGTH,
        max_length=BLOG_DESCRIPTION_MAX_LENGTH,
    )
    thumbnail: str | None = None
    content_html: str
    content_json: dict[str, Any] = Field(default_factory=dict)
    categories: list[str] = Field(default_factory=list)

    @field_validator("content_html")
    @classmethod
    def content_not_empty(cls, value: str) -> str:
        """Reject empty editor output."""
        return _require_content(value)

    @field_validator("categories")
    @classmethod
    def dedupe_categories(cls, value: list[str]) -> list[str]:
        """Normalize the tag list."""
        return _clean_categories(value)


class BlogUpdateRequest(BaseSchemaModel):
    """Partial edit; only fields present in the payload are changed."""

    title: str | None = Field(
        None,
        min_length=BLOG_TITLE_MIN_LENGTH,
        max_length=BLOG_TITLE_MAX_LENGTH,
    )
    description: str | None = Field(
        None,
        min_length=BLOG_DESCRIPTION_MIN_LENGTH,
        max_length=BLOG_DESCRIPTION_MAX_LENGTH,
    )
    thumbnail: str | None = None
    content_html: str | None = None
    content_json: dict[str, Any] | None = None
    categories: list[str] | None = None

    @field_validator("content_html")
    @classmethod
    def content_not_empty(cls, value: str | None) -> str | None:
        """Reject empty editor output when content is being replaced."""
        if value is None:
            return value
        return _require_content(value)

    @field_validator("categories")
    @classmethod
    def dedupe_categories(cls, value: list[str] | None) -> list[str] | None:
        """Normalize the tag list when it is being replaced."""
        if value is None:
            return value
        return _clean_categories(value)
