"""Exception handling utilities for the blog service."""

from core.exceptions.blog_exceptions import (
    ApiClientError,
    BlogNotFoundError,
    BlogOwnershipError,
    BlogServiceError,
    StoreError,
    UserNotFoundError,
)
from core.exceptions.handlers import custom_exception_handler

__all__ = [
    "ApiClientError",
    "BlogNotFoundError",
    "BlogOwnershipError",
    "BlogServiceError",
    "StoreError",
    "UserNotFoundError",
    "custom_exception_handler",
]
