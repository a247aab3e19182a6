"""Repositories encapsulating ORM queries."""

from core.repositories.blog_repository import BlogRepository
from core.repositories.user_repository import UserRepository

__all__ = ["BlogRepository", "UserRepository"]
