"""Database models for core application."""

from core.models.blog import Blog
from core.models.user import User
from core.models.user_follow import UserFollow

__all__ = ["Blog", "User", "UserFollow"]
