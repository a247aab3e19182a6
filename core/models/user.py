"""User model."""

import uuid
from typing import ClassVar

from django.db import models


class User(models.Model):
    """Blog author and reader account.

    Rows are created lazily the first time an authenticated identity visits
    the service (sync-on-login) and are keyed externally by the identity
    provider's subject. ``followers`` is a denormalized count of incoming
    follow edges and is only ever changed together with those edges.
    """

    user_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    auth_user_id = models.CharField(max_length=255, unique=True)
    first_name = models.CharField(max_length=100, default="", blank=True)
    last_name = models.CharField(max_length=100, default="", blank=True)
    email = models.EmailField(max_length=255, default="", blank=True)
    avatar_url = models.TextField(default="", blank=True)
    followers = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        ordering: ClassVar[list[str]] = ["-created_at"]

    @property
    def full_name(self) -> str:
        """Return the display name built from first and last name."""
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.full_name or self.auth_user_id} ({self.email})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(user_id={self.user_id}, auth_user_id='{self.auth_user_id}')>"
