"""Test data builders for users, follow edges and blogs."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from django.conf import settings
from django.db.models import F

import jwt
from faker import Faker

from core.models import Blog, User, UserFollow

fake = Faker()


def create_user(**overrides) -> User:
    """Create a user with fake profile data."""
    defaults = {
        "auth_user_id": f"auth|{uuid4().hex}",
        "first_name": fake.first_name(),
        "last_name": fake.last_name(),
        "email": fake.unique.email(),
    }
    defaults.update(overrides)
    return User.objects.create(**defaults)


def create_follow(follower: User, followee: User) -> UserFollow:
    """Create an edge and bump the followee's counter like the service does."""
    edge = UserFollow.objects.create(follower=follower, followee=followee)
    User.objects.filter(user_id=followee.user_id).update(followers=F("followers") + 1)
    followee.refresh_from_db()
    return edge


def create_blog(author: User, **overrides) -> Blog:
    """Create a published blog for ``author``."""
    defaults = {
        "title": fake.sentence(nb_words=4),
        "description": fake.text(max_nb_chars=120),
        "content_html": f"<p>{fake.paragraph()}</p>",
        "content_json": {"type": "doc", "content": []},
        "categories": ["Tech"],
    }
    defaults.update(overrides)
    return Blog.objects.create(author=author, **defaults)


def bearer_token(auth_user_id: str, expires_in: int = 300, **claims) -> str:
    """Sign an access token the way the identity provider would."""
    payload = {
        "sub": auth_user_id,
        "type": "access_token",
        "exp": datetime.now(UTC) + timedelta(seconds=expires_in),
        **claims,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm="HS256")
