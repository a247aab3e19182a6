"""Pytest configuration and shared fixtures."""

import os

import django
from django.core.cache import cache
from django.test import Client

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "blog_service.settings_test")
django.setup()

from core.auth.context import clear_current_user  # noqa: E402


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture(autouse=True)
def isolated_state():
    """Start every test with an empty cache and no authenticated identity."""
    cache.clear()
    clear_current_user()
    yield
    clear_current_user()
