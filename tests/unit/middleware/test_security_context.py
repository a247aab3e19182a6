"""Unit tests for SecurityContextMiddleware."""

import unittest

from django.http import HttpRequest, HttpResponse

from core.auth.context import (
    clear_current_user,
    get_current_user,
    set_current_user,
)
from core.auth.oauth2 import OAuth2User
from core.middleware.security_context import SecurityContextMiddleware


def _identity(subject: str) -> OAuth2User:
    return OAuth2User(user_id=subject, client_id="web", scopes=[])


class TestSecurityContextMiddleware(unittest.TestCase):
    """Test cases for SecurityContextMiddleware."""

    def tearDown(self):
        """Leave no identity behind."""
        clear_current_user()

    def test_clears_leftover_identity_before_request(self):
        """Test that a stale identity is not visible to the next request."""
        set_current_user(_identity("stale"))
        seen = []

        def get_response(request):
            seen.append(get_current_user())
            return HttpResponse("OK")

        SecurityContextMiddleware(get_response)(HttpRequest())

        self.assertEqual(seen, [None])

    def test_clears_identity_after_request(self):
        """Test that the identity set during a request is removed."""

        def get_response(request):
            set_current_user(_identity("auth|1"))
            return HttpResponse("OK")

        SecurityContextMiddleware(get_response)(HttpRequest())

        self.assertIsNone(get_current_user())

    def test_clears_identity_when_view_raises(self):
        """Test that cleanup also happens on errors."""

        def get_response(request):
            set_current_user(_identity("auth|2"))
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            SecurityContextMiddleware(get_response)(HttpRequest())

        self.assertIsNone(get_current_user())
