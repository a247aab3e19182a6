"""Unit tests for bearer token authentication."""

from unittest.mock import Mock, patch

from django.test import RequestFactory, SimpleTestCase, override_settings

import requests
from rest_framework.exceptions import AuthenticationFailed

from core.auth.context import clear_current_user, get_current_user
from core.auth.oauth2 import OAuth2Authentication, OAuth2User
from tests.factories import bearer_token


class TestOAuth2User(SimpleTestCase):
    """Profile claims exposed for user sync."""

    def test_reads_oidc_profile_claims(self):
        """Test standard OIDC claim names."""
        user = OAuth2User(
            "auth|1",
            "web",
            [],
            claims={
                "given_name": "Grace",
                "family_name": "Hopper",
                "email": "grace@example.com",
                "picture": "https://img.example.com/g.png",
            },
        )

        self.assertEqual(user.first_name, "Grace")
        self.assertEqual(user.last_name, "Hopper")
        self.assertEqual(user.email, "grace@example.com")
        self.assertEqual(user.avatar_url, "https://img.example.com/g.png")

    def test_missing_claims_are_empty(self):
        """Test absent claims default to empty strings."""
        user = OAuth2User("auth|1", "web", [])

        self.assertEqual(user.first_name, "")
        self.assertEqual(user.avatar_url, "")


class TestJwtAuthentication(SimpleTestCase):
    """Local JWT validation with the test secret."""

    def setUp(self):
        """Set up test fixtures."""
        self.factory = RequestFactory()
        self.auth = OAuth2Authentication()
        clear_current_user()
        self.addCleanup(clear_current_user)

    def _request(self, header: str | None):
        extra = {"HTTP_AUTHORIZATION": header} if header else {}
        return self.factory.get("/api/users/me", **extra)

    def test_no_header_stays_anonymous(self):
        """Test requests without credentials are not rejected."""
        self.assertIsNone(self.auth.authenticate(self._request(None)))
        self.assertIsNone(get_current_user())

    def test_valid_token_sets_security_context(self):
        """Test a valid token authenticates and sets the acting identity."""
        token = bearer_token("auth|42", given_name="Ada")

        user, returned_token = self.auth.authenticate(self._request(f"Bearer {token}"))

        self.assertEqual(user.user_id, "auth|42")
        self.assertEqual(user.first_name, "Ada")
        self.assertEqual(returned_token, token)
        self.assertIs(get_current_user(), user)

    def test_expired_token_is_rejected(self):
        """Test expired tokens fail."""
        token = bearer_token("auth|42", expires_in=-60)

        with self.assertRaisesMessage(AuthenticationFailed, "Token has expired"):
            self.auth.authenticate(self._request(f"Bearer {token}"))

    def test_refresh_token_is_rejected(self):
        """Test tokens typed as anything but access tokens fail."""
        token = bearer_token("auth|42", type="refresh_token")

        with self.assertRaises(AuthenticationFailed):
            self.auth.authenticate(self._request(f"Bearer {token}"))

    def test_forged_token_is_rejected(self):
        """Test signature verification."""
        with self.assertRaisesMessage(AuthenticationFailed, "Invalid token"):
            self.auth.authenticate(self._request("Bearer not.a.jwt"))

    def test_other_scheme_is_rejected(self):
        """Test non-bearer schemes fail instead of being ignored."""
        with self.assertRaises(AuthenticationFailed):
            self.auth.authenticate(self._request("Basic dXNlcjpwYXNz"))

    def test_disabled_service_skips_authentication(self):
        """Test the kill switch."""
        token = bearer_token("auth|42")

        with override_settings(OAUTH2_SERVICE_ENABLED=False):
            self.assertIsNone(self.auth.authenticate(self._request(f"Bearer {token}")))


@override_settings(OAUTH2_INTROSPECTION_ENABLED=True)
class TestIntrospection(SimpleTestCase):
    """Validation through the provider's introspection endpoint."""

    def setUp(self):
        """Set up test fixtures."""
        self.request = RequestFactory().get(
            "/blog", HTTP_AUTHORIZATION="Bearer opaque-token"
        )
        self.auth = OAuth2Authentication()
        self.addCleanup(clear_current_user)

    @patch("core.auth.oauth2.cache")
    @patch("core.auth.oauth2.requests.post")
    def test_active_token_is_cached(self, mock_post, mock_cache):
        """Test active introspection results are cached."""
        mock_cache.get.return_value = None
        mock_post.return_value = Mock(
            status_code=200, json=Mock(return_value={"active": True, "sub": "auth|7"})
        )

        user, _ = self.auth.authenticate(self.request)

        self.assertEqual(user.user_id, "auth|7")
        mock_cache.set.assert_called_once()
        cache_key = mock_cache.set.call_args[0][0]
        self.assertNotIn("opaque-token", cache_key)

    @patch("core.auth.oauth2.cache")
    @patch("core.auth.oauth2.requests.post")
    def test_cached_result_skips_provider(self, mock_post, mock_cache):
        """Test cache hits do not call the provider."""
        mock_cache.get.return_value = {"active": True, "sub": "auth|7"}

        user, _ = self.auth.authenticate(self.request)

        self.assertEqual(user.user_id, "auth|7")
        mock_post.assert_not_called()

    @patch("core.auth.oauth2.cache")
    @patch("core.auth.oauth2.requests.post")
    def test_inactive_token_is_rejected(self, mock_post, mock_cache):
        """Test inactive tokens fail."""
        mock_cache.get.return_value = None
        mock_post.return_value = Mock(
            status_code=200, json=Mock(return_value={"active": False})
        )

        with self.assertRaisesMessage(AuthenticationFailed, "Token is not active"):
            self.auth.authenticate(self.request)

    @patch("core.auth.oauth2.cache")
    @patch("core.auth.oauth2.requests.post")
    def test_provider_outage_is_rejected(self, mock_post, mock_cache):
        """Test connection errors surface as authentication failures."""
        mock_cache.get.return_value = None
        mock_post.side_effect = requests.ConnectionError("down")

        with self.assertRaisesMessage(
            AuthenticationFailed, "Token validation service unavailable"
        ):
            self.auth.authenticate(self.request)
