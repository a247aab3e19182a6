"""Unit tests for BlogApiClient."""

import unittest
from uuid import uuid4

import requests
import responses
from responses import matchers

from core.client import BlogApiClient
from core.enums import FollowFailureReason
from core.exceptions import ApiClientError

BASE_URL = "http://blog.test"


class TestBlogApiClient(unittest.TestCase):
    """Tests for the HTTP client."""

    def setUp(self):
        """Create a client on a real session."""
        self.client = BlogApiClient(
            f"{BASE_URL}/", access_token="token-123", session=requests.Session()
        )
        self.user_id = uuid4()
        self.follow_url = f"{BASE_URL}/api/users/{self.user_id}/follow"

    @responses.activate
    def test_follow_posts_with_bearer_token(self):
        """Test follow calls POST on the follow endpoint."""
        responses.add(
            responses.POST,
            self.follow_url,
            json={"success": True, "error": None, "reason": None},
            status=200,
        )

        result = self.client.follow(self.user_id)

        self.assertTrue(result.success)
        self.assertEqual(len(responses.calls), 1)
        request = responses.calls[0].request
        self.assertEqual(request.headers["Authorization"], "Bearer token-123")
        self.assertEqual(request.headers["Accept"], "application/json")

    @responses.activate
    def test_rejected_follow_is_a_failed_result(self):
        """Test 409 bodies are parsed instead of raised."""
        responses.add(
            responses.DELETE,
            self.follow_url,
            json={
                "success": False,
                "error": "You are not following this user",
                "reason": "NOT_FOLLOWING",
            },
            status=409,
        )

        result = self.client.unfollow(self.user_id)

        self.assertFalse(result.success)
        self.assertEqual(result.reason, FollowFailureReason.NOT_FOLLOWING)
        self.assertEqual(responses.calls[0].request.method, "DELETE")

    @responses.activate
    def test_unparseable_follow_response_raises(self):
        """Test non-JSON follow responses raise ApiClientError."""
        responses.add(
            responses.POST,
            self.follow_url,
            body="Bad Gateway",
            status=502,
            content_type="text/plain",
        )

        with self.assertRaises(ApiClientError) as ctx:
            self.client.follow(self.user_id)

        self.assertEqual(ctx.exception.status_code, 502)

    @responses.activate
    def test_search_blogs_passes_query(self):
        """Test search sends q and returns the decoded list."""
        responses.add(
            responses.GET,
            f"{BASE_URL}/blog/search",
            json=[{"title": "Django"}],
            status=200,
            match=[matchers.query_param_matcher({"q": "django"})],
        )

        blogs = self.client.search_blogs("django")

        self.assertEqual(blogs, [{"title": "Django"}])

    @responses.activate
    def test_search_users_error_raises(self):
        """Test error statuses raise ApiClientError."""
        responses.add(
            responses.GET, f"{BASE_URL}/api/users/search", body="oops", status=500
        )

        with self.assertRaises(ApiClientError) as ctx:
            self.client.search_users("ann")

        self.assertEqual(ctx.exception.status_code, 500)

    @responses.activate
    def test_is_following(self):
        """Test the follow status body is read."""
        responses.add(
            responses.GET, self.follow_url, json={"is_following": True}, status=200
        )

        self.assertTrue(self.client.is_following(self.user_id))

    @responses.activate
    def test_connection_errors_propagate(self):
        """Test transport errors are re-raised to the caller."""
        responses.add(
            responses.GET,
            f"{BASE_URL}/blog/search",
            body=requests.ConnectionError("refused"),
        )

        with self.assertRaises(requests.ConnectionError):
            self.client.search_blogs("x")

    @responses.activate
    def test_no_token_sends_no_authorization(self):
        """Test anonymous clients omit the header."""
        client = BlogApiClient(BASE_URL)
        responses.add(
            responses.GET, f"{BASE_URL}/api/users/search", json=[], status=200
        )

        client.search_users("ann")

        self.assertNotIn("Authorization", responses.calls[0].request.headers)

