"""Unit tests for RequestIDMiddleware."""

import unittest
import uuid

from django.http import HttpResponse
from django.test import RequestFactory

import structlog

from core.constants import REQUEST_ID_HEADER
from core.logging.context import get_request_id
from core.middleware.request_id import RequestIDMiddleware


class TestRequestIDMiddleware(unittest.TestCase):
    """Test cases for RequestIDMiddleware."""

    def setUp(self):
        """Record what the view sees while the request is in flight."""
        self.factory = RequestFactory()
        self.seen = {}

        def get_response(request):
            self.seen["thread_local"] = get_request_id()
            self.seen["contextvars"] = structlog.contextvars.get_contextvars().get(
                "request_id"
            )
            return HttpResponse("OK")

        self.middleware = RequestIDMiddleware(get_response)

    def test_generates_uuid_when_header_missing(self):
        """Test a fresh UUID is used without a client ID."""
        request = self.factory.get("/blog")

        response = self.middleware(request)

        uuid.UUID(request.request_id)
        self.assertEqual(response[REQUEST_ID_HEADER], request.request_id)

    def test_reuses_well_formed_client_id(self):
        """Test a safe client ID is propagated."""
        request = self.factory.get("/blog", HTTP_X_REQUEST_ID="edge-7f3a:42")

        response = self.middleware(request)

        self.assertEqual(response[REQUEST_ID_HEADER], "edge-7f3a:42")

    def test_replaces_unsafe_client_id(self):
        """Test IDs with spaces or control characters are not logged verbatim."""
        request = self.factory.get("/blog", HTTP_X_REQUEST_ID="bad id\nforged=1")

        response = self.middleware(request)

        self.assertNotEqual(response[REQUEST_ID_HEADER], "bad id\nforged=1")
        uuid.UUID(response[REQUEST_ID_HEADER])

    def test_replaces_overlong_client_id(self):
        """Test very long IDs are replaced."""
        request = self.factory.get("/blog", HTTP_X_REQUEST_ID="a" * 200)

        response = self.middleware(request)

        uuid.UUID(response[REQUEST_ID_HEADER])

    def test_id_is_visible_to_view_and_cleared_afterwards(self):
        """Test the ID is bound during the request only."""
        request = self.factory.get("/blog")

        self.middleware(request)

        self.assertEqual(self.seen["thread_local"], request.request_id)
        self.assertEqual(self.seen["contextvars"], request.request_id)
        self.assertIsNone(get_request_id())
        self.assertNotIn("request_id", structlog.contextvars.get_contextvars())


if __name__ == "__main__":
    unittest.main()
