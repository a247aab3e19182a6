"""HTTP client for the blog API, used by front ends and scripts."""

from typing import Any
from uuid import UUID

import requests
import structlog

from core.exceptions import ApiClientError
from core.schemas.follow import FollowResult

logger = structlog.get_logger(__name__)


class BlogApiClient:
    """Thin ``requests`` wrapper around the blog service endpoints."""

    def __init__(
        self,
        base_url: str,
        access_token: str | None = None,
        timeout: float = 10,
        session: requests.Session | None = None,
    ):
        """Initialize the API client.

        Args:
            base_url: Service root, e.g. ``http://localhost:8000``
            access_token: Bearer token sent with every request when set
            timeout: Request timeout in seconds
            session: Optional session to reuse connections
        """
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self.timeout = timeout
        self.session = session or requests.Session()

    def follow(self, user_id: UUID | str) -> FollowResult:
        """Follow a user; rejected follows come back as a failed result."""
        return self._follow_request("POST", user_id)

    def unfollow(self, user_id: UUID | str) -> FollowResult:
        """Unfollow a user; rejected unfollows come back as a failed result."""
        return self._follow_request("DELETE", user_id)

    def is_following(self, user_id: UUID | str) -> bool:
        """Whether the token's user follows ``user_id``."""
        response = self._request("GET", f"/api/users/{user_id}/follow")
        self._raise_for_status(response)
        return bool(response.json().get("is_following"))

    def search_users(self, query: str) -> list[dict[str, Any]]:
        """Search users by name or email."""
        response = self._request("GET", "/api/users/search", params={"q": query})
        self._raise_for_status(response)
        return response.json()

    def search_blogs(self, query: str) -> list[dict[str, Any]]:
        """Search blogs by title, content or category."""
        response = self._request("GET", "/blog/search", params={"q": query})
        self._raise_for_status(response)
        return response.json()

    def _follow_request(self, method: str, user_id: UUID | str) -> FollowResult:
        response = self._request(method, f"/api/users/{user_id}/follow")
        try:
            # Follow endpoints return a FollowResult body for every status
            return FollowResult.model_validate(response.json())
        except ValueError as e:
            raise ApiClientError(
                f"Unexpected follow response: {response.text}",
                status_code=response.status_code,
            ) from e

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
    ) -> requests.Response:
        headers = {"Accept": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json_data,
                timeout=self.timeout,
            )
        except (requests.Timeout, requests.ConnectionError) as e:
            logger.error("blog_api_request_failed", method=method, url=url, error=str(e))
            raise

        logger.debug(
            "blog_api_response",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        return response

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        if response.status_code >= 400:
            raise ApiClientError(
                f"Blog API returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
