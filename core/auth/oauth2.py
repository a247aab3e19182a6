"""Bearer token authentication against the external identity provider.

Supports two validation modes:
1. Token Introspection: the provider's introspection endpoint is called and
   the result cached for ``OAUTH2_TOKEN_CACHE_TTL`` seconds
2. Local JWT Validation: the signature is verified with the shared secret

On success the resolved identity is also stored in the security context so
services can read the acting user without it being passed through every call.
"""

import hashlib
from typing import Any, cast

from django.conf import settings
from django.core.cache import cache

import jwt
import requests
import structlog
from rest_framework import authentication, exceptions

from core.auth.context import set_current_user

logger = structlog.get_logger(__name__)

JWT_ALGORITHMS = ["HS256", "HS384", "HS512"]


class OAuth2User:
    """Authenticated identity resolved from a bearer token.

    This is not a Django model; ``user_id`` is the identity provider's subject
    and maps to ``core.models.User.auth_user_id``.
    """

    def __init__(
        self,
        user_id: str,
        client_id: str,
        scopes: list[str],
        claims: dict[str, Any] | None = None,
    ):
        """Initialize OAuth2 user.

        Args:
            user_id: Subject of the token
            client_id: OAuth2 client ID
            scopes: List of granted scopes
            claims: Profile claims (names, email, picture) if the token has them
        """
        self.id = user_id
        self.user_id = user_id
        self.client_id = client_id
        self.scopes = scopes
        self.claims = claims or {}
        self.is_authenticated = True

    @property
    def first_name(self) -> str:
        """Given name claim, empty when absent."""
        return self.claims.get("given_name") or self.claims.get("first_name") or ""

    @property
    def last_name(self) -> str:
        """Family name claim, empty when absent."""
        return self.claims.get("family_name") or self.claims.get("last_name") or ""

    @property
    def email(self) -> str:
        """Email claim, empty when absent."""
        return self.claims.get("email") or ""

    @property
    def avatar_url(self) -> str:
        """Picture claim, empty when absent."""
        return self.claims.get("picture") or self.claims.get("image_url") or ""

    def has_scope(self, scope: str) -> bool:
        """Check if user has a specific scope."""
        return scope in self.scopes

    def __str__(self):
        """String representation."""
        return f"OAuth2User(user_id={self.user_id}, client_id={self.client_id})"


class OAuth2Authentication(authentication.BaseAuthentication):
    """Bearer token authentication for the blog API.

    Requests without an ``Authorization`` header stay anonymous so the public
    read endpoints keep working; a header that is present must carry a valid
    token or the request fails with 401.
    """

    def authenticate(self, request):
        """Resolve the bearer token to an ``OAuth2User``.

        Returns:
            Tuple of (user, token), or None when no credentials were sent

        Raises:
            AuthenticationFailed: If the header is malformed or the token invalid
        """
        if not settings.OAUTH2_SERVICE_ENABLED:
            return None

        token = _bearer_token(request)
        if token is None:
            return None

        if settings.OAUTH2_INTROSPECTION_ENABLED:
            claims = self._introspect(token)
        else:
            claims = self._decode_jwt(token)

        subject = claims.get("sub")
        if not subject:
            raise exceptions.AuthenticationFailed("Token has no subject")

        user = OAuth2User(
            user_id=subject,
            client_id=claims.get("client_id") or "unknown",
            scopes=claims.get("scopes") or [],
            claims=claims,
        )
        set_current_user(user)
        return (user, token)

    def _introspect(self, token: str) -> dict[str, Any]:
        """Ask the identity provider whether ``token`` is active.

        Active results are cached for ``OAUTH2_TOKEN_CACHE_TTL`` seconds under
        a digest of the token.

        Raises:
            AuthenticationFailed: If the token is inactive or the provider is down
        """
        cache_key = settings.OAUTH2_TOKEN_CACHE_PREFIX + hashlib.sha256(
            token.encode()
        ).hexdigest()
        cached = cache.get(cache_key)
        if cached:
            return cast("dict[str, Any]", cached)

        try:
            response = requests.post(
                settings.OAUTH2_INTROSPECT_URL,
                data={"token": token, "token_type_hint": "access_token"},
                auth=(settings.OAUTH2_CLIENT_ID, settings.OAUTH2_CLIENT_SECRET),
                timeout=5,
            )
        except requests.RequestException as e:
            logger.error("token_introspection_unavailable", error=str(e))
            raise exceptions.AuthenticationFailed(
                "Token validation service unavailable"
            ) from e

        if response.status_code != 200:
            logger.warning("token_introspection_failed", status_code=response.status_code)
            raise exceptions.AuthenticationFailed("Token introspection failed")

        claims = response.json()
        if not claims.get("active", False):
            raise exceptions.AuthenticationFailed("Token is not active")

        cache.set(cache_key, claims, timeout=settings.OAUTH2_TOKEN_CACHE_TTL)
        return cast("dict[str, Any]", claims)

    def _decode_jwt(self, token: str) -> dict[str, Any]:
        """Verify an HMAC-signed access token with ``JWT_SECRET``.

        Raises:
            AuthenticationFailed: If the token is expired, forged or not an
                access token
        """
        if not settings.JWT_SECRET:
            logger.error("jwt_secret_missing")
            raise exceptions.AuthenticationFailed("JWT validation not configured")

        try:
            claims = jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=JWT_ALGORITHMS,
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise exceptions.AuthenticationFailed("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("jwt_rejected", error=str(e))
            raise exceptions.AuthenticationFailed("Invalid token") from e

        token_type = claims.get("type")
        if token_type is not None and token_type != "access_token":
            raise exceptions.AuthenticationFailed(f"Invalid token type: {token_type}")
        return claims

    def authenticate_header(self, _request):
        """Challenge sent with 401 responses."""
        return "Bearer"


def _bearer_token(request) -> str | None:
    """Token from ``Authorization: Bearer <token>``, None when absent.

    Raises:
        AuthenticationFailed: If the header uses another scheme or is malformed
    """
    header = request.headers.get("authorization")
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        raise exceptions.AuthenticationFailed("Invalid authorization header format")
    return token
