"""
API key authentication middleware.

This middleware validates per-user API keys for the JSON API.
"""

import logging
from typing import Optional

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from accounts.infrastructure.models import ApiKey

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1/"


def _unauthorized(code: str, message: str) -> JsonResponse:
    return JsonResponse({"error": {"code": code, "message": message}}, status=401)


class APIKeyAuthenticationMiddleware(MiddlewareMixin):
    """
    Middleware for API key authentication.

    This middleware:
    1. Validates the API key header on API requests (/api/v1/*)
    2. Stores the key's user on request.api_user for the API views
    3. Returns 401 Unauthorized if authentication fails

    Console pages use the Django session and are left alone.
    """

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and validate authentication.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if authentication fails, None otherwise
        """
        if self._should_skip_auth(request.path):
            return None

        if request.path.startswith(API_PREFIX):
            return self._authenticate_api(request)

        return None

    def _should_skip_auth(self, path: str) -> bool:
        """
        Check if authentication should be skipped for this path.

        Args:
            path: Request path

        Returns:
            True if auth should be skipped
        """
        skip_paths = [
            "/admin/",
            "/accounts/",
            "/health/",
            "/health",
            "/api/docs/",
            "/api/redoc/",
            "/api/schema/",
            "/static/",
        ]
        return any(path.startswith(skip) for skip in skip_paths)

    def _authenticate_api(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Authenticate API request.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if auth fails, None if successful
        """
        header = getattr(settings, "API_KEY_HEADER", "X-API-Key")
        raw_key = request.headers.get(header) or request.headers.get(
            "Authorization", ""
        ).replace("Bearer ", "")

        if not raw_key:
            return _unauthorized("MISSING_API_KEY", f"Missing API key. Provide {header} header.")

        # pylint: disable=no-member
        api_key = (
            ApiKey.objects.select_related("user")
            .filter(key_hash=ApiKey.hash_key(raw_key))
            .first()
        )
        if not api_key:
            logger.warning("Invalid API key attempted: %s...", raw_key[:8])
            return _unauthorized("INVALID_API_KEY", "Invalid API key")

        if not api_key.is_valid():
            logger.warning("Expired API key attempted: %s...", raw_key[:8])
            return _unauthorized("EXPIRED_API_KEY", "API key expired")

        if not api_key.user.is_active:
            logger.warning("API key of inactive user attempted: %s...", raw_key[:8])
            return _unauthorized("INACTIVE_USER", "User is inactive")

        api_key.mark_used()

        # DRF replaces request.user, views read the key's user from here
        request.api_user = api_key.user  # type: ignore
        request.api_key = api_key  # type: ignore
        return None
