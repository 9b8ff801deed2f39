"""
HTTP Transport for ghdispatch.

Handles HTTP communication with the GitHub REST API: token authentication
and error handling. Each request is sent exactly once.
"""

import time
from typing import Any

import httpx

from ghdispatch.exceptions import (
    AuthenticationError,
    AuthorizationError,
    GitHubError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from ghdispatch.logging import log_http_request, log_http_response

API_VERSION = "2022-11-28"
USER_AGENT = "ghdispatch"


class HTTPTransport:
    """
    HTTP transport layer for the GitHub REST API.

    Handles:
    - ``Authorization: token ...`` on every request
    - Error response parsing into typed exceptions
    - Rate-limit hints (Retry-After, X-RateLimit-Reset) on RateLimitedError
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Personal access token
            timeout: Request timeout in seconds
            http_transport: httpx transport to send requests through (tests use
                ``httpx.MockTransport``)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=http_transport,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"token {token}",
                "User-Agent": USER_AGENT,
                "X-GitHub-Api-Version": API_VERSION,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Make an authenticated request.

        Args:
            method: HTTP method
            path: API path (e.g., "/user")
            params: Query parameters
            body: JSON request body (for POST/PUT/PATCH)

        Returns:
            Parsed JSON response, or an empty dict for empty responses (204)

        Raises:
            GitHubError: On API errors
            ServerError: With code CONNECTION_ERROR when the request never
                got a response
        """
        log_http_request(method, f"{self.base_url}{path}", body=body)
        try:
            response = self._client.request(method, path, params=params, json=body)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e)) from e

        log_http_response(
            response.status_code,
            str(response.request.url),
            elapsed_ms=response.elapsed.total_seconds() * 1000,
        )

        if response.status_code >= 400:
            raise self._parse_error_response(response)
        return self._parse_body(response)

    def _parse_body(self, response: httpx.Response) -> dict[str, Any]:
        if response.status_code == 204 or not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            raise ServerError("INVALID_RESPONSE", f"Response is not JSON: {e}") from e
        if not isinstance(data, dict):
            return {"items": data}
        return data

    def _parse_error_response(self, response: httpx.Response) -> GitHubError:
        """
        Parse a GitHub error response into a typed exception.

        GitHub error bodies look like
        ``{"message": "Bad credentials", "documentation_url": "..."}``.
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        message = data.get("message") or f"HTTP {status_code}"
        request_id = response.headers.get("X-GitHub-Request-Id")
        code = f"HTTP_{status_code}"

        if status_code == 401:
            return AuthenticationError(code, message, request_id)
        elif status_code == 429 or (
            status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0"
        ):
            return RateLimitedError(
                "RATE_LIMITED", message, self._retry_after(response), request_id
            )
        elif status_code == 403:
            return AuthorizationError(code, message, request_id)
        elif status_code == 404:
            return NotFoundError(code, message, request_id)
        elif status_code >= 500:
            return ServerError(code, message, request_id)
        else:
            return ValidationError(code, message, request_id)

    def _retry_after(self, response: httpx.Response) -> int:
        """Seconds until the rate limit resets, as reported by GitHub."""
        retry_after_str = response.headers.get("Retry-After")
        if retry_after_str is not None:
            try:
                return int(retry_after_str)
            except ValueError:
                return 60
        reset = response.headers.get("X-RateLimit-Reset")
        if reset is not None:
            try:
                return max(int(reset) - int(time.time()), 0)
            except ValueError:
                return 60
        return 60
