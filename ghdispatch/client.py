"""
ghdispatch API client.

Provides the authenticated handle used for every GitHub API call.
"""

from typing import Any

import httpx

from ghdispatch.clients import ReposClient, UsersClient
from ghdispatch.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from ghdispatch.transport import HTTPTransport


class GitHubClient:
    """
    Authenticated client for the GitHub REST API.

    Aggregates the resource clients over one HTTP transport.

    Example:
        ```python
        from ghdispatch import GitHubClient

        with GitHubClient(token="ghp_...") as client:
            me = client.users.get_authenticated()
            client.repos.create_dispatch_event("octo", "hello", "build")
        ```
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: Personal access token
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            http_transport: httpx transport override (optional, used by tests)
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            http_transport=http_transport,
        )

        self.users = UsersClient(self._transport)
        self.repos = ReposClient(self._transport)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
