"""Repositories resource client."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ghdispatch.transport import HTTPTransport


class ReposClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def create_dispatch_event(
        self,
        owner: str,
        repo: str,
        event_type: str,
        client_payload: dict[str, Any] | None = None,
    ) -> None:
        """
        Create a repository_dispatch event.

        Triggers any workflow in the repository listening for
        ``repository_dispatch`` with a matching type.

        Args:
            owner: Account or organization owning the repository
            repo: Repository name
            event_type: Custom webhook event name
            client_payload: Extra JSON passed to the workflow (optional)

        Raises:
            NotFoundError: If the repository does not exist or the token cannot see it
            ValidationError: If GitHub rejects the payload
        """
        body: dict[str, Any] = {"event_type": event_type}
        if client_payload is not None:
            body["client_payload"] = client_payload

        self.transport.request(
            method="POST",
            path=f"/repos/{owner}/{repo}/dispatches",
            body=body,
        )
