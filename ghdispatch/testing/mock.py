"""
Test doubles for ghdispatch.

MockGitHubClient mimics GitHubClient without network access, FakeGitHubAPI
serves the two API endpoints through ``httpx.MockTransport``, and
ScriptedPrompter answers the credential prompts from a script.
"""

import json
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, TypeVar

import httpx

from ghdispatch.types.users import AuthenticatedUser

T = TypeVar("T")


@dataclass
class MockResponse:
    """Configuration for a mock response."""

    data: Any
    error: Exception | None = None
    call_count: int = 0


@dataclass
class MockCall:
    """Record of a method call."""

    method: str
    args: tuple[Any, ...]
    kwargs: dict[str, Any]
    timestamp: datetime = field(default_factory=datetime.now)


class _MockResource:
    def __init__(self, mock_client: "MockGitHubClient") -> None:
        self._mock = mock_client
        self._responses: dict[str, MockResponse] = {}

    def _get_response(self, method: str, default: T) -> T:
        """Get configured response or default."""
        if method in self._responses:
            resp = self._responses[method]
            resp.call_count += 1
            if resp.error:
                raise resp.error
            if resp.data is not None:
                return resp.data
        return default


class MockUsersClient(_MockResource):
    """Mock users client for testing."""

    def configure_get_authenticated(
        self,
        response: AuthenticatedUser | None = None,
        error: Exception | None = None,
    ) -> None:
        """Configure the response for get_authenticated() calls."""
        self._responses["get_authenticated"] = MockResponse(data=response, error=error)

    def get_authenticated(self) -> AuthenticatedUser:
        self._mock._record_call("users.get_authenticated", (), {})
        return self._get_response("get_authenticated", AuthenticatedUser(
            login=self._mock.login,
            user_id=1,
            name=None,
            html_url=f"https://github.com/{self._mock.login}",
        ))


class MockReposClient(_MockResource):
    """Mock repos client for testing."""

    def configure_create_dispatch_event(self, error: Exception | None = None) -> None:
        """Configure create_dispatch_event() to raise an error."""
        self._responses["create_dispatch_event"] = MockResponse(data=None, error=error)

    def create_dispatch_event(
        self,
        owner: str,
        repo: str,
        event_type: str,
        client_payload: dict[str, Any] | None = None,
    ) -> None:
        self._mock._record_call(
            "repos.create_dispatch_event",
            (owner, repo, event_type),
            {"client_payload": client_payload},
        )
        self._get_response("create_dispatch_event", None)


class MockGitHubClient:
    """
    Mock GitHub client for testing.

    Provides the same interface as GitHubClient but returns configurable
    mock responses instead of making real API calls.

    Example:
        ```python
        from ghdispatch.testing import MockGitHubClient

        mock = MockGitHubClient(login="octo")
        mock.repos.create_dispatch_event("octo", "hello", "build")
        assert mock.call_count("repos.create_dispatch_event") == 1
        ```
    """

    def __init__(self, login: str = "mock-user") -> None:
        self.login = login
        self._calls: list[MockCall] = []
        self.closed = False

        self.users = MockUsersClient(self)
        self.repos = MockReposClient(self)

    def _record_call(
        self,
        method: str,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        self._calls.append(MockCall(method=method, args=args, kwargs=kwargs))

    def was_called(self, method: str) -> bool:
        """Check if a method (e.g. "repos.create_dispatch_event") was called."""
        return any(call.method == method for call in self._calls)

    def call_count(self, method: str) -> int:
        """Get the number of times a method was called."""
        return sum(1 for call in self._calls if call.method == method)

    def get_calls(self, method: str | None = None) -> list[MockCall]:
        """Get recorded calls, optionally filtered by method."""
        if method is None:
            return list(self._calls)
        return [call for call in self._calls if call.method == method]

    def reset(self) -> None:
        """Reset all recorded calls and configured responses."""
        self._calls.clear()
        self.users._responses.clear()
        self.repos._responses.clear()

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "MockGitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


_DISPATCH_PATH = re.compile(r"^/repos/([^/]+)/([^/]+)/dispatches$")


class FakeGitHubAPI:
    """
    In-memory stand-in for the GitHub REST API.

    Serves ``GET /user`` and ``POST /repos/{owner}/{repo}/dispatches``.
    Tokens not in ``valid_tokens`` get a 401. Every request is recorded.

    Example:
        ```python
        api = FakeGitHubAPI(valid_tokens={"ghp_good": "octo"})
        session = GitHubSession(http_transport=api.transport, ...)
        ```
    """

    def __init__(
        self,
        valid_tokens: dict[str, str] | None = None,
        missing_repos: Iterable[str] = (),
    ) -> None:
        self.valid_tokens = dict(valid_tokens or {})
        self.missing_repos = set(missing_repos)
        self.requests: list[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        auth = request.headers.get("Authorization", "")
        token = auth.removeprefix("token ")
        if token not in self.valid_tokens:
            return httpx.Response(
                401,
                json={"message": "Bad credentials"},
                headers={"X-GitHub-Request-Id": "FAKE:0001"},
            )

        path = request.url.path
        if request.method == "GET" and path == "/user":
            login = self.valid_tokens[token]
            return httpx.Response(200, json={
                "login": login,
                "id": 1000 + len(login),
                "name": login.title(),
                "html_url": f"https://github.com/{login}",
            })

        match = _DISPATCH_PATH.match(path)
        if request.method == "POST" and match:
            if f"{match.group(1)}/{match.group(2)}" in self.missing_repos:
                return httpx.Response(404, json={"message": "Not Found"})
            body = json.loads(request.content)
            if not body.get("event_type"):
                return httpx.Response(422, json={"message": "Invalid request."})
            return httpx.Response(204)

        return httpx.Response(404, json={"message": "Not Found"})

    def calls(self, method: str, path: str | None = None) -> list[httpx.Request]:
        """Recorded requests matching a method and, optionally, a path."""
        return [
            r for r in self.requests
            if r.method == method and (path is None or r.url.path == path)
        ]

    def dispatches(self) -> list[dict[str, Any]]:
        """Bodies of every dispatch request received."""
        return [
            json.loads(r.content)
            for r in self.requests
            if r.method == "POST" and _DISPATCH_PATH.match(r.url.path)
        ]


class ScriptedPrompter:
    """
    Prompter that replays scripted answers and records what it was asked.

    ``credentials`` is a list of (username, token) pairs, one per attempt.
    """

    def __init__(
        self,
        credentials: Iterable[tuple[str, str]] = (),
        confirm_answers: Iterable[bool] = (),
    ) -> None:
        self._answers: list[str] = [v for pair in credentials for v in pair]
        self._confirms = list(confirm_answers)
        self.asked: list[str] = []
        self.confirmed: list[str] = []
        self.warnings: list[str] = []
        self.fatals: list[str] = []

    def ask(self, message: str, hide_input: bool = False) -> str:
        self.asked.append(message)
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        return self._answers.pop(0)

    def confirm(self, message: str, default: bool = False) -> bool:
        self.confirmed.append(message)
        if not self._confirms:
            return default
        return self._confirms.pop(0)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def fatal(self, message: str) -> None:
        self.fatals.append(message)


__all__ = [
    "FakeGitHubAPI",
    "MockCall",
    "MockGitHubClient",
    "MockResponse",
    "ScriptedPrompter",
]
