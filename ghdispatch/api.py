"""
Module-level convenience functions.

These share one default GitHubSession, so a process authenticates at most
once. Pass ``session=`` to use an explicit session instead.
"""

from typing import Any

from ghdispatch.client import GitHubClient
from ghdispatch.config import Settings
from ghdispatch.exceptions import TooManyAttemptsError
from ghdispatch.git import resolve_github_project
from ghdispatch.session import DispatchTarget, GitHubSession, describe_target
from ghdispatch.types.repos import DispatchResult

_default_session: GitHubSession | None = None


def default_session() -> GitHubSession:
    """The shared session, configured from the environment on first use."""
    global _default_session
    if _default_session is None:
        _default_session = GitHubSession(settings=Settings.from_env())
    return _default_session


def get_github_api(session: GitHubSession | None = None) -> GitHubClient:
    """
    Return an authenticated GitHub client.

    The token comes from ~/.netrc; if it is missing or rejected the user is
    prompted for one. Running out of prompt attempts ends the process with
    exit status 1.
    """
    session = session or default_session()
    try:
        return session.get_client()
    except TooManyAttemptsError as e:
        session.prompter.fatal(e.message)
        raise SystemExit(1) from e


def dispatch_event(
    target: DispatchTarget,
    event_type: str,
    *,
    client_payload: dict[str, Any] | None = None,
    session: GitHubSession | None = None,
) -> DispatchResult:
    """
    Dispatch an event to a repository on GitHub.

    Example:
        ```python
        from ghdispatch import dispatch_event

        dispatch_event("./my-project", "build_staging")
        ```
    """
    session = session or default_session()
    repository = describe_target(target)
    get_github_api(session)
    return session.dispatch_event(repository, event_type, client_payload=client_payload)


__all__ = [
    "default_session",
    "dispatch_event",
    "get_github_api",
    "resolve_github_project",
]
