"""
Authenticated session: credential acquisition, the cached client, and
repository dispatch.
"""

import os
from collections.abc import Mapping
from typing import Any

import httpx

from ghdispatch.auth import prompt_for_token, validate_token
from ghdispatch.client import GitHubClient
from ghdispatch.config import TOKEN_HOSTS, Settings
from ghdispatch.credentials import NetrcStore, token_for
from ghdispatch.exceptions import TooManyAttemptsError, ValidationError
from ghdispatch.git import resolve_github_project
from ghdispatch.logging import get_logger, log_auth_event
from ghdispatch.prompts import Prompter, TyperPrompter
from ghdispatch.types.credentials import PromptExhausted
from ghdispatch.types.repos import DispatchResult, RepositoryDescription, RepositoryRef

logger = get_logger()

DispatchTarget = str | os.PathLike | RepositoryRef | Mapping[str, str]


class GitHubSession:
    """
    Process-lifetime context holding one authenticated GitHubClient.

    The first ``get_client()`` call runs the credential flow: stored netrc
    token, validated against the API, falling back to an interactive prompt.
    Later calls return the same client without re-validating.

    Example:
        ```python
        from ghdispatch import GitHubSession

        session = GitHubSession()
        result = session.dispatch_event("./my-project", "build_staging")
        print(result.message)
        ```
    """

    def __init__(
        self,
        settings: Settings | None = None,
        store: NetrcStore | None = None,
        prompter: Prompter | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the session. No I/O happens until a client is needed.

        Args:
            settings: Runtime configuration (default: Settings())
            store: Credential store (default: netrc at settings.netrc_path)
            prompter: Interactive channel (default: terminal via typer)
            http_transport: httpx transport override (optional, used by tests)
        """
        self.settings = settings or Settings()
        self.store = store or NetrcStore(self.settings.netrc_path)
        self.prompter = prompter or TyperPrompter()
        self.http_transport = http_transport
        self._client: GitHubClient | None = None

    def build_client(self, token: str) -> GitHubClient:
        """Construct a client for a token using this session's settings."""
        return GitHubClient(
            token=token,
            base_url=self.settings.base_url,
            timeout=self.settings.timeout,
            http_transport=self.http_transport,
        )

    def validate(self, token: str) -> bool:
        """Check a token against the API, warning the user if it is rejected."""
        return validate_token(token, self.build_client, self.prompter)

    def acquire_token(self) -> str:
        """
        Find a token the API accepts.

        Raises:
            TooManyAttemptsError: If the interactive prompt runs out of attempts
        """
        records = self.store.load()
        token = token_for(records, TOKEN_HOSTS)

        if token is None:
            logger.info("No stored token for %s", ", ".join(TOKEN_HOSTS))
        elif self.validate(token):
            log_auth_event("token_loaded", self.settings.host, token)
            return token
        else:
            logger.warning("Stored token for %s was rejected", self.settings.host)

        result = prompt_for_token(
            records,
            store=self.store,
            prompter=self.prompter,
            validate=self.validate,
            host=self.settings.host,
            max_attempts=self.settings.max_attempts,
        )
        if isinstance(result, PromptExhausted):
            raise TooManyAttemptsError(result.attempts)
        return result.token

    def get_client(self) -> GitHubClient:
        """Return the session's authenticated client, creating it on first use."""
        if self._client is None:
            self._client = self.build_client(self.acquire_token())
        return self._client

    def reset(self) -> None:
        """Close and forget the cached client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def dispatch_event(
        self,
        target: DispatchTarget,
        event_type: str,
        client_payload: dict[str, Any] | None = None,
    ) -> DispatchResult:
        """
        Dispatch a repository_dispatch event to a GitHub repository.

        See https://docs.github.com/en/actions/learn-github-actions/events-that-trigger-workflows#repository_dispatch

        Args:
            target: A path to a local checkout, or a resolved repository reference
            event_type: The event type workflows filter on
            client_payload: Extra JSON for the workflow (optional)

        Returns:
            DispatchResult with a confirmation message

        Raises:
            RepositoryResolutionError: If a path target cannot be resolved
            GitHubError: If the API call fails
        """
        repository = describe_target(target)
        client = self.get_client()
        client.repos.create_dispatch_event(
            owner=repository.owner,
            repo=repository.repo,
            event_type=event_type,
            client_payload=client_payload,
        )
        logger.info("Dispatched %s to %s", event_type, repository.repo_id)

        return DispatchResult(
            message=f"({repository.repo_id}) {event_type} event dispatched.",
            repository=repository,
            event_type=event_type,
        )

    def close(self) -> None:
        self.reset()

    def __enter__(self) -> "GitHubSession":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def describe_target(target: DispatchTarget) -> RepositoryDescription:
    """Turn a dispatch target into a RepositoryDescription."""
    if isinstance(target, (str, os.PathLike)):
        return resolve_github_project(target)
    if isinstance(target, RepositoryRef):
        return RepositoryDescription.from_ref(target)
    if isinstance(target, Mapping):
        try:
            return RepositoryDescription(
                owner=target["owner"],
                repo=target["repo"],
                repo_id=target.get("repo_id", ""),
            )
        except KeyError as e:
            raise ValidationError("INVALID_REPOSITORY", f"target is missing {e}") from e
    raise ValidationError(
        "INVALID_REPOSITORY", f"Unsupported dispatch target: {type(target).__name__}"
    )
