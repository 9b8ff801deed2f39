"""ghdispatch - fire GitHub repository_dispatch events from a local checkout."""

from ghdispatch.api import default_session, dispatch_event, get_github_api
from ghdispatch.client import GitHubClient
from ghdispatch.config import Settings
from ghdispatch.credentials import NetrcStore
from ghdispatch.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    GitHubError,
    NoRemoteError,
    NotAGitRepositoryError,
    NotFoundError,
    NotGitHubRemoteError,
    NoUpstreamError,
    RateLimitedError,
    RepositoryResolutionError,
    ServerError,
    TooManyAttemptsError,
    ValidationError,
)
from ghdispatch.git import parse_github_remote, resolve_github_project
from ghdispatch.logging import configure_logging, get_logger
from ghdispatch.session import GitHubSession
from ghdispatch.transport import HTTPTransport
from ghdispatch.types import (
    AuthenticatedUser,
    CredentialRecord,
    DispatchResult,
    RepositoryDescription,
    RepositoryRef,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Module-level API
    "get_github_api",
    "dispatch_event",
    "resolve_github_project",
    "default_session",
    # Session and client
    "GitHubSession",
    "GitHubClient",
    "Settings",
    "NetrcStore",
    # Git helpers
    "parse_github_remote",
    # Types
    "RepositoryRef",
    "RepositoryDescription",
    "DispatchResult",
    "AuthenticatedUser",
    "CredentialRecord",
    # Exceptions
    "GitHubError",
    "ConfigurationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "TooManyAttemptsError",
    "RepositoryResolutionError",
    "NotAGitRepositoryError",
    "NoUpstreamError",
    "NoRemoteError",
    "NotGitHubRemoteError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
