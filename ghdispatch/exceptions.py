"""ghdispatch exception classes."""

from pathlib import Path


class GitHubError(Exception):
    """Base exception for all ghdispatch errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GitHubError):
    """Raised when settings are invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class AuthenticationError(GitHubError):
    """Raised when the token is rejected (401)."""

    pass


class AuthorizationError(GitHubError):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(GitHubError):
    """Raised when a resource is not found, or hidden from the token."""

    pass


class RateLimitedError(GitHubError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ValidationError(GitHubError):
    """Raised on validation errors, local or remote (400, 422)."""

    pass


class ServerError(GitHubError):
    """Raised on server errors (5xx) and connection failures."""

    pass


class TooManyAttemptsError(GitHubError):
    """Raised when the interactive token prompt runs out of attempts."""

    def __init__(self, attempts: int) -> None:
        super().__init__("TOO_MANY_ATTEMPTS", "Too many attempts")
        self.attempts = attempts


class RepositoryResolutionError(GitHubError):
    """Raised when a directory cannot be mapped to a GitHub owner/repo."""

    code = "REPOSITORY_RESOLUTION_ERROR"
    description = "Could not resolve a GitHub repository"

    def __init__(
        self,
        directory: str | Path,
        detail: str | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.detail = detail
        message = f"{self.description} in {self.directory}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(type(self).code, message)


class NotAGitRepositoryError(RepositoryResolutionError):
    """The directory is not inside a git work tree."""

    code = "NOT_A_GIT_REPOSITORY"
    description = "Not a git repository"


class NoUpstreamError(RepositoryResolutionError):
    """The current branch has no upstream configured."""

    code = "NO_UPSTREAM"
    description = "No upstream configured for the current branch"


class NoRemoteError(RepositoryResolutionError):
    """The remote named by the upstream ref does not exist."""

    code = "NO_REMOTE"
    description = "Upstream remote not found"


class NotGitHubRemoteError(RepositoryResolutionError):
    """The remote URL does not point at github.com."""

    code = "NOT_GITHUB_REMOTE"
    description = "Remote is not a GitHub repository"
