"""
ghdispatch settings.

Settings can be given explicitly or read from the environment.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from ghdispatch.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_HOST = "github.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_ATTEMPTS = 3

# netrc hosts searched for a stored token, in order
TOKEN_HOSTS = ("github.com", "api.github.com")


def default_netrc_path() -> Path:
    """Location of the user's netrc file."""
    return Path.home() / ".netrc"


@dataclass
class Settings:
    """Runtime configuration for a GitHubSession."""

    base_url: str = DEFAULT_BASE_URL
    netrc_path: Path = field(default_factory=default_netrc_path)
    timeout: float = DEFAULT_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    host: str = DEFAULT_HOST

    def __post_init__(self) -> None:
        self.netrc_path = Path(self.netrc_path).expanduser()
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        if self.max_attempts < 1:
            raise ConfigurationError(
                f"max_attempts must be at least 1, got {self.max_attempts}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Create settings from environment variables.

        Environment variables:
            GHDISPATCH_BASE_URL: API base URL (optional, default: https://api.github.com)
            GHDISPATCH_NETRC: Path to the netrc file (optional, default: ~/.netrc)
            GHDISPATCH_TIMEOUT: Request timeout in seconds (optional, default: 30)
            GHDISPATCH_MAX_ATTEMPTS: Interactive prompt attempts (optional, default: 3)

        Raises:
            ConfigurationError: If a numeric variable does not parse
        """
        base_url = os.environ.get("GHDISPATCH_BASE_URL", DEFAULT_BASE_URL)
        netrc_path = os.environ.get("GHDISPATCH_NETRC")

        timeout = _parse_env("GHDISPATCH_TIMEOUT", float, DEFAULT_TIMEOUT)
        max_attempts = _parse_env("GHDISPATCH_MAX_ATTEMPTS", int, DEFAULT_MAX_ATTEMPTS)

        return cls(
            base_url=base_url,
            netrc_path=Path(netrc_path) if netrc_path else default_netrc_path(),
            timeout=timeout,
            max_attempts=max_attempts,
        )


def _parse_env(name: str, kind: type, default: float | int) -> float | int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid {name}: {raw!r}") from e
