"""User-related data models."""

from dataclasses import dataclass


@dataclass
class AuthenticatedUser:
    """The account a token belongs to, as returned by ``GET /user``."""

    login: str
    user_id: int
    name: str | None
    html_url: str | None
