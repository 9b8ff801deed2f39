"""Credential data models."""

from dataclasses import dataclass


@dataclass
class CredentialRecord:
    """One ``machine`` entry of a netrc file."""

    password: str
    login: str | None = None
    account: str | None = None
    macdef: str | None = None


@dataclass
class TokenAccepted:
    """The interactive prompt produced a token the API accepted."""

    token: str
    login: str
    saved: bool
    attempts: int


@dataclass
class PromptExhausted:
    """The interactive prompt ran out of attempts."""

    attempts: int


PromptResult = TokenAccepted | PromptExhausted
