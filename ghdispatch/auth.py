"""
Token validation and the interactive token prompt.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from ghdispatch.config import DEFAULT_HOST, DEFAULT_MAX_ATTEMPTS
from ghdispatch.exceptions import GitHubError
from ghdispatch.logging import get_logger, log_auth_event
from ghdispatch.types.credentials import (
    CredentialRecord,
    PromptExhausted,
    PromptResult,
    TokenAccepted,
)

if TYPE_CHECKING:
    from ghdispatch.client import GitHubClient
    from ghdispatch.credentials import NetrcStore
    from ghdispatch.prompts import Prompter

logger = get_logger("auth")

ClientFactory = Callable[[str], "GitHubClient"]

USERNAME_PROMPT = "Please enter your github username"
TOKEN_PROMPT = "Please enter your github personal access token"
SAVE_PROMPT = "Save token to config?"


def validate_token(
    token: str,
    client_factory: ClientFactory,
    prompter: "Prompter | None" = None,
) -> bool:
    """
    Check that the API accepts a token.

    Calls ``GET /user`` with a throwaway client. Never raises: any failure is
    logged, shown to the user through the prompter, and reported as False.
    """
    try:
        with client_factory(token) as client:
            user = client.users.get_authenticated()
    except Exception as e:
        message = e.message if isinstance(e, GitHubError) else str(e)
        logger.warning("Token rejected: %s", message)
        if prompter is not None:
            prompter.warn(message)
        return False

    logger.info("Authenticated as %s", user.login)
    return True


def prompt_for_token(
    records: dict[str, CredentialRecord],
    *,
    store: "NetrcStore",
    prompter: "Prompter",
    validate: Callable[[str], bool],
    host: str = DEFAULT_HOST,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> PromptResult:
    """
    Ask the user for a username and token until the API accepts one.

    An accepted token is saved under ``host`` only if the user agrees.

    Args:
        records: Credentials currently stored, merged into on save
        store: Where accepted credentials are persisted
        prompter: Interactive channel
        validate: Token check, normally a bound ``validate_token``
        host: netrc machine name to save under
        max_attempts: Number of tries before giving up

    Returns:
        TokenAccepted, or PromptExhausted after max_attempts failures
    """
    for attempt in range(1, max_attempts + 1):
        login = prompter.ask(USERNAME_PROMPT)
        token = prompter.ask(TOKEN_PROMPT, hide_input=True)

        if not validate(token):
            logger.warning("Attempt %d of %d failed", attempt, max_attempts)
            continue

        saved = prompter.confirm(SAVE_PROMPT, default=False)
        if saved:
            updated = dict(records)
            updated[host] = CredentialRecord(login=login, password=token)
            store.save(updated)
            log_auth_event("token_saved", host, token)

        return TokenAccepted(token=token, login=login, saved=saved, attempts=attempt)

    return PromptExhausted(attempts=max_attempts)
