"""
Pytest fixtures for testing code that uses ghdispatch.
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from ghdispatch.config import Settings
from ghdispatch.credentials import NetrcStore
from ghdispatch.session import GitHubSession
from ghdispatch.testing.mock import FakeGitHubAPI, MockGitHubClient, ScriptedPrompter
from ghdispatch.types.credentials import CredentialRecord
from ghdispatch.types.repos import RepositoryDescription

VALID_TOKEN = "ghp_" + "a" * 36
INVALID_TOKEN = "ghp_" + "b" * 36


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            my_function(mock_client)
            assert mock_client.was_called("repos.create_dispatch_event")
        ```
    """
    client = MockGitHubClient(login="test-user")
    yield client
    client.reset()


@pytest.fixture
def fake_api() -> FakeGitHubAPI:
    """A fake GitHub API accepting VALID_TOKEN as user ``octo``."""
    return FakeGitHubAPI(valid_tokens={VALID_TOKEN: "octo"})


@pytest.fixture
def netrc_path(tmp_path: Path) -> Path:
    """Location of a netrc file in a temporary directory (not created)."""
    return tmp_path / ".netrc"


@pytest.fixture
def netrc_store(netrc_path: Path) -> NetrcStore:
    return NetrcStore(netrc_path)


@pytest.fixture
def stored_valid_token(netrc_store: NetrcStore) -> NetrcStore:
    """A netrc store already holding VALID_TOKEN for github.com."""
    netrc_store.save({"github.com": CredentialRecord(login="octo", password=VALID_TOKEN)})
    return netrc_store


@pytest.fixture
def stored_invalid_token(netrc_store: NetrcStore) -> NetrcStore:
    """A netrc store holding a token the fake API rejects."""
    netrc_store.save({"github.com": CredentialRecord(login="octo", password=INVALID_TOKEN)})
    return netrc_store


@pytest.fixture
def prompter() -> ScriptedPrompter:
    """A prompter with no scripted answers; tests replace or extend it."""
    return ScriptedPrompter()


@pytest.fixture
def make_session(
    fake_api: FakeGitHubAPI, netrc_store: NetrcStore, netrc_path: Path
):
    """
    Factory building a GitHubSession wired to the fake API and temp netrc.

    Example:
        ```python
        def test_flow(make_session):
            session = make_session(ScriptedPrompter([("octo", VALID_TOKEN)]))
        ```
    """
    def _make(prompter: ScriptedPrompter | None = None, **settings) -> GitHubSession:
        return GitHubSession(
            settings=Settings(netrc_path=netrc_path, **settings),
            store=netrc_store,
            prompter=prompter or ScriptedPrompter(),
            http_transport=fake_api.transport,
        )

    return _make


@pytest.fixture
def sample_repository() -> RepositoryDescription:
    return RepositoryDescription(owner="octo", repo="hello-world")
