"""
Tests for the ghdispatch.testing helpers.
"""

import pytest

from ghdispatch.exceptions import NotFoundError
from ghdispatch.testing import MockGitHubClient, ScriptedPrompter
from ghdispatch.types.users import AuthenticatedUser


def test_mock_client_records_dispatches(mock_client: MockGitHubClient) -> None:
    mock_client.repos.create_dispatch_event("octo", "hello", "build", client_payload={"x": 1})

    assert mock_client.was_called("repos.create_dispatch_event")
    assert mock_client.call_count("repos.create_dispatch_event") == 1
    call = mock_client.get_calls("repos.create_dispatch_event")[0]
    assert call.args == ("octo", "hello", "build")
    assert call.kwargs == {"client_payload": {"x": 1}}


def test_mock_client_default_user(mock_client: MockGitHubClient) -> None:
    assert mock_client.users.get_authenticated().login == "test-user"


def test_mock_client_configured_user() -> None:
    mock = MockGitHubClient()
    user = AuthenticatedUser(login="custom", user_id=7, name="Custom", html_url=None)
    mock.users.configure_get_authenticated(response=user)

    assert mock.users.get_authenticated() is user
    assert mock.users._responses["get_authenticated"].call_count == 1


def test_mock_client_configured_error() -> None:
    mock = MockGitHubClient()
    mock.repos.configure_create_dispatch_event(error=NotFoundError("HTTP_404", "Not Found"))

    with pytest.raises(NotFoundError):
        mock.repos.create_dispatch_event("a", "b", "go")

    assert mock.call_count("repos.create_dispatch_event") == 1


def test_mock_client_reset_and_close() -> None:
    with MockGitHubClient() as mock:
        mock.users.get_authenticated()
        mock.reset()
        assert mock.get_calls() == []

    assert mock.closed is True


def test_scripted_prompter_replays_answers() -> None:
    prompter = ScriptedPrompter([("octo", "ghp_x")], confirm_answers=[True])

    assert prompter.ask("user?") == "octo"
    assert prompter.ask("token?", hide_input=True) == "ghp_x"
    assert prompter.confirm("save?") is True
    # falls back to the default once the script runs out
    assert prompter.confirm("again?", default=False) is False


def test_scripted_prompter_fails_on_unexpected_prompt() -> None:
    with pytest.raises(AssertionError):
        ScriptedPrompter().ask("who?")
