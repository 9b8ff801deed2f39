"""
Pytest plugin exposing the ghdispatch testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["ghdispatch.testing.conftest"]
"""

from ghdispatch.testing.fixtures import (
    fake_api,
    make_session,
    mock_client,
    netrc_path,
    netrc_store,
    prompter,
    sample_repository,
    stored_invalid_token,
    stored_valid_token,
)

__all__ = [
    "fake_api",
    "make_session",
    "mock_client",
    "netrc_path",
    "netrc_store",
    "prompter",
    "sample_repository",
    "stored_invalid_token",
    "stored_valid_token",
]
