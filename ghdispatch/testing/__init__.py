"""ghdispatch testing utilities.

Provides mock clients, a fake API transport and a scripted prompter for
testing code that uses ghdispatch.
"""

from ghdispatch.testing.mock import (
    FakeGitHubAPI,
    MockCall,
    MockGitHubClient,
    MockResponse,
    ScriptedPrompter,
)

__all__ = [
    "FakeGitHubAPI",
    "MockCall",
    "MockGitHubClient",
    "MockResponse",
    "ScriptedPrompter",
]
