"""ghdispatch type definitions.

This module exports all data model types used by the package.
"""

from ghdispatch.types.credentials import (
    CredentialRecord,
    PromptExhausted,
    PromptResult,
    TokenAccepted,
)
from ghdispatch.types.repos import DispatchResult, RepositoryDescription, RepositoryRef
from ghdispatch.types.users import AuthenticatedUser

__all__ = [
    # Repository types
    "RepositoryRef",
    "RepositoryDescription",
    "DispatchResult",
    # User types
    "AuthenticatedUser",
    # Credential types
    "CredentialRecord",
    "TokenAccepted",
    "PromptExhausted",
    "PromptResult",
]
