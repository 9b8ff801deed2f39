"""ghdispatch resource clients."""

from ghdispatch.clients.repos import ReposClient
from ghdispatch.clients.users import UsersClient

__all__ = [
    "ReposClient",
    "UsersClient",
]
