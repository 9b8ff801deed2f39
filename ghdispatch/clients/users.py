"""Users resource client."""

from typing import TYPE_CHECKING, Any

from ghdispatch.exceptions import ServerError
from ghdispatch.types.users import AuthenticatedUser

if TYPE_CHECKING:
    from ghdispatch.transport import HTTPTransport


def _parse_user(data: dict[str, Any]) -> AuthenticatedUser:
    try:
        return AuthenticatedUser(
            login=data["login"],
            user_id=data["id"],
            name=data.get("name"),
            html_url=data.get("html_url"),
        )
    except KeyError as e:
        raise ServerError("INVALID_RESPONSE", f"User response missing {e}") from e


class UsersClient:
    """Client for user-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def get_authenticated(self) -> AuthenticatedUser:
        """
        Get the account the client's token belongs to.

        Returns:
            AuthenticatedUser for the token

        Raises:
            AuthenticationError: If the token is rejected
        """
        response = self.transport.request(method="GET", path="/user")
        return _parse_user(response)
