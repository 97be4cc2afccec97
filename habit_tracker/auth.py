from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

USERNAME_REQUIRED_MESSAGE = "Please enter a valid username"
PASSWORD_REQUIRED_MESSAGE = "Please enter a valid password"
REJECTED_MESSAGE = "Incorrect username or password"


class Authenticator(Protocol):
    """Decide whether a username/password pair grants access."""

    def verify(self, username: str, password: str) -> bool:
        """Return True when the credentials are accepted."""


class FixedCredentialAuthenticator:
    """Compare credentials against one literal pair.

    This is a gate in front of the habit list, not a security boundary.
    """

    def __init__(self, username: str = "test", password: str = "test123") -> None:
        self._username = username
        self._password = password

    def verify(self, username: str, password: str) -> bool:
        return username == self._username and password == self._password


class GateStatus(str, Enum):
    INCOMPLETE = "incomplete"
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"


@dataclass(frozen=True)
class GateResult:
    status: GateStatus
    username_error: Optional[str] = None
    password_error: Optional[str] = None
    message: Optional[str] = None

    @property
    def authenticated(self) -> bool:
        return self.status is GateStatus.AUTHENTICATED


def attempt_login(username: str, password: str, authenticator: Optional[Authenticator] = None) -> GateResult:
    """Validate both fields and, when both are filled in, check the credentials.

    Empty fields are reported together and skip the comparison. A mismatch yields
    one generic message that does not reveal which field was wrong.
    """

    username_error = USERNAME_REQUIRED_MESSAGE if not username else None
    password_error = PASSWORD_REQUIRED_MESSAGE if not password else None
    if username_error or password_error:
        return GateResult(
            status=GateStatus.INCOMPLETE,
            username_error=username_error,
            password_error=password_error,
        )

    gate = authenticator or FixedCredentialAuthenticator()
    if gate.verify(username, password):
        return GateResult(status=GateStatus.AUTHENTICATED)

    return GateResult(status=GateStatus.REJECTED, message=REJECTED_MESSAGE)


__all__ = [
    "Authenticator",
    "FixedCredentialAuthenticator",
    "GateResult",
    "GateStatus",
    "attempt_login",
    "USERNAME_REQUIRED_MESSAGE",
    "PASSWORD_REQUIRED_MESSAGE",
    "REJECTED_MESSAGE",
]
