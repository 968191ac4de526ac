"""
AccountStore port: registered users and the admin account.

Credentials are stored as given; there is no hashing or lockout.
Usernames are the owner identifiers attached to reservations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class Account:
    username: str
    password: str
    is_admin: bool = False


@dataclass
class RegistrationResult:
    ok: bool
    error: Literal[
        "invalid_username",   # empty, or contains a comma/whitespace
        "invalid_password",   # empty, or contains a comma/newline
        "username_taken",
        None,
    ] = None
    account: Account | None = None


def _valid_username(username: str) -> bool:
    return bool(username) and "," not in username and not any(c.isspace() for c in username)


def _valid_password(password: str) -> bool:
    return bool(password) and not any(c in password for c in ",\r\n")


class AccountStore(ABC):
    """
    Port: hold accounts in memory, persist after every registration.

    Adapters implement load_all()/save_all(); lookup and registration
    rules live here so every adapter enforces them the same way.
    """

    def __init__(self):
        self._accounts: dict[str, Account] = {}

    @abstractmethod
    def load_all(self) -> list[Account]:
        ...

    @abstractmethod
    def save_all(self, accounts: list[Account]) -> None:
        """Overwrite the backing storage. Raises PersistenceError."""
        ...

    def reload(self) -> None:
        self._accounts = {a.username: a for a in self.load_all()}

    def all(self) -> list[Account]:
        return list(self._accounts.values())

    def get(self, username: str) -> Account | None:
        return self._accounts.get(username)

    def authenticate(self, username: str, password: str) -> Account | None:
        account = self._accounts.get(username)
        if account is None or account.password != password:
            return None
        return account

    def register(
        self, username: str, password: str, is_admin: bool = False
    ) -> RegistrationResult:
        if not _valid_username(username):
            return RegistrationResult(ok=False, error="invalid_username")
        if not _valid_password(password):
            return RegistrationResult(ok=False, error="invalid_password")
        if username in self._accounts:
            return RegistrationResult(ok=False, error="username_taken")

        account = Account(username=username, password=password, is_admin=is_admin)
        accounts = dict(self._accounts)
        accounts[username] = account
        self.save_all(list(accounts.values()))
        self._accounts = accounts
        return RegistrationResult(ok=True, account=account)

    def ensure_admin(self, username: str, password: str) -> Account | None:
        """Create the admin account unless the username already exists."""
        existing = self._accounts.get(username)
        if existing is not None:
            return existing
        return self.register(username, password, is_admin=True).account
