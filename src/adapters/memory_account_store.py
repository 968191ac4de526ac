"""In-memory AccountStore: for tests and local development."""

from src.domain.accounts import Account, AccountStore


class InMemoryAccountStore(AccountStore):

    def __init__(self, accounts: list[Account] | None = None):
        super().__init__()
        self._saved: list[Account] = list(accounts or [])
        self.reload()

    def load_all(self) -> list[Account]:
        return list(self._saved)

    def save_all(self, accounts: list[Account]) -> None:
        self._saved = list(accounts)
