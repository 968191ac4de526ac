"""
Flat-file adapter for AccountStore.

Layout, one account per line:

    username,password,is_admin    (is_admin is "1" or "0")
"""

import logging
from pathlib import Path

from src.adapters.flat_file import read_rows, write_rows
from src.domain.accounts import Account, AccountStore

log = logging.getLogger(__name__)


class FileAccountStore(AccountStore):

    def __init__(self, path: str | Path = "users.txt"):
        super().__init__()
        self._path = Path(path)
        self.reload()

    def load_all(self) -> list[Account]:
        accounts = []
        for line_number, fields in read_rows(self._path):
            if len(fields) != 3 or fields[2] not in ("0", "1") or not fields[0]:
                log.warning("%s:%d skipped: malformed account record", self._path, line_number)
                continue
            username, password, admin_flag = fields
            accounts.append(Account(username, password, admin_flag == "1"))
        log.info("Loaded %d account(s) from %s", len(accounts), self._path)
        return accounts

    def save_all(self, accounts: list[Account]) -> None:
        write_rows(
            self._path,
            [[a.username, a.password, "1" if a.is_admin else "0"] for a in accounts],
        )
