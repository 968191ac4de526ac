import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Where data lives and which store adapters to use."""

    accounts_path: str = "users.txt"
    reservations_path: str = "reservations.txt"
    backend: str = "file"            # "file" or "memory"
    admin_username: str | None = None
    admin_password: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read settings from the environment:

            ACCOUNTS_PATH, RESERVATIONS_PATH, STORE_BACKEND,
            ADMIN_USERNAME, ADMIN_PASSWORD, LOG_LEVEL
        """
        return cls(
            accounts_path=os.environ.get("ACCOUNTS_PATH", "users.txt"),
            reservations_path=os.environ.get("RESERVATIONS_PATH", "reservations.txt"),
            backend=os.environ.get("STORE_BACKEND", "file"),
            admin_username=os.environ.get("ADMIN_USERNAME") or None,
            admin_password=os.environ.get("ADMIN_PASSWORD") or None,
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
