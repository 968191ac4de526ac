"""
Terminal entry point for the hotel reservation system.

Usage:
    python scripts/run.py

Environment variables (all optional):
    ACCOUNTS_PATH       - accounts file (default: users.txt)
    RESERVATIONS_PATH   - reservations file (default: reservations.txt)
    STORE_BACKEND       - "file" or "memory" (default: file)
    ADMIN_USERNAME      - admin account created on first start
    ADMIN_PASSWORD      - password for ADMIN_USERNAME
    LOG_LEVEL           - logging level (default: INFO)
"""

import logging
import os
import sys

# Make sure project root is on sys.path when run as a script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config import Settings
from src.domain.errors import PersistenceError
from src.factory import create_account_store, create_reservation_store
from src.lifecycle import ReservationManager
from src.session import Session

log = logging.getLogger(__name__)


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s  %(levelname)-7s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        accounts = create_account_store(settings)
        reservations = create_reservation_store(settings)
    except (ValueError, PersistenceError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    if not any(a.is_admin for a in accounts.all()):
        log.warning("No admin account configured; set ADMIN_USERNAME and ADMIN_PASSWORD")

    log.info(
        "Started: backend=%s accounts=%s reservations=%s",
        settings.backend, settings.accounts_path, settings.reservations_path,
    )
    Session(accounts, ReservationManager(reservations)).run()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        log.info("Stopped.")
