from src.config import Settings
from src.domain.accounts import AccountStore
from src.domain.reservation import ReservationStore


def create_reservation_store(settings: Settings) -> ReservationStore:
    """Factory: pick the reservation adapter named by settings.backend."""
    if settings.backend == "file":
        from src.adapters.file_reservation_store import FileReservationStore

        return FileReservationStore(settings.reservations_path)

    if settings.backend == "memory":
        from src.adapters.memory_reservation_store import InMemoryReservationStore

        return InMemoryReservationStore()

    raise ValueError(f"Unknown store backend: {settings.backend!r}")


def create_account_store(settings: Settings) -> AccountStore:
    """Factory: pick the account adapter, bootstrapping the admin if configured."""
    if settings.backend == "file":
        from src.adapters.file_account_store import FileAccountStore

        store: AccountStore = FileAccountStore(settings.accounts_path)
    elif settings.backend == "memory":
        from src.adapters.memory_account_store import InMemoryAccountStore

        store = InMemoryAccountStore()
    else:
        raise ValueError(f"Unknown store backend: {settings.backend!r}")

    if settings.admin_username and settings.admin_password:
        store.ensure_admin(settings.admin_username, settings.admin_password)
    return store
