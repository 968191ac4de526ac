"""
In-memory ReservationStore for testing, no files required.
"""

from src.domain.errors import PersistenceError
from src.domain.reservation import Reservation, ReservationStore


class InMemoryReservationStore(ReservationStore):
    """
    Test helpers:
        fail_writes  when True, save_all() raises PersistenceError
        saves        number of successful save_all() calls
    """

    def __init__(self, records: list[Reservation] | None = None):
        super().__init__()
        self._saved: list[Reservation] = list(records or [])
        self.fail_writes = False
        self.saves = 0
        self.reload()

    def load_all(self) -> list[Reservation]:
        return list(self._saved)

    def save_all(self, records: list[Reservation]) -> None:
        if self.fail_writes:
            raise PersistenceError("simulated write failure")
        self._saved = list(records)
        self.saves += 1
