"""
ReservationStore port: the single owner of the reservation collection.

The store keeps the full collection in memory, in creation order, and
rewrites the backing storage after every mutation.  Adapters only decide
how the collection is read (load_all) and written (save_all).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from src.domain.rooms import RoomCategory


@dataclass(frozen=True)
class Reservation:
    owner: str                # account username
    category: RoomCategory
    nights: int               # >= 1
    total_price: Decimal      # always derived from category, nights, month
    month: str                # canonical month name, e.g. "March"


class ReservationStore(ABC):
    """
    Port: load, hold and persist reservations.

    Mutations build the next version of the collection, hand it to
    save_all(), and only adopt it once the write succeeded.  If save_all()
    raises PersistenceError the in-memory collection is left untouched.

    Indices returned by find_by_owner() are positions in the full
    collection and are only valid until the next mutation.
    """

    def __init__(self):
        self._records: list[Reservation] = []

    @abstractmethod
    def load_all(self) -> list[Reservation]:
        """Read every well-formed record from the backing storage."""
        ...

    @abstractmethod
    def save_all(self, records: list[Reservation]) -> None:
        """Overwrite the backing storage with records. Raises PersistenceError."""
        ...

    def reload(self) -> None:
        self._records = list(self.load_all())

    def all(self) -> list[Reservation]:
        return list(self._records)

    def find_by_owner(self, owner: str) -> list[tuple[int, Reservation]]:
        return [(i, r) for i, r in enumerate(self._records) if r.owner == owner]

    def append(self, record: Reservation) -> None:
        self._commit(self._records + [record])

    def replace(self, index: int, record: Reservation) -> None:
        records = list(self._records)
        records[index] = record
        self._commit(records)

    def remove_at(self, index: int) -> None:
        records = list(self._records)
        del records[index]
        self._commit(records)

    def _commit(self, records: list[Reservation]) -> None:
        self.save_all(records)
        self._records = records
