"""
Adapter contract for ReservationStore.

Any implementation (in-memory, flat file, ...) must pass these tests.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from src.domain.reservation import Reservation, ReservationStore
from src.domain.rooms import RoomCategory


def _res(owner: str, nights: int = 1, month: str = "January",
         category: RoomCategory = RoomCategory.STANDARD) -> Reservation:
    return Reservation(
        owner=owner,
        category=category,
        nights=nights,
        total_price=category.base_rate * nights,
        month=month,
    )


class ReservationStoreContract(ABC):

    @abstractmethod
    def create_store(self) -> ReservationStore:
        """Return a fresh, empty store."""
        ...

    def test_new_store_is_empty(self):
        store = self.create_store()
        assert store.all() == []
        assert store.find_by_owner("alice") == []

    def test_append_then_all(self):
        store = self.create_store()
        store.append(_res("alice", 3))
        records = store.all()
        assert len(records) == 1
        assert records[0].owner == "alice"
        assert records[0].nights == 3

    def test_append_is_persisted(self):
        store = self.create_store()
        store.append(_res("alice", 3, "March", RoomCategory.SUITE))
        assert store.load_all() == store.all()

    def test_find_by_owner_keeps_order_and_store_indices(self):
        store = self.create_store()
        store.append(_res("alice", 1))
        store.append(_res("bob", 2))
        store.append(_res("alice", 3))

        found = store.find_by_owner("alice")
        assert [i for i, _ in found] == [0, 2]
        assert [r.nights for _, r in found] == [1, 3]

    def test_replace_changes_only_target(self):
        store = self.create_store()
        store.append(_res("alice", 1))
        store.append(_res("bob", 2))

        store.replace(1, _res("bob", 5, "June"))

        assert store.all()[0].nights == 1
        assert store.all()[1].nights == 5
        assert store.load_all()[1].month == "June"

    def test_remove_at_removes_exactly_one(self):
        store = self.create_store()
        store.append(_res("alice", 1))
        store.append(_res("alice", 2))

        store.remove_at(0)

        assert [r.nights for r in store.all()] == [2]
        assert [r.nights for r in store.load_all()] == [2]

    def test_all_returns_a_copy(self):
        store = self.create_store()
        store.append(_res("alice"))
        store.all().clear()
        assert len(store.all()) == 1

    def test_price_survives_persistence(self):
        store = self.create_store()
        store.append(
            Reservation("carol", RoomCategory.DELUXE, 2, Decimal("4800.00"), "December")
        )
        store.reload()
        assert store.all()[0].total_price == Decimal("4800.00")
