"""
Flat-file adapter for ReservationStore.

Layout, one reservation per line:

    username,category,nights,total_price,month

total_price always carries two decimals.  Malformed lines are skipped
with a warning instead of aborting the load.
"""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

from src.adapters.flat_file import read_rows, write_rows
from src.domain.reservation import Reservation, ReservationStore
from src.domain.rooms import RoomCategory
from src.domain.season import is_valid_month, normalize_month

log = logging.getLogger(__name__)

_FIELD_COUNT = 5


class MalformedRecord(ValueError):
    pass


def parse_reservation(fields: list[str]) -> Reservation:
    if len(fields) != _FIELD_COUNT:
        raise MalformedRecord(f"expected {_FIELD_COUNT} fields, got {len(fields)}")
    owner, category, nights, price, month = fields
    try:
        room = RoomCategory(category)
    except ValueError:
        raise MalformedRecord(f"unknown room category {category!r}") from None
    try:
        night_count = int(nights)
    except ValueError:
        raise MalformedRecord(f"non-numeric nights {nights!r}") from None
    if night_count < 1:
        raise MalformedRecord(f"nights must be positive, got {night_count}")
    try:
        total = Decimal(price)
    except InvalidOperation:
        raise MalformedRecord(f"non-numeric price {price!r}") from None
    if not total.is_finite() or total < 0:
        raise MalformedRecord(f"price must be a non-negative amount, got {price!r}")
    if not is_valid_month(month):
        raise MalformedRecord(f"unknown month {month!r}")
    return Reservation(
        owner=owner,
        category=room,
        nights=night_count,
        total_price=total,
        month=normalize_month(month),
    )


def format_reservation(record: Reservation) -> list[str]:
    return [
        record.owner,
        record.category.value,
        str(record.nights),
        f"{record.total_price:.2f}",
        record.month,
    ]


class FileReservationStore(ReservationStore):

    def __init__(self, path: str | Path = "reservations.txt"):
        super().__init__()
        self._path = Path(path)
        self.reload()

    def load_all(self) -> list[Reservation]:
        records = []
        for line_number, fields in read_rows(self._path):
            try:
                records.append(parse_reservation(fields))
            except MalformedRecord as exc:
                log.warning("%s:%d skipped: %s", self._path, line_number, exc)
        log.info("Loaded %d reservation(s) from %s", len(records), self._path)
        return records

    def save_all(self, records: list[Reservation]) -> None:
        write_rows(self._path, [format_reservation(r) for r in records])
