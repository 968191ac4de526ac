"""
Reservation lifecycle: book, list, update and cancel a user's bookings,
plus the admin's read-only view of everything.

The manager never performs I/O and never raises for bad input.  Every
operation returns a BookingResult whose `error` tag tells the caller
(the terminal session) what went wrong, so it can decide whether to
re-prompt.

Flow for a mutating operation:
  1. Resolve and validate the input (category, nights, month, selection)
  2. Compute the price from category, nights and season
  3. Hand the new record to the ReservationStore, which persists it
"""

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Literal

from src.domain.errors import PersistenceError
from src.domain.reservation import Reservation, ReservationStore
from src.domain.rooms import calculate_price, resolve_category
from src.domain.season import is_peak_season, is_valid_month, normalize_month

log = logging.getLogger(__name__)

KEEP_NIGHTS = 0  # update sentinel: keep the current night count

ErrorKind = Literal[
    "invalid_category",           # not Standard / Deluxe / Suite
    "invalid_nights",             # <= 0 or not a number
    "invalid_month",              # not one of the twelve month names
    "no_reservations",            # owner has nothing to update/cancel
    "invalid_selection",          # display index outside 1..count
    "persistence_write_failure",  # store could not be written, nothing changed
]


@dataclass
class BookingResult:
    ok: bool
    error: ErrorKind | None = None
    reservation: Reservation | None = None
    details: str = ""


@dataclass
class AdminSummary:
    count: int
    total_revenue: Decimal


def summarize(reservations: list[Reservation]) -> AdminSummary:
    return AdminSummary(
        count=len(reservations),
        total_revenue=sum((r.total_price for r in reservations), Decimal("0.00")),
    )


def _to_int(value: int | str) -> int | None:
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _parse_nights(value: int | str) -> int | None:
    """Positive night count, or None if value is not a positive integer."""
    nights = _to_int(value)
    return nights if nights is not None and nights >= 1 else None


def _failure(error: ErrorKind, details: str = "") -> BookingResult:
    return BookingResult(ok=False, error=error, details=details)


class ReservationManager:
    """Stateless between calls: every operation re-reads the store."""

    def __init__(self, store: ReservationStore):
        self.store = store

    def book(
        self, owner: str, category_choice: str | int, nights: int | str, month: str
    ) -> BookingResult:
        category = resolve_category(category_choice)
        if category is None:
            return self._reject(owner, "invalid_category", f"{category_choice!r}")

        night_count = _parse_nights(nights)
        if night_count is None:
            return self._reject(owner, "invalid_nights", f"{nights!r}")

        if not is_valid_month(month):
            return self._reject(owner, "invalid_month", f"{month!r}")
        month = normalize_month(month)

        record = Reservation(
            owner=owner,
            category=category,
            nights=night_count,
            total_price=calculate_price(category, night_count, is_peak_season(month)),
            month=month,
        )
        try:
            self.store.append(record)
        except PersistenceError as exc:
            return self._reject(owner, "persistence_write_failure", str(exc))

        log.info(
            "owner=%s booked %s x%d in %s → %.2f",
            owner, category.value, night_count, month, record.total_price,
        )
        return BookingResult(ok=True, reservation=record)

    def list_mine(self, owner: str) -> list[Reservation]:
        """The owner's reservations in creation order; display index = position + 1."""
        return [r for _, r in self.store.find_by_owner(owner)]

    def list_all(self) -> list[Reservation]:
        return self.store.all()

    def update(
        self,
        owner: str,
        display_index: int,
        new_nights: int | str | None = None,
        new_month: str | None = None,
    ) -> BookingResult:
        """
        Change nights and/or month of one of the owner's reservations.

        new_nights of None, "" or 0 keeps the current value; new_month of
        None or "" keeps the current month.  The room category never
        changes.  The price is always recomputed.
        """
        resolved = self._resolve(owner, display_index)
        if isinstance(resolved, BookingResult):
            return resolved
        index, current = resolved

        nights = current.nights
        keep_nights = (
            new_nights is None
            or not str(new_nights).strip()
            or _to_int(new_nights) == KEEP_NIGHTS
        )
        if not keep_nights:
            nights = _parse_nights(new_nights)
            if nights is None:
                return self._reject(owner, "invalid_nights", f"{new_nights!r}")

        month = current.month
        if new_month is not None and new_month.strip():
            if not is_valid_month(new_month):
                return self._reject(owner, "invalid_month", f"{new_month!r}")
            month = normalize_month(new_month)

        updated = replace(
            current,
            nights=nights,
            month=month,
            total_price=calculate_price(current.category, nights, is_peak_season(month)),
        )
        try:
            self.store.replace(index, updated)
        except PersistenceError as exc:
            return self._reject(owner, "persistence_write_failure", str(exc))

        log.info(
            "owner=%s updated #%d: %d night(s) in %s → %.2f",
            owner, display_index, nights, month, updated.total_price,
        )
        return BookingResult(ok=True, reservation=updated)

    def cancel(self, owner: str, display_index: int) -> BookingResult:
        resolved = self._resolve(owner, display_index)
        if isinstance(resolved, BookingResult):
            return resolved
        index, current = resolved

        try:
            self.store.remove_at(index)
        except PersistenceError as exc:
            return self._reject(owner, "persistence_write_failure", str(exc))

        log.info("owner=%s cancelled #%d (%s, %s)", owner, display_index,
                 current.category.value, current.month)
        return BookingResult(ok=True, reservation=current)

    def admin_summary(self, reservations: list[Reservation] | None = None) -> AdminSummary:
        return summarize(self.store.all() if reservations is None else reservations)

    # -- helpers -------------------------------------------------------------

    def _resolve(
        self, owner: str, display_index: int
    ) -> tuple[int, Reservation] | BookingResult:
        """Map a 1-based display index to (store index, record), or a failure."""
        mine = self.store.find_by_owner(owner)
        if not mine:
            return self._reject(owner, "no_reservations")
        if not 1 <= display_index <= len(mine):
            return self._reject(
                owner, "invalid_selection", f"{display_index} not in 1..{len(mine)}"
            )
        return mine[display_index - 1]

    @staticmethod
    def _reject(owner: str, error: ErrorKind, details: str = "") -> BookingResult:
        log.info("owner=%s rejected: %s %s", owner, error, details)
        return _failure(error, details)
