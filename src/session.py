"""
Terminal session: login/registration, the user menu and the admin menu.

Everything the user types is collected here and handed to the
ReservationManager as plain values; the manager's error tags are turned
into messages.  Input and output callables are injectable so a session
can be scripted from tests.
"""

import getpass
import logging
from typing import Callable

from src.domain.accounts import Account, AccountStore
from src.domain.errors import PersistenceError
from src.domain.reservation import Reservation
from src.domain.rooms import RoomCategory
from src.lifecycle import BookingResult, ReservationManager

log = logging.getLogger(__name__)

ERROR_MESSAGES = {
    "invalid_category": "Invalid room type selected.",
    "invalid_nights": "Number of nights must be a positive number.",
    "invalid_month": "Invalid month. Please enter a full month name (e.g. January).",
    "no_reservations": "You have no reservations.",
    "invalid_selection": "Invalid selection.",
    "persistence_write_failure": "Could not save your changes. Nothing was modified.",
    "invalid_username": "Username must be non-empty and contain no spaces or commas.",
    "invalid_password": "Password must be non-empty and contain no commas.",
    "username_taken": "Username already exists.",
}


class Session:

    def __init__(
        self,
        accounts: AccountStore,
        manager: ReservationManager,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        secret_input: Callable[[str], str] = getpass.getpass,
    ):
        self._accounts = accounts
        self._manager = manager
        self._input = input_fn
        self._out = output
        self._secret = secret_input

    # -- main menu -----------------------------------------------------------

    def run(self) -> None:
        try:
            while True:
                self._header("HOTEL RESERVATION SYSTEM")
                self._option(1, "Login")
                self._option(2, "Register")
                self._option(3, "Exit")
                choice = self._ask_int("Enter your choice: ")
                if choice == 1:
                    account = self._login()
                    if account is None:
                        continue
                    if account.is_admin:
                        self._admin_menu(account)
                    else:
                        self._user_menu(account)
                elif choice == 2:
                    self._register()
                elif choice == 3:
                    self._out("Goodbye!")
                    return
                else:
                    self._out("Invalid choice.")
        except EOFError:
            log.info("Input closed, ending session")

    def _login(self) -> Account | None:
        self._header("LOGIN")
        username = self._input("Username: ").strip()
        password = self._secret("Password: ")
        account = self._accounts.authenticate(username, password)
        if account is None:
            log.info("Failed login for %r", username)
            self._out("Invalid username or password.")
            return None
        log.info("User %s logged in (admin=%s)", account.username, account.is_admin)
        self._out(f"Welcome, {account.username}!")
        return account

    def _register(self) -> None:
        self._header("REGISTER")
        username = self._input("Choose a username: ").strip()
        password = self._secret("Choose a password: ")
        try:
            result = self._accounts.register(username, password)
        except PersistenceError:
            self._out(ERROR_MESSAGES["persistence_write_failure"])
            return
        if not result.ok:
            self._out(ERROR_MESSAGES[result.error])
            return
        log.info("Registered user %s", username)
        self._out("Registration successful! You can now log in.")

    # -- user menu -----------------------------------------------------------

    def _user_menu(self, account: Account) -> None:
        owner = account.username
        while True:
            self._header(f"USER MENU ({owner})")
            self._option(1, "Make a reservation")
            self._option(2, "View my reservations")
            self._option(3, "Update a reservation")
            self._option(4, "Cancel a reservation")
            self._option(5, "Logout")
            choice = self._ask_int("Enter your choice: ")
            if choice == 1:
                self._book(owner)
            elif choice == 2:
                self._show_mine(owner)
            elif choice == 3:
                self._update(owner)
            elif choice == 4:
                self._cancel(owner)
            elif choice == 5:
                log.info("User %s logged out", owner)
                return
            else:
                self._out("Invalid choice.")

    def _book(self, owner: str) -> None:
        self._header("MAKE A RESERVATION")
        for number, category in enumerate(RoomCategory, start=1):
            self._option(
                number,
                f"{category.value} ({category.base_rate:.0f}/night) - {category.description}",
            )
        choice = self._ask_int("Select room type: ")
        nights = self._ask_int("Number of nights: ")
        month = self._input("Month of stay (e.g. January): ")
        result = self._manager.book(owner, choice, nights, month)
        if self._report(result):
            r = result.reservation
            self._out(f"Reservation confirmed! Total price: {r.total_price:.2f}")

    def _show_mine(self, owner: str) -> list[Reservation]:
        mine = self._manager.list_mine(owner)
        self._header("MY RESERVATIONS")
        if not mine:
            self._out(ERROR_MESSAGES["no_reservations"])
        else:
            self._table(mine)
        return mine

    def _update(self, owner: str) -> None:
        if not self._show_mine(owner):
            return
        index = self._ask_int("Select reservation to update: ")
        nights = self._input("New number of nights (0 or blank keeps current): ")
        month = self._input("New month (blank keeps current): ")
        result = self._manager.update(owner, index, nights, month)
        if self._report(result):
            self._out(f"Reservation updated! New price: {result.reservation.total_price:.2f}")

    def _cancel(self, owner: str) -> None:
        if not self._show_mine(owner):
            return
        index = self._ask_int("Select reservation to cancel: ")
        if self._report(self._manager.cancel(owner, index)):
            self._out("Reservation cancelled.")

    # -- admin menu ----------------------------------------------------------

    def _admin_menu(self, account: Account) -> None:
        while True:
            self._header("ADMIN MENU")
            self._option(1, "View all reservations")
            self._option(2, "Revenue summary")
            self._option(3, "Logout")
            choice = self._ask_int("Enter your choice: ")
            if choice == 1:
                self._header("ALL RESERVATIONS")
                everything = self._manager.list_all()
                if everything:
                    self._table(everything, with_owner=True)
                else:
                    self._out("No reservations found.")
            elif choice == 2:
                summary = self._manager.admin_summary()
                self._header("REVENUE SUMMARY")
                self._out(f"Total reservations: {summary.count}")
                self._out(f"Total revenue: {summary.total_revenue:.2f}")
            elif choice == 3:
                log.info("Admin %s logged out", account.username)
                return
            else:
                self._out("Invalid choice.")

    # -- rendering and input helpers ------------------------------------------

    def _report(self, result: BookingResult) -> bool:
        if not result.ok:
            self._out(ERROR_MESSAGES[result.error])
        return result.ok

    def _ask_int(self, prompt: str) -> int:
        while True:
            raw = self._input(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self._out("Invalid input. Please enter a number.")

    def _header(self, title: str) -> None:
        self._out("=" * 50)
        self._out(f"  {title}")
        self._out("=" * 50)

    def _option(self, number: int, text: str) -> None:
        self._out(f"  {number}. {text}")

    def _table(self, records: list[Reservation], with_owner: bool = False) -> None:
        owner_col = f"  {'Owner':<12}" if with_owner else ""
        self._out(f"{'#':>3}{owner_col}  {'Room':<10}  {'Nights':>6}  {'Price':>10}  Month")
        self._out("-" * (50 + (14 if with_owner else 0)))
        for number, r in enumerate(records, start=1):
            owner_cell = f"  {r.owner:<12}" if with_owner else ""
            self._out(
                f"{number:>3}{owner_cell}  {r.category.value:<10}  {r.nights:>6}"
                f"  {r.total_price:>10.2f}  {r.month}"
            )
