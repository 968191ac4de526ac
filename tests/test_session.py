"""
Terminal session tests: scripted input, captured output.

Each test feeds the session a list of answers and ends with "3" (Exit)
at the main menu.
"""

import pytest

from src.adapters.memory_account_store import InMemoryAccountStore
from src.adapters.memory_reservation_store import InMemoryReservationStore
from src.domain.accounts import Account
from src.lifecycle import ReservationManager
from src.session import Session


@pytest.fixture
def accounts():
    return InMemoryAccountStore([
        Account("alice", "secret"),
        Account("admin", "root", is_admin=True),
    ])


@pytest.fixture
def store():
    return InMemoryReservationStore()


def _run(accounts, store, answers: list[str]) -> str:
    lines = iter(answers)
    output: list[str] = []

    def answer(prompt: str = "") -> str:
        return next(lines)

    Session(
        accounts,
        ReservationManager(store),
        input_fn=answer,
        output=output.append,
        secret_input=answer,
    ).run()
    return "\n".join(output)


def test_exit(accounts, store):
    out = _run(accounts, store, ["3"])
    assert "Goodbye!" in out


def test_non_numeric_menu_input_reprompts(accounts, store):
    out = _run(accounts, store, ["abc", "3"])
    assert "Invalid input. Please enter a number." in out


def test_bad_login(accounts, store):
    out = _run(accounts, store, ["1", "alice", "wrong", "3"])
    assert "Invalid username or password." in out


def test_register_then_login(accounts, store):
    out = _run(accounts, store, ["2", "bob", "pw", "1", "bob", "pw", "5", "3"])
    assert "Registration successful!" in out
    assert "Welcome, bob!" in out
    assert accounts.get("bob") is not None


def test_register_duplicate(accounts, store):
    out = _run(accounts, store, ["2", "alice", "pw", "3"])
    assert "Username already exists." in out


def test_book_and_view(accounts, store):
    out = _run(accounts, store, [
        "1", "alice", "secret",
        "1", "2", "2", "june",    # Deluxe, 2 nights, June
        "2",
        "5", "3",
    ])
    assert "Total price: 4000.00" in out
    assert store.all()[0].month == "June"
    assert "Deluxe" in out


def test_book_invalid_month_message(accounts, store):
    out = _run(accounts, store, [
        "1", "alice", "secret",
        "1", "1", "2", "Smarch",
        "5", "3",
    ])
    assert "Invalid month" in out
    assert store.all() == []


def test_update_month_keeps_nights(accounts, store):
    out = _run(accounts, store, [
        "1", "alice", "secret",
        "1", "2", "2", "June",
        "3", "1", "", "December",
        "5", "3",
    ])
    assert "New price: 4800.00" in out
    assert store.all()[0].nights == 2


def test_update_with_nothing_booked(accounts, store):
    out = _run(accounts, store, ["1", "alice", "secret", "3", "5", "3"])
    assert "You have no reservations." in out


def test_cancel(accounts, store):
    out = _run(accounts, store, [
        "1", "alice", "secret",
        "1", "1", "1", "January",
        "4", "1",
        "5", "3",
    ])
    assert "Reservation cancelled." in out
    assert store.all() == []


def test_cancel_invalid_selection(accounts, store):
    out = _run(accounts, store, [
        "1", "alice", "secret",
        "1", "1", "1", "January",
        "4", "7",
        "5", "3",
    ])
    assert "Invalid selection." in out
    assert len(store.all()) == 1


def test_admin_summary(accounts, store):
    manager = ReservationManager(store)
    manager.book("alice", "Standard", 1, "June")
    manager.book("alice", "Deluxe", 2, "March")

    out = _run(accounts, store, ["1", "admin", "root", "1", "2", "3", "3"])

    assert "ALL RESERVATIONS" in out
    assert "Total reservations: 2" in out
    assert "Total revenue: 5800.00" in out


def test_input_closed_ends_session(accounts, store):
    def closed(prompt: str = "") -> str:
        raise EOFError

    Session(
        accounts,
        ReservationManager(store),
        input_fn=closed,
        output=lambda line: None,
        secret_input=closed,
    ).run()
