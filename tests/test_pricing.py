"""Room categories, the pricing rule and the season classifier."""

from decimal import Decimal

import pytest

from src.domain.rooms import RoomCategory, calculate_price, resolve_category
from src.domain.season import MONTHS, is_peak_season, is_valid_month, normalize_month


@pytest.mark.parametrize("category,rate", [
    (RoomCategory.STANDARD, 1000),
    (RoomCategory.DELUXE, 2000),
    (RoomCategory.SUITE, 3000),
])
@pytest.mark.parametrize("nights", [1, 2, 7, 30])
def test_price_off_and_peak(category, rate, nights):
    assert calculate_price(category, nights, False) == Decimal(rate * nights)
    assert calculate_price(category, nights, True) == Decimal(rate * nights) * Decimal("1.2")


def test_price_has_cent_precision():
    price = calculate_price(RoomCategory.DELUXE, 2, True)
    assert price == Decimal("4800.00")
    assert str(price) == "4800.00"


@pytest.mark.parametrize("choice,expected", [
    ("Standard", RoomCategory.STANDARD),
    ("deluxe", RoomCategory.DELUXE),
    ("SUITE", RoomCategory.SUITE),
    (1, RoomCategory.STANDARD),
    ("3", RoomCategory.SUITE),
])
def test_resolve_category(choice, expected):
    assert resolve_category(choice) is expected


@pytest.mark.parametrize("choice", ["Penthouse", "", 0, 4, "-1"])
def test_resolve_unknown_category(choice):
    assert resolve_category(choice) is None


@pytest.mark.parametrize("month", ["March", "april", "MAY", "dEcEmBeR"])
def test_peak_months_in_any_case(month):
    assert is_peak_season(month)


def test_only_four_peak_months():
    assert [m for m in MONTHS if is_peak_season(m)] == ["March", "April", "May", "December"]


def test_unknown_month_is_not_peak():
    assert not is_peak_season("Marchember")


@pytest.mark.parametrize("month", ["january", "JULY", " October "])
def test_valid_month_any_case(month):
    assert is_valid_month(month)


@pytest.mark.parametrize("month", ["", "Jan", "13", "Septembre"])
def test_invalid_month(month):
    assert not is_valid_month(month)


def test_normalize_month():
    assert normalize_month("mARCH") == "March"
    assert normalize_month("") == ""
