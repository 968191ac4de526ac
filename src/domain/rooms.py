"""
Room categories and the pricing rule.

The category set is closed: Standard, Deluxe and Suite, each with a fixed
nightly base rate.  Peak-season stays carry a 20% surcharge.
"""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

PEAK_SURCHARGE = Decimal("1.20")
_CENTS = Decimal("0.01")


class RoomCategory(Enum):
    STANDARD = "Standard"
    DELUXE = "Deluxe"
    SUITE = "Suite"

    @property
    def base_rate(self) -> Decimal:
        return _BASE_RATES[self]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_BASE_RATES = {
    RoomCategory.STANDARD: Decimal("1000"),
    RoomCategory.DELUXE: Decimal("2000"),
    RoomCategory.SUITE: Decimal("3000"),
}

_DESCRIPTIONS = {
    RoomCategory.STANDARD: "A Standard Room with basic amenities.",
    RoomCategory.DELUXE: "A Deluxe Room with enhanced comfort.",
    RoomCategory.SUITE: "A Suite Room with luxury amenities.",
}


def resolve_category(choice: str | int) -> RoomCategory | None:
    """
    Map user input to a RoomCategory, or None if unrecognized.

    Accepts the menu number (1-3) or the category name in any case.
    """
    text = str(choice).strip()
    if text.isdigit():
        members = list(RoomCategory)
        index = int(text)
        return members[index - 1] if 1 <= index <= len(members) else None
    for category in RoomCategory:
        if category.value.lower() == text.lower():
            return category
    return None


def calculate_price(category: RoomCategory, nights: int, is_peak: bool) -> Decimal:
    """Total for a stay, rounded to cents. Callers must reject nights < 1."""
    amount = category.base_rate * nights
    if is_peak:
        amount *= PEAK_SURCHARGE
    return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
