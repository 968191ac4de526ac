"""Calendar-month validation and peak-season lookup."""

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

PEAK_MONTHS = frozenset({"March", "April", "May", "December"})


def normalize_month(month: str) -> str:
    """Canonical form: first letter upper, the rest lower ("mARCH" -> "March")."""
    month = month.strip()
    return month[:1].upper() + month[1:].lower()


def is_valid_month(month: str) -> bool:
    return normalize_month(month) in MONTHS


def is_peak_season(month: str) -> bool:
    return normalize_month(month) in PEAK_MONTHS
