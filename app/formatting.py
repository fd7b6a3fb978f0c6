"""
Display formatting for amounts and timestamps.

Records coming from the banking backend carry money as integer minor units
(hundredths) and time as integer nanoseconds since the epoch. Conversion
between minor and major units happens only in from_minor_units and
to_minor_units; every other helper works in major units.
"""

from datetime import datetime, timezone, tzinfo
from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[int, float, Decimal]

MINOR_UNITS_PER_MAJOR = 100
NANOSECONDS_PER_MILLISECOND = 1_000_000

_CENT = Decimal("0.01")


def from_minor_units(amount_minor: int) -> Decimal:
    """Convert an integer minor-unit amount into major units."""
    return Decimal(int(amount_minor)) / MINOR_UNITS_PER_MAJOR


def to_minor_units(amount: Number) -> int:
    """
    Convert a major-unit amount into integer minor units.

    Fractions of a cent are floored, so 10.999 becomes 1099.
    """
    scaled = Decimal(str(amount)) * MINOR_UNITS_PER_MAJOR
    return int(scaled.to_integral_value(rounding=ROUND_FLOOR))


def format_currency(amount: Number, currency_symbol: str = "$") -> str:
    """
    Format a major-unit amount, e.g. 1234.5 -> "$1,234.50", -3 -> "-$3.00".
    """
    value = Decimal(str(amount)).quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{currency_symbol}{abs(value):,.2f}"


def format_minor_units(amount_minor: int, currency_symbol: str = "$") -> str:
    """Format a backend amount stored in minor units."""
    return format_currency(from_minor_units(amount_minor), currency_symbol)


def timestamp_to_datetime(
    timestamp_ns: int, tz: Optional[tzinfo] = None
) -> datetime:
    """Convert nanoseconds since the epoch into an aware datetime."""
    if timestamp_ns < 0:
        raise ValueError("Timestamp must be a non-negative count of nanoseconds")

    millis = int(timestamp_ns) // NANOSECONDS_PER_MILLISECOND
    moment = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    return moment.astimezone(tz or timezone.utc)


def format_date(timestamp_ns: int, tz: Optional[tzinfo] = None) -> str:
    """
    Render a nanosecond timestamp for display, e.g. "Oct 17, 2026, 10:07 PM".

    Args:
        timestamp_ns: Nanoseconds since the epoch
        tz: Display timezone (UTC if omitted)
    """
    moment = timestamp_to_datetime(timestamp_ns, tz)
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return (
        f"{moment:%b} {moment.day}, {moment.year}, "
        f"{hour:02d}:{moment.minute:02d} {meridiem}"
    )
