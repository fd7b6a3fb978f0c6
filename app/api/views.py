"""
Display helpers shared by the record endpoints.

Backend records keep minor units and nanosecond timestamps; these helpers
produce the strings shown next to them.
"""

from app.config import get_settings
from app.formatting import format_currency, format_date, format_minor_units


def amount_display(amount_minor: int) -> str:
    return format_minor_units(amount_minor, get_settings().currency_symbol)


def money_display(amount: float) -> str:
    return format_currency(amount, get_settings().currency_symbol)


def time_display(timestamp_ns: int) -> str:
    return format_date(timestamp_ns, get_settings().display_tz)
