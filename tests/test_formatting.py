"""
Tests for amount and timestamp display formatting.
"""

from datetime import datetime, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from app.formatting import (
    format_currency,
    format_date,
    format_minor_units,
    from_minor_units,
    timestamp_to_datetime,
    to_minor_units,
)


def _ns(moment: datetime) -> int:
    return int(moment.timestamp()) * 1_000_000_000


class TestCurrency:
    """Test currency formatting."""

    def test_two_fraction_digits_and_grouping(self):
        assert format_currency(1234.5) == "$1,234.50"
        assert format_currency(1000000) == "$1,000,000.00"
        assert format_currency(0) == "$0.00"

    def test_rounds_half_up_to_cents(self):
        assert format_currency(2051.645) == "$2,051.65"
        assert format_currency(0.004) == "$0.00"

    def test_negative_sign_precedes_symbol(self):
        assert format_currency(-3) == "-$3.00"
        assert format_currency(-1234.567) == "-$1,234.57"

    def test_custom_symbol(self):
        assert format_currency(10, currency_symbol="€") == "€10.00"

    def test_minor_units_are_converted_once(self):
        """Backend amounts in cents display as major units."""
        assert format_minor_units(123456) == "$1,234.56"
        assert format_minor_units(5) == "$0.05"


class TestMinorUnits:
    """Test the single minor/major unit boundary."""

    def test_from_minor_units(self):
        assert from_minor_units(1099) == Decimal("10.99")

    def test_to_minor_units_floors_fractions_of_a_cent(self):
        assert to_minor_units(10.999) == 1099
        assert to_minor_units(0.29) == 29
        assert to_minor_units("150") == 15000

    def test_to_minor_units_avoids_float_drift(self):
        """1.15 * 100 is 114.999... as a float but 115 cents."""
        assert to_minor_units(1.15) == 115


class TestDate:
    """Test nanosecond timestamp formatting."""

    def test_format_known_timestamp(self):
        moment = datetime(2026, 10, 17, 22, 7, tzinfo=timezone.utc)
        assert format_date(_ns(moment)) == "Oct 17, 2026, 10:07 PM"

    def test_morning_hours_are_two_digits(self):
        moment = datetime(2024, 1, 5, 9, 3, tzinfo=timezone.utc)
        assert format_date(_ns(moment)) == "Jan 5, 2024, 09:03 AM"

    def test_midnight_and_noon(self):
        midnight = datetime(2024, 3, 1, 0, 15, tzinfo=timezone.utc)
        noon = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
        assert format_date(_ns(midnight)) == "Mar 1, 2024, 12:15 AM"
        assert format_date(_ns(noon)) == "Mar 1, 2024, 12:00 PM"

    def test_display_timezone(self):
        moment = datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc)
        shown = format_date(_ns(moment), ZoneInfo("America/New_York"))
        assert shown == "Jul 1, 2024, 08:00 AM"

    def test_sub_millisecond_precision_is_dropped(self):
        base = _ns(datetime(2024, 1, 1, tzinfo=timezone.utc))
        assert timestamp_to_datetime(base + 999_999) == timestamp_to_datetime(base)

    def test_epoch(self):
        assert format_date(0) == "Jan 1, 1970, 12:00 AM"

    def test_negative_timestamp_rejected(self):
        with pytest.raises(ValueError):
            format_date(-1)
