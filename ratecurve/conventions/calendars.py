"""
QuantLib-backed holiday calendars.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

from ratecurve.errors import InvalidArgument


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


def _to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


class Calendar:
    """Business day calendar wrapping a QuantLib calendar."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(_to_ql_date(dt))

    def is_holiday(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a holiday."""
        return self._ql_calendar.isHoliday(_to_ql_date(dt))

    def add_business_days(self, start_date: Union[date, datetime], days: int) -> date:
        """Add business days to a date."""
        ql_result = self._ql_calendar.advance(_to_ql_date(start_date), days, ql.Days)
        return _to_py_date(ql_result)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(("Calendar", self.name))

    def __repr__(self) -> str:
        return f"Calendar({self.name})"


TARGET = Calendar("TARGET", ql.TARGET())
USNY = Calendar("USNY", ql.UnitedStates(ql.UnitedStates.Settlement))
UK = Calendar("UK", ql.UnitedKingdom(ql.UnitedKingdom.Settlement))
JP = Calendar("JP", ql.Japan())
WEEKEND_ONLY = Calendar("WEEKEND", ql.WeekendsOnly())

# Calendar registry
CALENDARS = {
    "TARGET": TARGET,
    "EUR": TARGET,
    "USNY": USNY,
    "USD": USNY,
    "UK": UK,
    "GBLO": UK,
    "JP": JP,
    "JPTO": JP,
    "WEEKEND": WEEKEND_ONLY,
}


def get_calendar(name) -> Calendar:
    """Get a calendar by name, :class:`CalendarType` or instance."""
    if isinstance(name, Calendar):
        return name
    key = name.value if hasattr(name, "value") else str(name).upper()
    if key not in CALENDARS:
        raise InvalidArgument(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
