"""
Business day adjustment, spot lag handling and tenor date arithmetic.
"""

from datetime import date, datetime, timedelta
from typing import Union

from ratecurve.conventions.calendars import Calendar, get_calendar
from ratecurve.conventions.types import BusinessDayAdjustment
from ratecurve.errors import InvalidArgument
from ratecurve.schema.tenor import Tenor


def adjust_date(
    dt: Union[date, datetime], adjustment: BusinessDayAdjustment, calendar: Calendar
) -> date:
    """Apply business day adjustment to a date."""
    if isinstance(dt, datetime):
        dt = dt.date()

    if adjustment == BusinessDayAdjustment.NO_ADJUSTMENT:
        return dt

    elif adjustment == BusinessDayAdjustment.FOLLOWING:
        return _roll(dt, calendar, 1)

    elif adjustment == BusinessDayAdjustment.MODIFIED_FOLLOWING:
        adjusted = _roll(dt, calendar, 1)
        # If month changed, use preceding instead
        if adjusted.month != dt.month:
            adjusted = _roll(dt, calendar, -1)
        return adjusted

    elif adjustment == BusinessDayAdjustment.PRECEDING:
        return _roll(dt, calendar, -1)

    elif adjustment == BusinessDayAdjustment.MODIFIED_PRECEDING:
        adjusted = _roll(dt, calendar, -1)
        if adjusted.month != dt.month:
            adjusted = _roll(dt, calendar, 1)
        return adjusted

    raise InvalidArgument(f"Unsupported business day adjustment: {adjustment}")


def _roll(dt: date, calendar: Calendar, step: int) -> date:
    while not calendar.is_business_day(dt):
        dt += timedelta(days=step)
    return dt


def get_spot_date(
    trade_date: Union[date, datetime], calendar: Calendar = None, spot_lag: int = 2
) -> date:
    """Get spot date from trade date (default: 2 business days + weekend-only calendar)."""
    if isinstance(trade_date, datetime):
        trade_date = trade_date.date()
    if calendar is None:
        calendar = get_calendar("WEEKEND")
    return calendar.add_business_days(trade_date, spot_lag)


def compute_maturity(
    curve_date: Union[date, datetime],
    tenor: Union[str, Tenor],
    calendar: Calendar = None,
    spot_lag: int = 2,
    business_day_adjustment: BusinessDayAdjustment = BusinessDayAdjustment.MODIFIED_FOLLOWING,
) -> date:
    """Compute maturity date from curve date and tenor."""
    if calendar is None:
        calendar = get_calendar("WEEKEND")
    tenor = Tenor.parse(tenor)
    spot = get_spot_date(curve_date, calendar, spot_lag)

    # Short tenors (days/weeks) use calendar day arithmetic
    if tenor.total_months() == 0:
        return tenor.add_to(spot)

    return adjust_date(tenor.add_to(spot), business_day_adjustment, calendar)
